"""Command-line interface for utf16_reader."""

from __future__ import annotations

import argparse
import codecs
import logging
import sys

import utf16_reader
from utf16_reader.enums import Endianness
from utf16_reader.errors import Utf16ReaderError


def _encoding(name: str) -> str:
    try:
        return codecs.lookup(name).name
    except LookupError:
        msg = f"unknown encoding: {name}"
        raise argparse.ArgumentTypeError(msg) from None


def main(argv: list[str] | None = None) -> None:
    """Run the ``utf16-read`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Decode UTF-16 files and write them to stdout."
    )
    parser.add_argument("files", nargs="*", help="Files to decode (default: stdin)")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Drop a dangling trailing byte instead of failing",
    )
    parser.add_argument(
        "--little-endian",
        action="store_true",
        help="Assume little-endian when there is no byte-order mark",
    )
    parser.add_argument(
        "--output-encoding",
        type=_encoding,
        default="utf-8",
        help="Encoding of the text written to stdout (default: utf-8)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log decoding details to stderr"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"utf16-reader {utf16_reader.__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    endianness = Endianness.LITTLE if args.little_endian else Endianness.BIG
    options = {"strict": not args.lenient, "default_endianness": endianness}

    failed = False
    out = sys.stdout.buffer
    if args.files:
        for filepath in args.files:
            try:
                text = utf16_reader.decode_file(filepath, **options)
                encoded = text.encode(args.output_encoding)
            except (OSError, Utf16ReaderError, UnicodeEncodeError) as e:
                print(f"utf16-read: {filepath}: {e}", file=sys.stderr)
                failed = True
                continue
            out.write(encoded)
    else:
        try:
            text = utf16_reader.decode(sys.stdin.buffer, **options)
            encoded = text.encode(args.output_encoding)
        except (Utf16ReaderError, UnicodeEncodeError) as e:
            print(f"utf16-read: stdin: {e}", file=sys.stderr)
            sys.exit(1)
        out.write(encoded)
    out.flush()

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
