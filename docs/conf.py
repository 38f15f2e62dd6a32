"""Sphinx configuration for utf16-reader documentation."""

import utf16_reader

project = "utf16-reader"
copyright = "2026, utf16-reader contributors"
author = "utf16-reader contributors"
release = utf16_reader.__version__
version = ".".join(release.split(".")[:2])

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx_copybutton",
]

templates_path = ["_templates"]
exclude_patterns = ["_build"]

html_theme = "furo"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

autodoc_member_order = "bysource"
autodoc_typehints = "description"
