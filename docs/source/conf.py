# docs/source/conf.py
import os
import sys

# autodoc imports tensorprimer from the src layout
sys.path.insert(0, os.path.abspath("../../src"))

project = "TensorPrimer"
author = "Mohammad Ali Javidian"
release = "0.1.0"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.napoleon",
    "sphinx.ext.intersphinx",
    "myst_parser",
]
autosummary_generate = True
autodoc_default_options = {
    "members": True,
    "undoc-members": True,
}
# plotting pulls in matplotlib; not needed to render signatures
autodoc_mock_imports = ["matplotlib"]

# Docstrings in core/ are free-form NumPy style
napoleon_numpy_docstring = True
napoleon_google_docstring = False

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable", None),
}

myst_enable_extensions = ["colon_fence"]
source_suffix = {".md": "markdown", ".rst": "restructuredtext"}
master_doc = "index"

html_theme = "furo"
html_title = "TensorPrimer"
