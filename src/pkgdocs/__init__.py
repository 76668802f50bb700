"""pkgdocs: documentation and source-link helpers for a package docs frontend."""

__version__ = "0.1.0"
