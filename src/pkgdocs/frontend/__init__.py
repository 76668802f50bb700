"""Helpers used by the documentation page handlers."""

from pkgdocs.frontend.documentation import (
    DocumentationRenderer,
    LinkRewriter,
    render_documentation,
)
from pkgdocs.frontend.source import SourceLocator, file_source

__all__ = [
    "DocumentationRenderer",
    "LinkRewriter",
    "SourceLocator",
    "file_source",
    "render_documentation",
]
