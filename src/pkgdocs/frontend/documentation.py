"""Documentation details for the package doc page."""

from __future__ import annotations

import logging
import re

from pkgdocs.core.models import DocumentationDetails, VersionedPackage

logger = logging.getLogger(__name__)

# Cross-package identifier links generated by the doc renderer take one of
# the forms
#     <a href="/pkg/[path]">[name]</a>
#     <a href="/pkg/[path]#identifier">[name]</a>
# Rewriting drops the '/pkg' prefix and adds an explicit ?tab=doc after the path.
PACKAGE_LINK_PATTERN = rb'(<a href="/)pkg/([^?#"]+)((?:#[^"]*)?">.*?</a>)'

# PACKAGE_LINK_PATTERN split at the lazy link text. The head can only end
# at the first '"' after the path, so the text is the shortest run up to
# "</a>" that stays on one line.
_LINK_START = b'<a href="/pkg/'
_LINK_HEAD_PATTERN = rb'(<a href="/)pkg/([^?#"]+)((?:#[^"]*)?">)'
_LINK_END = b"</a>"


class _ForwardFinder:
    """Finds the next occurrence of needle, reusing the last search where it applies.

    Returns len(doc) when there is none. While positions only increase, each
    byte of doc is searched at most once over the lifetime of the finder.
    """

    def __init__(self, doc: bytes, needle: bytes) -> None:
        self._doc = doc
        self._needle = needle
        self._from = 0
        self._next = -1

    def find(self, pos: int) -> int:
        if self._next < pos or pos < self._from:
            self._from = pos
            found = self._doc.find(self._needle, pos)
            self._next = len(self._doc) if found == -1 else found
        return self._next


class LinkRewriter:
    """Rewrites package links in stored documentation to the current URL scheme.

    This saves re-processing all existing documentation for what is a trivial
    change to its links. The enabled flag is fixed at construction.

    The result is what PACKAGE_LINK_PATTERN would substitute, computed in time
    linear in the size of doc: a link with no closing tag on its line costs
    no more than one that has one.
    """

    def __init__(self, enabled: bool = False) -> None:
        self._enabled = enabled
        self._head = re.compile(_LINK_HEAD_PATTERN)

    @property
    def enabled(self) -> bool:
        """Whether links are rewritten."""
        return self._enabled

    def rewrite(self, doc: bytes) -> bytes:
        """Return doc with every package link rewritten, or doc itself if disabled."""
        if not self._enabled:
            return doc

        closes = _ForwardFinder(doc, _LINK_END)
        newlines = _ForwardFinder(doc, b"\n")
        parts: list[bytes] = []
        copied = 0
        count = 0

        start = doc.find(_LINK_START)
        while start != -1:
            head = self._head.match(doc, start)
            if head is not None:
                close = closes.find(head.end())
                if close < newlines.find(head.end()):
                    end = close + len(_LINK_END)
                    parts.append(doc[copied:start])
                    parts.append(head[1] + head[2] + b"?tab=doc" + head[3])
                    parts.append(doc[head.end() : end])
                    copied = end
                    count += 1
                    start = doc.find(_LINK_START, end)
                    continue
            start = doc.find(_LINK_START, start + 1)

        if not count:
            return doc
        parts.append(doc[copied:])
        logger.debug("Rewrote %d package links", count)
        return b"".join(parts)


class DocumentationRenderer:
    """Builds DocumentationDetails from versioned packages."""

    def __init__(self, rewriter: LinkRewriter) -> None:
        self._rewriter = rewriter

    @property
    def rewriter(self) -> LinkRewriter:
        return self._rewriter

    def render(self, pkg: VersionedPackage) -> DocumentationDetails:
        """Return the documentation details for pkg, rewriting links if enabled."""
        doc = self._rewriter.rewrite(pkg.documentation_html)
        return DocumentationDetails(
            goos=pkg.goos,
            goarch=pkg.goarch,
            documentation=doc.decode("utf-8", errors="replace"),
        )


def render_documentation(pkg: VersionedPackage, enabled: bool = False) -> DocumentationDetails:
    """Render pkg's documentation with a one-off renderer."""
    return DocumentationRenderer(LinkRewriter(enabled)).render(pkg)
