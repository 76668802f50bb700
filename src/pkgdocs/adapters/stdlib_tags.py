"""Tag resolver adapter backed by the standard library versioning rules."""

from __future__ import annotations

import logging

from pkgdocs.core.interfaces import TagResolverPort
from pkgdocs.core.stdlib import tag_for_version

logger = logging.getLogger(__name__)


class StdlibTagResolver(TagResolverPort):
    """Resolves standard library versions to go.googlesource.com tags."""

    def resolve(self, version: str) -> str:
        tag = tag_for_version(version)
        logger.debug("Resolved %s to tag %s", version, tag)
        return tag
