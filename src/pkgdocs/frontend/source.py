"""Source links for files within a module version."""

from __future__ import annotations

import logging

from pkgdocs.core.errors import TagResolutionError
from pkgdocs.core.interfaces import TagResolverPort
from pkgdocs.core.stdlib import GO_REPO_URL, STDLIB_MODULE_PATH

logger = logging.getLogger(__name__)


class SourceLocator:
    """Computes where the source of a file in a module version can be viewed.

    For ordinary modules this is the file's location in the module zip,
    <module>@<version>/<file>. Standard library files are linked to the Go
    repository at the tag for the requested version.
    """

    def __init__(
        self,
        tag_resolver: TagResolverPort,
        stdlib_module_path: str = STDLIB_MODULE_PATH,
        repo_url: str = GO_REPO_URL,
    ) -> None:
        self._tag_resolver = tag_resolver
        self._stdlib_module_path = stdlib_module_path
        self._root = repo_url.removeprefix("https://")

    def locate(self, module_path: str, version: str, file_path: str) -> str:
        """Return the source location of file_path in module_path at version.

        Never raises. If the standard library version has no tag, the
        file on the master branch is returned instead.
        """
        if module_path != self._stdlib_module_path:
            return f"{module_path}@{version}/{file_path}"

        try:
            tag = self._tag_resolver.resolve(version)
        except TagResolutionError as e:
            # Only reachable through a bug in tag resolution.
            logger.error("file_source: %s", e)
            return f"{self._root}/+/refs/heads/master/{file_path}"
        return f"{self._root}/+/refs/tags/{tag}/{file_path}"


def file_source(module_path: str, version: str, file_path: str) -> str:
    """Return the source location using the default standard library resolver."""
    from pkgdocs.adapters.stdlib_tags import StdlibTagResolver

    return SourceLocator(StdlibTagResolver()).locate(module_path, version, file_path)
