"""Error hierarchy for pkgdocs."""

from __future__ import annotations


class PkgdocsError(Exception):
    """Base exception for all pkgdocs errors."""

    pass


class ConfigError(PkgdocsError):
    """Configuration loading or validation error."""

    pass


class TagResolutionError(PkgdocsError):
    """A version could not be mapped to a standard library source tag."""

    def __init__(self, version: str, reason: str) -> None:
        super().__init__(f"TagForVersion({version!r}): {reason}")
        self.version = version
        self.reason = reason
