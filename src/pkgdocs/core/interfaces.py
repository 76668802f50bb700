"""Port interfaces for pkgdocs (hexagonal architecture)."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TagResolverPort(ABC):
    """Port for mapping standard library versions to source control tags.

    Implementations must signal every failure as TagResolutionError. Source
    locations fall back to the master branch on that error only; anything
    else propagates to the caller.
    """

    @abstractmethod
    def resolve(self, version: str) -> str:
        """Return the source control tag for a standard library version.

        Args:
            version: Semantic version of the standard library (e.g. v1.20.4).

        Returns:
            The repository tag (e.g. go1.20.4).

        Raises:
            TagResolutionError: If the version has no corresponding tag.
        """
