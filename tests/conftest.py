"""Shared test fixtures for pkgdocs."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest

from pkgdocs.config import FrontendConfig
from pkgdocs.container import Container
from pkgdocs.core.errors import TagResolutionError
from pkgdocs.core.interfaces import TagResolverPort
from pkgdocs.core.models import VersionedPackage


@pytest.fixture(autouse=True)
def _clear_documentation_hack_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment from leaking into config tests."""
    monkeypatch.delenv("PKGDOCS_DOCUMENTATION_HACK", raising=False)


@pytest.fixture()
def tag_resolver() -> MagicMock:
    """A mock tag resolver mapping v1.20.4 to go1.20.4 and failing otherwise."""
    resolver = MagicMock(spec=TagResolverPort)

    def resolve(version: str) -> str:
        if version == "v1.20.4":
            return "go1.20.4"
        raise TagResolutionError(version, "invalid semantic version")

    resolver.resolve.side_effect = resolve
    return resolver


@pytest.fixture()
def hack_container(tag_resolver: MagicMock) -> Container:
    """A container with link rewriting enabled and a mocked tag resolver."""
    return Container.create_for_testing(
        config=FrontendConfig(documentation_hack=True),
        tag_resolver=tag_resolver,
    )


@pytest.fixture()
def make_package() -> Callable[..., VersionedPackage]:
    """Factory for creating test packages."""

    def factory(
        documentation_html: bytes = b"",
        goos: str = "linux",
        goarch: str = "amd64",
        **kwargs: Any,
    ) -> VersionedPackage:
        fields: dict[str, Any] = {
            "path": "github.com/foo/bar/baz",
            "module_path": "github.com/foo/bar",
            "version": "v1.2.3",
        }
        fields.update(kwargs)
        return VersionedPackage(
            goos=goos,
            goarch=goarch,
            documentation_html=documentation_html,
            **fields,
        )

    return factory
