"""Tests for domain models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pkgdocs.core.models import DocumentationDetails, VersionedPackage


class TestVersionedPackage:
    """Tests for VersionedPackage."""

    def test_defaults(self) -> None:
        pkg = VersionedPackage(path="fmt", module_path="std", version="v1.20.4")
        assert pkg.goos == ""
        assert pkg.goarch == ""
        assert pkg.documentation_html == b""

    def test_is_frozen(self) -> None:
        pkg = VersionedPackage(path="fmt", module_path="std", version="v1.20.4")
        with pytest.raises(ValidationError):
            pkg.goos = "linux"  # type: ignore[misc]

    def test_requires_identity(self) -> None:
        with pytest.raises(ValidationError):
            VersionedPackage(path="fmt")  # type: ignore[call-arg]


class TestDocumentationDetails:
    """Tests for DocumentationDetails."""

    def test_fields(self) -> None:
        details = DocumentationDetails(goos="linux", goarch="amd64", documentation="<p>x</p>")
        assert details.model_dump() == {
            "goos": "linux",
            "goarch": "amd64",
            "documentation": "<p>x</p>",
        }

    def test_is_frozen(self) -> None:
        details = DocumentationDetails(goos="linux", goarch="amd64", documentation="")
        with pytest.raises(ValidationError):
            details.documentation = "<script>"  # type: ignore[misc]
