"""Domain models for pkgdocs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class VersionedPackage(BaseModel):
    """A package at a specific module version, as supplied by the data source."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(description="Import path of the package")
    module_path: str = Field(description="Path of the module containing the package")
    version: str = Field(description="Module version")
    goos: str = Field(default="", description="GOOS the documentation was rendered for")
    goarch: str = Field(default="", description="GOARCH the documentation was rendered for")
    documentation_html: bytes = Field(default=b"", description="Rendered documentation HTML")


class DocumentationDetails(BaseModel):
    """Data for the documentation template."""

    model_config = ConfigDict(frozen=True)

    goos: str = Field(description="GOOS the documentation was rendered for")
    goarch: str = Field(description="GOARCH the documentation was rendered for")
    documentation: str = Field(description="Trusted documentation HTML")
