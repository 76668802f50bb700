"""Standard library module identity and version-to-tag mapping."""

from __future__ import annotations

import re

from pkgdocs.core.errors import TagResolutionError

STDLIB_MODULE_PATH = "std"
"""Reserved module path under which the standard library is served."""

GO_REPO_URL = "https://go.googlesource.com/go"
"""Repository hosting the standard library sources."""

# vMAJOR[.MINOR[.PATCH[-prerelease][+build]]]
_SEMVER_PATTERN = re.compile(
    r"^v(0|[1-9]\d*)"
    r"(?:\.(0|[1-9]\d*)"
    r"(?:\.(0|[1-9]\d*)"
    r"(?:-([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
    r")?)?\Z"
)

_FINAL_DIGITS_PATTERN = re.compile(r"\d+\Z")

# From go1.21 on, the first release of a minor version carries an explicit .0.
_FIRST_FULL_PATCH_MINOR = 21


def tag_for_version(version: str) -> str:
    """Return the Go repository tag for a standard library semantic version.

    Examples:
        v1.20.4        -> go1.20.4
        v1.12.0        -> go1.12
        v1.21.0        -> go1.21.0
        v1.13.0-beta.1 -> go1.13beta1

    Raises:
        TagResolutionError: If version is not a valid Go 1 semantic version.
    """
    match = _SEMVER_PATTERN.match(version)
    if match is None:
        raise TagResolutionError(version, "invalid semantic version")

    major, minor, patch, prerelease = match.groups()
    if major != "1":
        raise TagResolutionError(version, f"no Go release with major version {major}")

    minor = minor or "0"
    patch = patch or "0"

    tag = f"go{major}.{minor}"
    if patch != "0" or (int(minor) >= _FIRST_FULL_PATCH_MINOR and not prerelease):
        tag += f".{patch}"
    if prerelease:
        # Go prerelease tags look like "beta1" rather than "beta.1". The
        # undotted form sorts badly (beta10 before beta9), so it is rejected.
        digits = _FINAL_DIGITS_PATTERN.search(prerelease)
        if digits is not None:
            i = digits.start()
            if i == 0 or prerelease[i - 1] != ".":
                raise TagResolutionError(
                    version, "prerelease must separate its final number with a dot"
                )
            prerelease = prerelease[: i - 1] + prerelease[i:]
        tag += prerelease
    return tag
