#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Checked-in build version, loaded once per build invocation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from attrs import define, evolve, field
from provide.foundation import logger
from provide.foundation.file.formats import read_json, write_json

from easybuilder.config.defaults import DEFAULT_BUILD, DEFAULT_MAJOR, DEFAULT_MINOR, DEFAULT_REVISION
from easybuilder.exceptions import VersionFileError

_VERSION_KEYS = ("major", "minor", "build", "revision")


@define(frozen=True)
class BuildVersion:
    """Version numbers of a build.

    ``bundle_version`` is the user-facing version string. When the version file
    does not set it, it is derived as ``major.minor.revision``.
    """

    major: int = DEFAULT_MAJOR
    minor: int = DEFAULT_MINOR
    build: int = DEFAULT_BUILD
    revision: int = DEFAULT_REVISION
    _bundle_version: str | None = field(default=None, alias="bundle_version")

    @property
    def bundle_version(self) -> str:
        if self._bundle_version is not None:
            return self._bundle_version
        return f"{self.major}.{self.minor}.{self.revision}"

    def package_version(self, build_number: int | None = None) -> str:
        """Four-part version ``major.minor.build.revision`` used by package manifests."""
        build = self.build if build_number is None else build_number
        return f"{self.major}.{self.minor}.{build}.{self.revision}"

    def bump_build(self) -> BuildVersion:
        """Return a copy with the build counter incremented."""
        return evolve(self, build=self.build + 1)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BuildVersion:
        """Build a version from parsed version-file content."""
        values: dict[str, Any] = {}
        for key in _VERSION_KEYS:
            if key not in data:
                continue
            number = data[key]
            if isinstance(number, bool) or not isinstance(number, int) or number < 0:
                raise VersionFileError(f"Version field '{key}' must be a non-negative integer, got {number!r}")
            values[key] = number

        bundle_version = data.get("bundle_version")
        if bundle_version is not None:
            if not isinstance(bundle_version, str) or not bundle_version:
                raise VersionFileError(f"Version field 'bundle_version' must be a non-empty string, got {bundle_version!r}")
            values["bundle_version"] = bundle_version

        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Version-file content; a derived bundle version is left out so it keeps tracking the numbers."""
        data: dict[str, Any] = {key: getattr(self, key) for key in _VERSION_KEYS}
        if self._bundle_version is not None:
            data["bundle_version"] = self._bundle_version
        return data


def load_version(path: Path) -> BuildVersion:
    """Load the build version from a JSON version file.

    A missing file yields the zero version.

    Raises:
        VersionFileError: If the file cannot be parsed or holds invalid fields
    """
    if not path.exists():
        logger.warning("Version file not found, using default version", path=str(path))
        return BuildVersion()

    try:
        data = read_json(path)
    except Exception as e:
        raise VersionFileError(f"Failed to read version file {path}: {e}") from e

    if not isinstance(data, dict):
        raise VersionFileError(f"Version file {path} must contain a JSON object")

    version = BuildVersion.from_dict(data)
    logger.debug(
        "Loaded build version",
        path=str(path),
        version=version.package_version(),
        bundle_version=version.bundle_version,
    )
    return version


def save_version(version: BuildVersion, path: Path) -> None:
    """Write ``version`` to a JSON version file."""
    write_json(path, version.to_dict(), indent=2)
    logger.debug("Saved build version", path=str(path), version=version.package_version())


# 🏗️🎮🔚
