#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Project settings the build pipeline reads and writes.

The pipeline never touches global editor state directly. It goes through a
:class:`SettingsSink`, which a host integration implements on top of the real
project settings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol

from attrs import define, field
from provide.foundation import logger
from provide.foundation.file.formats import read_json, write_json

from easybuilder.config.defaults import DEFAULT_SINK_PRODUCT_NAME
from easybuilder.exceptions import ConfigurationError
from easybuilder.targets import AppTarget, BuildTarget, parse_build_target, settings_key


class SettingsSink(Protocol):
    """Project settings touched by a build."""

    def active_build_target(self) -> BuildTarget | None: ...

    def switch_active_build_target(self, build_target: BuildTarget) -> None: ...

    def get_scripting_define_symbols(self, build_target: BuildTarget, app_target: AppTarget) -> list[str]: ...

    def set_scripting_define_symbols(
        self, build_target: BuildTarget, app_target: AppTarget, symbols: list[str]
    ) -> None: ...

    def product_name(self) -> str: ...

    def set_product_name(self, name: str) -> None: ...

    def set_version(self, bundle_version: str, build_number: int, package_version: str) -> None: ...

    def enabled_scenes(self) -> list[str]: ...


@define
class SceneEntry:
    """A scene listed in the build settings."""

    path: str
    enabled: bool = True


def _parse_symbols(key: str, value: Any) -> list[str]:
    if isinstance(value, str):
        return [symbol.strip() for symbol in value.split(";") if symbol.strip()]
    if isinstance(value, list) and all(isinstance(symbol, str) for symbol in value):
        return list(value)
    raise ConfigurationError(f"Project settings symbols for '{key}' must be a list of strings, got {value!r}")


def _parse_scene(entry: Any) -> SceneEntry:
    if isinstance(entry, str):
        return SceneEntry(path=entry)
    if not isinstance(entry, dict) or not isinstance(entry.get("path"), str):
        raise ConfigurationError(f"Scene entry must be a path or an object with a 'path', got {entry!r}")
    enabled = entry.get("enabled", True)
    if not isinstance(enabled, bool):
        raise ConfigurationError(f"Scene 'enabled' flag must be a boolean, got {enabled!r}")
    return SceneEntry(path=entry["path"], enabled=enabled)


@define
class InMemorySettingsSink:
    """Settings sink holding project settings in memory.

    Used for dry runs and tests, and as a bridge to hosts that take their
    settings from a JSON file rather than through a live API.
    """

    active_target: BuildTarget | None = None
    symbols: dict[str, list[str]] = field(factory=dict)
    current_product_name: str = DEFAULT_SINK_PRODUCT_NAME
    bundle_version: str = ""
    build_number: int = 0
    package_version: str = ""
    scenes: list[SceneEntry] = field(factory=list)

    def active_build_target(self) -> BuildTarget | None:
        return self.active_target

    def switch_active_build_target(self, build_target: BuildTarget) -> None:
        logger.debug(
            "Switching active build target",
            previous=self.active_target.value if self.active_target else None,
            target=build_target.value,
        )
        self.active_target = build_target

    def get_scripting_define_symbols(self, build_target: BuildTarget, app_target: AppTarget) -> list[str]:
        return list(self.symbols.get(settings_key(app_target, build_target), []))

    def set_scripting_define_symbols(
        self, build_target: BuildTarget, app_target: AppTarget, symbols: list[str]
    ) -> None:
        self.symbols[settings_key(app_target, build_target)] = list(symbols)

    def product_name(self) -> str:
        return self.current_product_name

    def set_product_name(self, name: str) -> None:
        self.current_product_name = name

    def set_version(self, bundle_version: str, build_number: int, package_version: str) -> None:
        self.bundle_version = bundle_version
        self.build_number = build_number
        self.package_version = package_version

    def enabled_scenes(self) -> list[str]:
        return [scene.path for scene in self.scenes if scene.enabled]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InMemorySettingsSink:
        """Create a sink from project-settings JSON content.

        Symbol lists may be given as JSON lists or as ``;``-joined strings, the
        way engines store scripting defines. Scenes are paths or objects with
        ``path`` and an optional ``enabled`` flag.

        Raises:
            ConfigurationError: If symbols or scenes are malformed
        """
        active = data.get("active_target")
        symbols = data.get("symbols", {})
        if not isinstance(symbols, dict):
            raise ConfigurationError("Project settings 'symbols' must map a target to a symbol list")
        scenes = data.get("scenes", [])
        if not isinstance(scenes, list):
            raise ConfigurationError("Project settings 'scenes' must be a list")

        return cls(
            active_target=parse_build_target(active) if active else None,
            symbols={key: _parse_symbols(key, value) for key, value in symbols.items()},
            current_product_name=data.get("product_name", DEFAULT_SINK_PRODUCT_NAME),
            bundle_version=data.get("bundle_version", ""),
            build_number=data.get("build_number", 0),
            package_version=data.get("package_version", ""),
            scenes=[_parse_scene(entry) for entry in scenes],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "active_target": self.active_target.value if self.active_target else None,
            "symbols": {key: list(value) for key, value in self.symbols.items()},
            "product_name": self.current_product_name,
            "bundle_version": self.bundle_version,
            "build_number": self.build_number,
            "package_version": self.package_version,
            "scenes": [{"path": scene.path, "enabled": scene.enabled} for scene in self.scenes],
        }

    @classmethod
    def load(cls, path: Path) -> InMemorySettingsSink:
        """Load project settings from ``path``; a missing file gives empty settings."""
        if not path.exists():
            logger.debug("Project settings file not found, starting empty", path=str(path))
            return cls()
        data = read_json(path)
        if not isinstance(data, dict):
            raise ConfigurationError(f"Project settings file {path} must contain a JSON object")
        return cls.from_dict(data)

    def save(self, path: Path) -> None:
        write_json(path, self.to_dict(), indent=2)
        logger.debug("Saved project settings", path=str(path))


# 🏗️🎮🔚
