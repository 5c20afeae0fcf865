#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Build targets, app targets and the per-platform lookups derived from them."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from easybuilder.config.defaults import BUILD_FOLDER_NAME
from easybuilder.defines import BuildDefines
from easybuilder.exceptions import InvalidTargetError


class AppTarget(Enum):
    """Deployment flavour of a platform build."""

    CLIENT = "client"
    SERVER = "server"


class BuildTarget(Enum):
    """OS/runtime target handed to the build host."""

    ANDROID = "android"
    IOS = "ios"
    WEBGL = "webgl"
    STANDALONE_WINDOWS64 = "windows64"
    STANDALONE_OSX = "osx"
    STANDALONE_LINUX64 = "linux64"
    WSA = "wsa"


class BuildTargetGroup(Enum):
    """Group a build target belongs to; project settings are keyed by group."""

    ANDROID = "android"
    IOS = "ios"
    WEBGL = "webgl"
    STANDALONE = "standalone"
    WSA = "wsa"


class SubTarget(Enum):
    """Standalone subtarget selecting a player or a dedicated server build."""

    PLAYER = "player"
    SERVER = "server"


_TARGET_GROUPS = {
    BuildTarget.ANDROID: BuildTargetGroup.ANDROID,
    BuildTarget.IOS: BuildTargetGroup.IOS,
    BuildTarget.WEBGL: BuildTargetGroup.WEBGL,
    BuildTarget.STANDALONE_WINDOWS64: BuildTargetGroup.STANDALONE,
    BuildTarget.STANDALONE_OSX: BuildTargetGroup.STANDALONE,
    BuildTarget.STANDALONE_LINUX64: BuildTargetGroup.STANDALONE,
    BuildTarget.WSA: BuildTargetGroup.WSA,
}

# iOS, WebGL and WSA builds produce a project folder rather than a single file
_APP_EXTENSIONS = {
    BuildTarget.ANDROID: ".apk",
    BuildTarget.IOS: "",
    BuildTarget.WEBGL: "",
    BuildTarget.STANDALONE_WINDOWS64: ".exe",
    BuildTarget.STANDALONE_OSX: ".app",
    BuildTarget.STANDALONE_LINUX64: ".x86_64",
    BuildTarget.WSA: "",
}


def parse_build_target(value: BuildTarget | str) -> BuildTarget:
    """Return the build target named by ``value``."""
    if isinstance(value, BuildTarget):
        return value
    normalized = value.strip().lower()
    for member in BuildTarget:
        if member.value == normalized or member.name.lower() == normalized:
            return member
    raise InvalidTargetError(f"Unknown build target: {value!r}")


def parse_app_target(value: AppTarget | str) -> AppTarget:
    """Return the app target named by ``value``."""
    if isinstance(value, AppTarget):
        return value
    normalized = value.strip().lower()
    for member in AppTarget:
        if member.value == normalized:
            return member
    raise InvalidTargetError(f"Unknown app target: {value!r}")


def build_target_group(build_target: BuildTarget) -> BuildTargetGroup:
    """Return the settings group of ``build_target``."""
    return _TARGET_GROUPS[build_target]


def app_extension(build_target: BuildTarget) -> str:
    """Return the artifact extension appended to the product name, possibly empty."""
    return _APP_EXTENSIONS[build_target]


def sub_target(app_target: AppTarget, build_target: BuildTarget) -> SubTarget | None:
    """Select the subtarget for an app/build target pair.

    Only standalone targets have subtargets. A server app target on any other
    group cannot be built.
    """
    if build_target_group(build_target) is not BuildTargetGroup.STANDALONE:
        if app_target is AppTarget.SERVER:
            raise InvalidTargetError(
                f"App target '{app_target.value}' is not supported on build target '{build_target.value}'"
            )
        return None
    return SubTarget.SERVER if app_target is AppTarget.SERVER else SubTarget.PLAYER


def settings_key(app_target: AppTarget, build_target: BuildTarget) -> str:
    """Key under which project settings store symbols for this pair.

    Dedicated servers keep their own symbol list, separate from the standalone player.
    """
    if sub_target(app_target, build_target) is SubTarget.SERVER:
        return "server"
    return build_target_group(build_target).value


def platform_build_folder(build_root: Path, build_target: BuildTarget, app_target: AppTarget) -> Path:
    """Folder receiving the artifacts of one platform build."""
    return build_root / BUILD_FOLDER_NAME / build_target.value / app_target.value


def platform_specific_symbols(build_target: BuildTarget) -> list[str]:
    """Symbols every build for ``build_target`` carries by default."""
    return [BuildDefines.ENABLE_IL2CPP]


# 🏗️🎮🔚
