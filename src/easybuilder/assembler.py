#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Build configuration assembly.

Derives the scripting define symbols, build options, product name, build
number and output path of a single build from its environment. Everything
here is a pure function of its arguments; the caller reads the current
project symbols and hands them in.
"""

from __future__ import annotations

from collections.abc import Iterable, Set
from enum import Flag, auto
from pathlib import Path

from attrs import define, field
from provide.foundation import logger

from easybuilder.config.defaults import DEV_PRODUCT_SUFFIX, STAGING_PRODUCT_SUFFIX
from easybuilder.defines import BuildDefines
from easybuilder.environment import Environment
from easybuilder.targets import BuildTarget, app_extension


class BuildOptions(Flag):
    """Option flags passed to the build host."""

    NONE = 0
    DEVELOPMENT = auto()


@define(frozen=True)
class BuildConfiguration:
    """Result of assembling one build invocation."""

    options: BuildOptions
    symbols: tuple[str, ...] = field(converter=tuple)
    output_path: str = ""
    product_name: str = ""

    @property
    def development(self) -> bool:
        return BuildOptions.DEVELOPMENT in self.options


_ENVIRONMENT_SYMBOLS: dict[Environment, tuple[str, ...]] = {
    Environment.DEBUG: (BuildDefines.ENABLE_LOG, BuildDefines.DEVELOPMENT_BUILD, BuildDefines.INTERNAL_BUILD),
    Environment.DEVELOPMENT: (
        BuildDefines.ENABLE_LOG,
        BuildDefines.DEVELOPMENT_BUILD,
        BuildDefines.INTERNAL_BUILD,
    ),
    Environment.STAGING: (BuildDefines.ENABLE_LOG, BuildDefines.STAGING_BUILD, BuildDefines.INTERNAL_BUILD),
    Environment.RELEASE: (BuildDefines.RELEASE_BUILD,),
    Environment.DISTRIBUTION: (BuildDefines.RELEASE_BUILD,),
}

_ENVIRONMENT_OPTIONS: dict[Environment, BuildOptions] = {
    Environment.DEBUG: BuildOptions.DEVELOPMENT,
    Environment.DEVELOPMENT: BuildOptions.DEVELOPMENT,
    Environment.STAGING: BuildOptions.NONE,
    Environment.RELEASE: BuildOptions.NONE,
    Environment.DISTRIBUTION: BuildOptions.NONE,
}

_PRODUCT_SUFFIXES: dict[Environment, str | None] = {
    Environment.DEBUG: DEV_PRODUCT_SUFFIX,
    Environment.DEVELOPMENT: DEV_PRODUCT_SUFFIX,
    Environment.STAGING: STAGING_PRODUCT_SUFFIX,
    Environment.RELEASE: None,
    Environment.DISTRIBUTION: None,
}


def environment_symbols(environment: Environment | str) -> list[str]:
    """Base symbols the environment owns, in order."""
    return list(_ENVIRONMENT_SYMBOLS[Environment.parse(environment)])


def filter_external_symbols(external_symbols: Iterable[str], reserved_symbols: Set[str]) -> list[str]:
    """Keep the project symbols that were not set by the build system itself."""
    return [symbol for symbol in external_symbols if symbol not in reserved_symbols]


def assemble(
    environment: Environment | str,
    platform_reserved_symbols: Set[str],
    external_symbols: Iterable[str] | None,
    platform_specific_symbols: Iterable[str] | None,
    *,
    output_path: str | Path = "",
    product_name: str = "",
) -> BuildConfiguration:
    """Assemble the build configuration for ``environment``.

    The symbol list is the environment's base symbols, then every external
    symbol not in ``platform_reserved_symbols``, then the platform symbols.
    Platform symbols are appended as given, even when an earlier part already
    holds them.

    Args:
        environment: Deployment environment, as a member or its name
        platform_reserved_symbols: Symbols the build system manages; stale copies
            of these in ``external_symbols`` are dropped
        external_symbols: Symbols currently set on the project
        platform_specific_symbols: Symbols every build of the platform carries
        output_path: Artifact location to record in the configuration
        product_name: Product name to record in the configuration

    Raises:
        InvalidEnvironmentError: If ``environment`` is not a known environment
    """
    env = Environment.parse(environment)

    symbols = list(_ENVIRONMENT_SYMBOLS[env])
    symbols.extend(filter_external_symbols(external_symbols or (), platform_reserved_symbols))
    symbols.extend(platform_specific_symbols or ())

    configuration = BuildConfiguration(
        options=_ENVIRONMENT_OPTIONS[env],
        symbols=symbols,
        output_path=str(output_path),
        product_name=product_name,
    )
    logger.debug(
        "Assembled build configuration",
        environment=env.value,
        symbols=list(configuration.symbols),
        development=configuration.development,
    )
    return configuration


def compose_product_name(base_name: str, environment: Environment | str) -> str:
    """Append the environment suffix to ``base_name``.

    An empty ``base_name`` is returned unchanged; callers treat that as
    "nothing to rename" and keep their current product name.
    """
    env = Environment.parse(environment)
    if not base_name:
        return base_name

    suffix = _PRODUCT_SUFFIXES[env]
    return f"{base_name} {suffix}" if suffix else base_name


def compose_build_number(explicit_override: int | None, version_default: int) -> int:
    """Return ``explicit_override`` when positive, else the version file's build number."""
    if explicit_override is not None and explicit_override > 0:
        return explicit_override
    return version_default


def compose_output_path(build_folder: Path, product_name: str, build_target: BuildTarget) -> Path:
    """Artifact path: the product name plus the platform extension inside ``build_folder``."""
    return build_folder / f"{product_name}{app_extension(build_target)}"


# 🏗️🎮🔚
