#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Build arguments supplied by CI through the environment.

Every field can also be passed on the command line; explicit CLI options win
over environment values.
"""

from __future__ import annotations

from pathlib import Path

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from easybuilder.config.defaults import (
    DEFAULT_APP_TARGET,
    DEFAULT_BUILD_ROOT,
    DEFAULT_BUILD_TARGET,
    DEFAULT_ENVIRONMENT,
    DEFAULT_PRODUCT_NAME,
    DEFAULT_VERSION_FILE,
    NO_BUILD_NUMBER,
)
from easybuilder.environment import Environment


def parse_build_number(value: int | str | None) -> int:
    """Convert a CI build number to int; blanks and garbage mean "no override"."""
    if value is None:
        return NO_BUILD_NUMBER
    if isinstance(value, int):
        return value
    try:
        return int(value.strip())
    except ValueError:
        return NO_BUILD_NUMBER


def _validate_environment(instance: object, attribute: object, value: str) -> None:
    Environment.parse(value)


def _validate_build_target(instance: object, attribute: object, value: str) -> None:
    from easybuilder.targets import parse_build_target

    parse_build_target(value)


def _validate_app_target(instance: object, attribute: object, value: str) -> None:
    from easybuilder.targets import parse_app_target

    parse_app_target(value)


@define
class BuildArgumentsConfig(RuntimeConfig):
    """Arguments of one build invocation."""

    environment: str = field(
        default=DEFAULT_ENVIRONMENT,
        env_var="EASYBUILDER_ENVIRONMENT",
        validator=_validate_environment,
        metadata={"help": "Deployment environment (debug, development, staging, release, distribution)"},
    )

    build_target: str = field(
        default=DEFAULT_BUILD_TARGET,
        env_var="EASYBUILDER_BUILD_TARGET",
        validator=_validate_build_target,
        metadata={"help": "Platform to build for"},
    )

    app_target: str = field(
        default=DEFAULT_APP_TARGET,
        env_var="EASYBUILDER_APP_TARGET",
        validator=_validate_app_target,
        metadata={"help": "App target (client or server)"},
    )

    build_number: int = field(
        default=NO_BUILD_NUMBER,
        env_var="EASYBUILDER_BUILD_NUMBER",
        converter=parse_build_number,
        metadata={"help": "Overrides the version file's build counter when positive"},
    )

    product_name: str = field(
        default=DEFAULT_PRODUCT_NAME,
        env_var="EASYBUILDER_PRODUCT_NAME",
        metadata={"help": "Base product name; the environment suffix is appended"},
    )

    version_file: str = field(
        default=DEFAULT_VERSION_FILE,
        env_var="EASYBUILDER_VERSION_FILE",
        metadata={"help": "JSON file holding the checked-in build version"},
    )

    build_root: str = field(
        default=DEFAULT_BUILD_ROOT,
        env_var="EASYBUILDER_BUILD_ROOT",
        metadata={"help": "Directory under which platform build folders are created"},
    )

    @property
    def environment_value(self) -> Environment:
        return Environment.parse(self.environment)

    @property
    def version_path(self) -> Path:
        return Path(self.version_file)

    @property
    def build_root_path(self) -> Path:
        return Path(self.build_root)
