#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Options and argument resolution shared by the build commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from attrs import evolve
import click

from easybuilder.config.arguments import BuildArgumentsConfig
from easybuilder.environment import Environment
from easybuilder.targets import AppTarget, BuildTarget

F = TypeVar("F", bound=Callable[..., Any])


def target_options(func: F) -> F:
    """Add the target and environment options to a command.

    Unset options fall back to the EASYBUILDER_* environment variables.
    """
    func = click.option(
        "--env",
        "environment",
        type=click.Choice([e.value for e in Environment], case_sensitive=False),
        default=None,
        help="Deployment environment (default: $EASYBUILDER_ENVIRONMENT or development).",
    )(func)
    func = click.option(
        "--app-target",
        type=click.Choice([t.value for t in AppTarget], case_sensitive=False),
        default=None,
        help="App target (default: $EASYBUILDER_APP_TARGET or client).",
    )(func)
    func = click.option(
        "--target",
        "build_target",
        type=click.Choice([t.value for t in BuildTarget], case_sensitive=False),
        default=None,
        help="Build target (default: $EASYBUILDER_BUILD_TARGET or android).",
    )(func)
    return func


def resolve_arguments(**overrides: Any) -> BuildArgumentsConfig:
    """Load build arguments from the environment and apply explicit CLI values."""
    arguments = BuildArgumentsConfig.from_env()
    explicit = {key: value for key, value in overrides.items() if value is not None}
    if explicit:
        arguments = evolve(arguments, **explicit)
    return arguments


# 🏗️🎮🔚
