#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Extension points of the build pipeline.

A platform customizes its builds by handing the builder a
:class:`BuildStrategies` with the callbacks it needs. Task lists run left
to right; later tasks may depend on what earlier ones did.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from attrs import define, field

from easybuilder.assembler import BuildConfiguration
from easybuilder.config.arguments import BuildArgumentsConfig
from easybuilder.environment import Environment
from easybuilder.pipeline.options import BuildPlayerOptions, BuildReport
from easybuilder.pipeline.settings import SettingsSink
from easybuilder.targets import AppTarget, BuildTarget
from easybuilder.version import BuildVersion


@define
class BuildContext:
    """State of one build invocation, shared with every strategy."""

    app_target: AppTarget
    build_target: BuildTarget
    environment: Environment
    arguments: BuildArgumentsConfig
    settings: SettingsSink
    build_root: Path
    version: BuildVersion | None = None
    configuration: BuildConfiguration | None = None
    options: BuildPlayerOptions | None = None
    build_number: int | None = None


ContextTask = Callable[[BuildContext], None]
PostBuildTask = Callable[[BuildContext, BuildReport], None]
OptionMutator = Callable[[BuildPlayerOptions], BuildPlayerOptions]


@define
class BuildStrategies:
    """Callbacks for each extension point of :class:`ProjectBuilder`."""

    prepare: ContextTask | None = None
    pre_build: list[ContextTask] = field(factory=list)
    post_build: list[PostBuildTask] = field(factory=list)
    option_mutators: list[OptionMutator] = field(factory=list)
    sign: ContextTask | None = None
    setup: ContextTask | None = None
    platform_symbols: list[str] | None = None


# 🏗️🎮🔚
