#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""The linear build pipeline and the collaborators it drives."""

from easybuilder.pipeline.builder import ProjectBuilder
from easybuilder.pipeline.host import BuildHost, CommandBuildHost, DryRunBuildHost
from easybuilder.pipeline.options import BuildPlayerOptions, BuildReport, BuildResult
from easybuilder.pipeline.settings import InMemorySettingsSink, SceneEntry, SettingsSink
from easybuilder.pipeline.strategies import BuildContext, BuildStrategies

__all__ = [
    "BuildContext",
    "BuildHost",
    "BuildPlayerOptions",
    "BuildReport",
    "BuildResult",
    "BuildStrategies",
    "CommandBuildHost",
    "DryRunBuildHost",
    "InMemorySettingsSink",
    "ProjectBuilder",
    "SceneEntry",
    "SettingsSink",
]

# 🏗️🎮🔚
