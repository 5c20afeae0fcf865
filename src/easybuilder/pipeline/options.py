#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Values exchanged with the build host."""

from __future__ import annotations

from enum import Enum

from attrs import define, field

from easybuilder.assembler import BuildOptions
from easybuilder.targets import BuildTarget, BuildTargetGroup, SubTarget


@define(frozen=True)
class BuildPlayerOptions:
    """Everything the build host needs to produce one player build."""

    target: BuildTarget
    target_group: BuildTargetGroup
    location_path_name: str
    sub_target: SubTarget | None = None
    scenes: tuple[str, ...] = field(default=(), converter=tuple)
    options: BuildOptions = BuildOptions.NONE
    extra_scripting_defines: tuple[str, ...] = field(default=(), converter=tuple)


class BuildResult(Enum):
    """Outcome reported by the build host."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"


@define(frozen=True)
class BuildReport:
    """Summary of a finished host build."""

    result: BuildResult
    output_path: str
    duration: float = 0.0
    errors: tuple[str, ...] = field(default=(), converter=tuple)

    @property
    def succeeded(self) -> bool:
        return self.result is BuildResult.SUCCEEDED


# 🏗️🎮🔚
