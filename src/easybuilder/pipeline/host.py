#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Build hosts: the external tools that actually produce a player build."""

from __future__ import annotations

import os
from pathlib import Path
import time
from typing import Protocol

from attrs import define, field
from provide.foundation import logger
from provide.foundation.process import ProcessError, run

from easybuilder.assembler import BuildOptions
from easybuilder.config.defaults import DEFAULT_HOST_TIMEOUT, HOST_ENV_PREFIX
from easybuilder.pipeline.options import BuildPlayerOptions, BuildReport, BuildResult


class BuildHost(Protocol):
    """Produces the build artifact described by a :class:`BuildPlayerOptions`."""

    def build_player(self, options: BuildPlayerOptions) -> BuildReport: ...

    def reveal(self, path: Path) -> None: ...


def host_arguments(options: BuildPlayerOptions) -> list[str]:
    """Command-line arguments describing ``options`` to a batch-mode host."""
    args = [
        "-buildTarget",
        options.target.value,
        "-buildPath",
        options.location_path_name,
    ]
    if options.sub_target is not None:
        args.extend(["-subTarget", options.sub_target.value])
    if options.extra_scripting_defines:
        args.extend(["-defines", ";".join(options.extra_scripting_defines)])
    if BuildOptions.DEVELOPMENT in options.options:
        args.append("-development")
    return args


def host_environment(options: BuildPlayerOptions) -> dict[str, str]:
    """Environment variables carrying the values that do not fit on the command line."""
    return {
        f"{HOST_ENV_PREFIX}TARGET_GROUP": options.target_group.value,
        f"{HOST_ENV_PREFIX}SCENES": os.pathsep.join(options.scenes),
        f"{HOST_ENV_PREFIX}DEFINES": ";".join(options.extra_scripting_defines),
    }


@define
class CommandBuildHost:
    """Runs an external command (typically the engine in batch mode) to build."""

    command: list[str]
    cwd: Path | None = None
    timeout: float = DEFAULT_HOST_TIMEOUT

    def build_player(self, options: BuildPlayerOptions) -> BuildReport:
        cmd = [*self.command, *host_arguments(options)]
        env = {**os.environ, **host_environment(options)}

        logger.info("Starting host build", command=" ".join(cmd), target=options.target.value)
        started = time.monotonic()
        try:
            result = run(cmd, cwd=self.cwd, env=env, check=False, capture_output=True, timeout=self.timeout)
        except ProcessError as e:
            duration = time.monotonic() - started
            logger.error("Host build could not run", error=str(e), duration=round(duration, 2))
            return BuildReport(
                result=BuildResult.FAILED,
                output_path=options.location_path_name,
                duration=duration,
                errors=[str(e)],
            )
        duration = time.monotonic() - started

        if result.stdout:
            logger.trace(f"Host build stdout: {result.stdout.strip()}")

        if result.returncode == 0:
            logger.info("Host build finished", duration=round(duration, 2), output=options.location_path_name)
            return BuildReport(
                result=BuildResult.SUCCEEDED,
                output_path=options.location_path_name,
                duration=duration,
            )

        errors = [f"Exit code {result.returncode}"]
        if result.stderr:
            errors.append(result.stderr.strip()[:2000])
        logger.error("Host build failed", returncode=result.returncode, duration=round(duration, 2))
        return BuildReport(
            result=BuildResult.FAILED,
            output_path=options.location_path_name,
            duration=duration,
            errors=errors,
        )

    def reveal(self, path: Path) -> None:
        logger.info("Build output available", path=str(path))


@define
class DryRunBuildHost:
    """Records the options it is asked to build and reports success."""

    requests: list[BuildPlayerOptions] = field(factory=list)
    revealed: list[Path] = field(factory=list)

    def build_player(self, options: BuildPlayerOptions) -> BuildReport:
        self.requests.append(options)
        logger.info("Dry run, skipping host build", target=options.target.value, args=host_arguments(options))
        return BuildReport(result=BuildResult.SUCCEEDED, output_path=options.location_path_name)

    def reveal(self, path: Path) -> None:
        self.revealed.append(path)


# 🏗️🎮🔚
