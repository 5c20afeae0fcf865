#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Version file commands."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout

from easybuilder.commands.common import resolve_arguments
from easybuilder.console import get_command_logger
from easybuilder.exceptions import EasyBuilderError
from easybuilder.version import BuildVersion, load_version, save_version

# Get structured logger for version commands
log = get_command_logger("version")

version_file_option = click.option(
    "--version-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Version JSON file (default: $EASYBUILDER_VERSION_FILE or version.json).",
)


def _load(version_file: Path | None) -> tuple[Path, BuildVersion]:
    try:
        path = version_file or resolve_arguments().version_path
        return path, load_version(path)
    except EasyBuilderError as e:
        log.error("Failed to load version", error=str(e))
        perr(f"❌ {e}")
        raise click.Abort() from e


@click.group("version")
def version_group() -> None:
    """Inspect and update the checked-in build version."""
    pass


@version_group.command("show")
@version_file_option
def version_show(version_file: Path | None) -> None:
    """Show the build version."""
    path, version = _load(version_file)
    pout(f"Version file: {path}")
    pout(f"Bundle version: {version.bundle_version}")
    pout(f"Build: {version.build}")
    pout(f"Package version: {version.package_version()}")


@version_group.command("bump")
@version_file_option
def version_bump(version_file: Path | None) -> None:
    """Increment the build counter in the version file."""
    path, version = _load(version_file)
    bumped = version.bump_build()
    save_version(bumped, path)
    log.info("Bumped build number", previous=version.build, build=bumped.build, path=str(path))
    pout(f"✅ Build number {version.build} → {bumped.build}")


# 🏗️🎮🔚
