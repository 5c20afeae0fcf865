#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Build command for the easybuilder CLI."""

from __future__ import annotations

from pathlib import Path
import shlex

import click
from provide.foundation.console import perr, pout

from easybuilder.commands.common import resolve_arguments, target_options
from easybuilder.config.defaults import DEFAULT_SETTINGS_FILE
from easybuilder.console import get_command_logger
from easybuilder.exceptions import EasyBuilderError
from easybuilder.pipeline import (
    BuildHost,
    BuildReport,
    BuildStrategies,
    CommandBuildHost,
    DryRunBuildHost,
    InMemorySettingsSink,
    ProjectBuilder,
)
from easybuilder.pipeline.tasks import log_build_summary, write_build_information
from easybuilder.targets import parse_app_target, parse_build_target

# Get structured logger for this command
log = get_command_logger("build")


@click.command("build")
@target_options
@click.option("--product-name", default=None, help="Base product name; the environment suffix is appended.")
@click.option(
    "--build-number",
    type=int,
    default=None,
    help="Build number overriding the version file when positive.",
)
@click.option(
    "--version-file",
    default=None,
    type=click.Path(dir_okay=False),
    help="Version JSON file (default: $EASYBUILDER_VERSION_FILE or version.json).",
)
@click.option(
    "--build-root",
    default=None,
    type=click.Path(file_okay=False),
    help="Directory under which Build/<target>/<app-target> is created.",
)
@click.option(
    "--settings",
    "settings_file",
    default=DEFAULT_SETTINGS_FILE,
    show_default=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Project settings JSON read before and written after the build.",
)
@click.option("--host-command", default=None, help="Command that performs the host build (batch-mode engine).")
@click.option("--dry-run", is_flag=True, help="Assemble and apply settings without invoking the host.")
@click.option(
    "--info-dir",
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory to write build information JSON to.",
)
def build_command(
    build_target: str | None,
    app_target: str | None,
    environment: str | None,
    product_name: str | None,
    build_number: int | None,
    version_file: str | None,
    build_root: str | None,
    settings_file: Path,
    host_command: str | None,
    dry_run: bool,
    info_dir: Path | None,
) -> None:
    """Build the project for a target and environment."""
    if not dry_run and not host_command:
        perr("❌ Either --host-command or --dry-run is required")
        raise click.Abort()

    host: BuildHost = DryRunBuildHost() if dry_run else CommandBuildHost(command=shlex.split(host_command or ""))

    try:
        arguments = resolve_arguments(
            build_target=build_target,
            app_target=app_target,
            environment=environment,
            product_name=product_name,
            build_number=build_number,
            version_file=version_file,
            build_root=build_root,
        )
        settings = InMemorySettingsSink.load(settings_file)

        post_build = [log_build_summary]
        if info_dir is not None:
            post_build.append(write_build_information(info_dir))

        builder = ProjectBuilder(
            parse_app_target(arguments.app_target),
            parse_build_target(arguments.build_target),
            arguments.environment,
            settings=settings,
            host=host,
            strategies=BuildStrategies(post_build=post_build),
            arguments=arguments,
        )
        log.debug("Build arguments resolved", target=arguments.build_target, environment=arguments.environment)
        pout(f"🔨 Building {arguments.build_target} ({arguments.app_target}) for {arguments.environment}...")
        report = builder.build()
    except EasyBuilderError as e:
        log.error("Build failed", error=str(e))
        perr(f"❌ Build failed: {e}")
        raise click.Abort() from e

    settings.save(settings_file)
    _display_report(report)


def _display_report(report: BuildReport) -> None:
    """Display the outcome of the build."""
    if report.succeeded:
        pout(f"✅ Build {report.result.value}: {report.output_path}")
        return

    perr(f"❌ Build {report.result.value}")
    for error in report.errors:
        perr(f"  {error}")
    raise click.Abort()


# 🏗️🎮🔚
