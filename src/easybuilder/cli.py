#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""EasyBuilder command-line interface entrypoint."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from easybuilder.commands.build import build_command
from easybuilder.commands.symbols import symbols_command
from easybuilder.commands.version import version_group
from easybuilder.config import EasyBuilderRuntimeConfig

__version__ = get_version("easybuilder", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="easybuilder",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Player build configuration and orchestration tool.

    Configure logging via environment variables:
    - EASYBUILDER_LOG_LEVEL: Set log level for easybuilder (trace, debug, info, warning, error)
    - EASYBUILDER_SETUP_LOG_LEVEL: Control Foundation's initialization logs
    - PROVIDE_LOG_FILE: Write logs to file

    Build arguments (EASYBUILDER_ENVIRONMENT, EASYBUILDER_BUILD_NUMBER,
    EASYBUILDER_PRODUCT_NAME, ...) are read from the environment and
    overridden by command options.
    """
    ctx.ensure_object(dict)

    runtime_config = EasyBuilderRuntimeConfig.from_env()
    cli_ctx = CLIContext.from_env()
    base_telemetry = TelemetryConfig.from_env()

    telemetry_config = evolve(
        base_telemetry,
        service_name="easybuilder",
        logging=evolve(
            base_telemetry.logging,
            default_level=runtime_config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["log"] = cli_ctx.logger


cli.add_command(build_command, name="build")
cli.add_command(symbols_command, name="symbols")
cli.add_command(version_group, name="version")

main = cli

if __name__ == "__main__":
    cli()

# 🏗️🎮🔚
