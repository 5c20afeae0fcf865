#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Symbols command: show the configuration a build would use."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout

from easybuilder.assembler import assemble
from easybuilder.commands.common import resolve_arguments, target_options
from easybuilder.console import get_command_logger
from easybuilder.defines import all_script_symbols
from easybuilder.exceptions import EasyBuilderError
from easybuilder.pipeline.settings import InMemorySettingsSink
from easybuilder.targets import parse_app_target, parse_build_target, platform_specific_symbols

# Get structured logger for this command
log = get_command_logger("symbols")


@click.command("symbols")
@target_options
@click.option(
    "--current",
    "current_symbols",
    multiple=True,
    help="Symbol currently set on the project (repeatable). Overrides --settings.",
)
@click.option(
    "--settings",
    "settings_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Project settings JSON to read the current symbols from.",
)
def symbols_command(
    build_target: str | None,
    app_target: str | None,
    environment: str | None,
    current_symbols: tuple[str, ...],
    settings_file: Path | None,
) -> None:
    """Print the scripting define symbols and options for a build."""
    try:
        arguments = resolve_arguments(
            build_target=build_target,
            app_target=app_target,
            environment=environment,
        )
        target = parse_build_target(arguments.build_target)
        app = parse_app_target(arguments.app_target)

        external: list[str] = list(current_symbols)
        if not external and settings_file is not None:
            external = InMemorySettingsSink.load(settings_file).get_scripting_define_symbols(target, app)

        configuration = assemble(
            arguments.environment,
            all_script_symbols(),
            external,
            platform_specific_symbols(target),
        )
    except EasyBuilderError as e:
        log.error("Symbol assembly failed", error=str(e))
        perr(f"❌ {e}")
        raise click.Abort() from e

    log.debug("Symbols assembled", symbols=list(configuration.symbols))
    pout(f"Environment: {arguments.environment_value.value}")
    pout(f"Target: {target.value} ({app.value})")
    pout(f"Development: {configuration.development}")
    pout("Symbols:")
    for symbol in configuration.symbols:
        pout(f"  {symbol}")


# 🏗️🎮🔚
