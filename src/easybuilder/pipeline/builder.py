#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Project builder: runs one player build from configuration to artifact."""

from __future__ import annotations

from pathlib import Path

from provide.foundation import logger

from easybuilder.assembler import assemble, compose_build_number, compose_output_path, compose_product_name
from easybuilder.config.arguments import BuildArgumentsConfig
from easybuilder.defines import all_script_symbols
from easybuilder.environment import Environment
from easybuilder.pipeline.host import BuildHost
from easybuilder.pipeline.options import BuildPlayerOptions, BuildReport
from easybuilder.pipeline.settings import SettingsSink
from easybuilder.pipeline.strategies import BuildContext, BuildStrategies
from easybuilder.targets import (
    AppTarget,
    BuildTarget,
    build_target_group,
    platform_build_folder,
    platform_specific_symbols,
    sub_target,
)
from easybuilder.version import load_version


class ProjectBuilder:
    """Builds a project for one app target, build target and environment.

    ``build()`` runs a fixed sequence exactly once: prepare, switch target,
    load version, create options, pre-build tasks, product information, setup,
    apply symbols, host build, post-build tasks. Nothing is retried.
    """

    def __init__(
        self,
        app_target: AppTarget,
        build_target: BuildTarget,
        environment: Environment | str,
        *,
        settings: SettingsSink,
        host: BuildHost,
        strategies: BuildStrategies | None = None,
        arguments: BuildArgumentsConfig | None = None,
    ) -> None:
        self.app_target = app_target
        self.build_target = build_target
        self.environment = Environment.parse(environment)
        self.settings = settings
        self.host = host
        self.strategies = strategies or BuildStrategies()
        self.arguments = arguments or BuildArgumentsConfig()
        self.product_name = compose_product_name(self.arguments.product_name, self.environment)
        # Fails early for app/build target pairs the host cannot build
        sub_target(app_target, build_target)

        self.context = BuildContext(
            app_target=app_target,
            build_target=build_target,
            environment=self.environment,
            arguments=self.arguments,
            settings=settings,
            build_root=self.arguments.build_root_path,
        )

    @property
    def platform_symbols(self) -> list[str]:
        if self.strategies.platform_symbols is not None:
            return list(self.strategies.platform_symbols)
        return platform_specific_symbols(self.build_target)

    def build(self) -> BuildReport:
        """Run the build and return the host's report."""
        logger.info(
            "Starting build",
            target=self.build_target.value,
            app_target=self.app_target.value,
            environment=self.environment.value,
        )

        if self.strategies.prepare:
            self.strategies.prepare(self.context)

        self._switch_build_target()

        self.context.version = load_version(self.arguments.version_path)
        self.context.options = self.create_build_player_options()

        for task in self.strategies.pre_build:
            task(self.context)

        self.set_product_information()

        if self.strategies.setup:
            self.strategies.setup(self.context)

        options = self.context.options
        self.settings.set_scripting_define_symbols(
            self.build_target, self.app_target, list(options.extra_scripting_defines)
        )

        report = self.host.build_player(options)

        for post_task in self.strategies.post_build:
            post_task(self.context, report)

        if report.succeeded:
            self.host.reveal(Path(options.location_path_name))
        else:
            logger.error("Build failed", result=report.result.value, errors=list(report.errors))
        return report

    def _switch_build_target(self) -> None:
        if self.settings.active_build_target() is not self.build_target:
            self.settings.switch_active_build_target(self.build_target)

    def create_build_player_options(self) -> BuildPlayerOptions:
        """Assemble the configuration and turn it into host options."""
        build_folder = platform_build_folder(self.context.build_root, self.build_target, self.app_target)
        current_name = self.settings.product_name()
        output_path = compose_output_path(build_folder, current_name, self.build_target)

        configuration = assemble(
            self.environment,
            all_script_symbols(),
            self.settings.get_scripting_define_symbols(self.build_target, self.app_target),
            self.platform_symbols,
            output_path=output_path,
            product_name=self.product_name or current_name,
        )
        self.context.configuration = configuration

        options = BuildPlayerOptions(
            target=self.build_target,
            target_group=build_target_group(self.build_target),
            location_path_name=configuration.output_path,
            sub_target=sub_target(self.app_target, self.build_target),
            scenes=self.settings.enabled_scenes(),
            options=configuration.options,
            extra_scripting_defines=configuration.symbols,
        )
        for mutate in self.strategies.option_mutators:
            options = mutate(options)
        return options

    def set_product_information(self) -> None:
        """Apply product name and version to the settings, then sign."""
        self._set_product_name()
        self._update_app_version()
        if self.strategies.sign:
            self.strategies.sign(self.context)

    def _set_product_name(self) -> None:
        product = self.product_name
        if not product:
            logger.debug("No product name given, keeping current", current=self.settings.product_name())
            return
        self.settings.set_product_name(product)
        logger.debug("Set product name", product_name=product)

    def _update_app_version(self) -> None:
        version = self.context.version
        if version is None:
            return
        build_number = compose_build_number(self.arguments.build_number, version.build)
        self.context.build_number = build_number
        self.settings.set_version(version.bundle_version, build_number, version.package_version(build_number))
        logger.debug(
            "Set app version",
            bundle_version=version.bundle_version,
            build_number=build_number,
        )


# 🏗️🎮🔚
