#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Stock post-build tasks."""

from __future__ import annotations

import datetime
from pathlib import Path
from typing import Any

from provide.foundation import logger
from provide.foundation.file.directory import ensure_dir
from provide.foundation.file.formats import write_json

from easybuilder.config.defaults import BUILD_INFO_FILE
from easybuilder.pipeline.options import BuildReport
from easybuilder.pipeline.strategies import BuildContext, PostBuildTask


def build_information(context: BuildContext, report: BuildReport) -> dict[str, Any]:
    """Describe a finished build: what was built, from which version, with which symbols."""
    version = context.version
    options = context.options
    return {
        "product_name": context.settings.product_name(),
        "environment": context.environment.value,
        "build_target": context.build_target.value,
        "app_target": context.app_target.value,
        "bundle_version": version.bundle_version if version else None,
        "build_number": context.build_number,
        "package_version": version.package_version(context.build_number) if version else None,
        "symbols": list(options.extra_scripting_defines) if options else [],
        "development": context.configuration.development if context.configuration else False,
        "result": report.result.value,
        "output_path": report.output_path,
        "duration": round(report.duration, 3),
        "errors": list(report.errors),
        "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
    }


def write_build_information(directory: Path) -> PostBuildTask:
    """Post-build task writing :func:`build_information` as JSON into ``directory``."""

    def _write(context: BuildContext, report: BuildReport) -> None:
        ensure_dir(directory)
        info_file = directory / f"{context.build_target.value}-{context.app_target.value}-{BUILD_INFO_FILE}"
        write_json(info_file, build_information(context, report), indent=2)
        logger.info("Wrote build information", path=str(info_file))

    return _write


def log_build_summary(context: BuildContext, report: BuildReport) -> None:
    """Post-build task logging the outcome of the build."""
    logger.info(
        "Build summary",
        result=report.result.value,
        target=context.build_target.value,
        environment=context.environment.value,
        build_number=context.build_number,
        output=report.output_path,
    )


# 🏗️🎮🔚
