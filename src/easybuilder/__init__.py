#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""EasyBuilder core package exports."""

from __future__ import annotations

from provide.foundation.utils import get_version

from easybuilder.assembler import (
    BuildConfiguration,
    BuildOptions,
    assemble,
    compose_build_number,
    compose_output_path,
    compose_product_name,
)
from easybuilder.environment import Environment
from easybuilder.exceptions import BuildError, EasyBuilderError, InvalidEnvironmentError
from easybuilder.version import BuildVersion

__version__ = get_version("easybuilder", caller_file=__file__)

__all__ = [
    "BuildConfiguration",
    "BuildError",
    "BuildOptions",
    "BuildVersion",
    "EasyBuilderError",
    "Environment",
    "InvalidEnvironmentError",
    "__version__",
    "assemble",
    "compose_build_number",
    "compose_output_path",
    "compose_product_name",
]

# 🏗️🎮🔚
