#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""EasyBuilder configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from easybuilder.config.arguments import BuildArgumentsConfig
from easybuilder.config.runtime import EasyBuilderRuntimeConfig

__all__ = [
    "BuildArgumentsConfig",
    "EasyBuilderRuntimeConfig",
]

# 🏗️🎮🔚
