#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the easybuilder CLI."""

from __future__ import annotations

from easybuilder.commands.build import build_command
from easybuilder.commands.symbols import symbols_command
from easybuilder.commands.version import version_group

__all__ = [
    "build_command",
    "symbols_command",
    "version_group",
]

# 🏗️🎮🔚
