#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Scripting define symbols owned by easybuilder."""

from __future__ import annotations


class BuildDefines:
    """Symbol names the build system sets and clears itself."""

    ENABLE_LOG = "ENABLE_LOG"
    DEVELOPMENT_BUILD = "DEVELOPMENT_BUILD"
    STAGING_BUILD = "STAGING_BUILD"
    RELEASE_BUILD = "RELEASE_BUILD"
    INTERNAL_BUILD = "INTERNAL_BUILD"
    ENABLE_IL2CPP = "IL2CPP"


def all_script_symbols() -> frozenset[str]:
    """Every symbol in :class:`BuildDefines`, used to filter stale project symbols."""
    return frozenset(
        value for name, value in vars(BuildDefines).items() if name.isupper() and isinstance(value, str)
    )


# 🏗️🎮🔚
