#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Deployment environments a player build can be produced for."""

from __future__ import annotations

from enum import Enum

from easybuilder.exceptions import InvalidEnvironmentError


class Environment(Enum):
    """Deployment environment selecting symbols, build options and product suffix."""

    DEBUG = "debug"
    DEVELOPMENT = "development"
    STAGING = "staging"
    RELEASE = "release"
    DISTRIBUTION = "distribution"

    @classmethod
    def parse(cls, value: Environment | str) -> Environment:
        """Return the environment for ``value``, matching names case-insensitively.

        Raises:
            InvalidEnvironmentError: If ``value`` names none of the five environments
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        raise InvalidEnvironmentError(
            f"Invalid environment: {value!r}. Expected one of: {', '.join(m.value for m in cls)}"
        )


# 🏗️🎮🔚
