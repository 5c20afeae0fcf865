#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for EasyBuilder."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class EasyBuilderError(FoundationError):
    """Base exception for all easybuilder errors."""

    pass


class ConfigurationError(EasyBuilderError):
    """Raised when the build configuration cannot be assembled."""

    pass


class InvalidEnvironmentError(ConfigurationError):
    """Raised when a deployment environment is not one of the known variants."""

    pass


class InvalidTargetError(ConfigurationError):
    """Raised for unknown build targets or unsupported app/build target pairs."""

    pass


class VersionFileError(EasyBuilderError):
    """Raised when the version file exists but cannot be read."""

    pass


class BuildError(EasyBuilderError):
    """Raised for errors reported by the external build host."""

    pass


# 🏗️🎮🔚
