#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for EasyBuilder configuration."""

from __future__ import annotations

# =================================
# Path constants
# =================================
BUILD_FOLDER_NAME = "Build"
DEFAULT_BUILD_ROOT = "."
DEFAULT_VERSION_FILE = "version.json"
DEFAULT_SETTINGS_FILE = "project-settings.json"
BUILD_INFO_FILE = "build-info.json"

# =================================
# Build argument defaults
# =================================
DEFAULT_ENVIRONMENT = "development"
DEFAULT_BUILD_TARGET = "android"
DEFAULT_APP_TARGET = "client"
NO_BUILD_NUMBER = -1  # No override, use the version file's build counter
DEFAULT_PRODUCT_NAME = ""
DEFAULT_SINK_PRODUCT_NAME = "Product"  # Product name of a project that never set one

# =================================
# Product name suffixes
# =================================
DEV_PRODUCT_SUFFIX = "(Dev)"
STAGING_PRODUCT_SUFFIX = "(Stag)"

# =================================
# Version defaults
# =================================
DEFAULT_MAJOR = 0
DEFAULT_MINOR = 0
DEFAULT_BUILD = 0
DEFAULT_REVISION = 0

# =================================
# Build host defaults
# =================================
DEFAULT_HOST_TIMEOUT = 3600.0  # Seconds a host build may take
HOST_ENV_PREFIX = "EASYBUILDER_"

# =================================
# Logging defaults
# =================================
DEFAULT_LOG_LEVEL = "WARNING"

# 🏗️🎮🔚
