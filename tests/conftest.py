#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for EasyBuilder tests."""

from __future__ import annotations

from collections.abc import Iterator
import os
from pathlib import Path

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

from easybuilder.config.arguments import BuildArgumentsConfig
from easybuilder.pipeline import DryRunBuildHost, InMemorySettingsSink, SceneEntry
from easybuilder.version import BuildVersion, save_version


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture(autouse=True)
def clean_build_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep EASYBUILDER_* variables of the calling shell out of the tests."""
    for name in list(os.environ):
        if name.startswith("EASYBUILDER_"):
            monkeypatch.delenv(name)


@pytest.fixture
def version_file(tmp_path: Path) -> Path:
    """A version file holding 1.4.12.0 with bundle version 1.4.0."""
    path = tmp_path / "version.json"
    save_version(BuildVersion(major=1, minor=4, build=12, revision=0), path)
    return path


@pytest.fixture
def settings() -> InMemorySettingsSink:
    """Project settings with a stale internal symbol and a user symbol on Android."""
    return InMemorySettingsSink(
        symbols={"android": ["ENABLE_LOG", "RELEASE_BUILD", "USE_FIREBASE"]},
        current_product_name="Skyrunner",
        scenes=[
            SceneEntry(path="Assets/Scenes/Boot.unity"),
            SceneEntry(path="Assets/Scenes/Sandbox.unity", enabled=False),
            SceneEntry(path="Assets/Scenes/Main.unity"),
        ],
    )


@pytest.fixture
def dry_run_host() -> DryRunBuildHost:
    return DryRunBuildHost()


@pytest.fixture
def arguments(tmp_path: Path, version_file: Path) -> BuildArgumentsConfig:
    """Build arguments pointing at the temporary version file and build root."""
    return BuildArgumentsConfig(
        version_file=str(version_file),
        build_root=str(tmp_path),
    )


# 🏗️🎮🔚
