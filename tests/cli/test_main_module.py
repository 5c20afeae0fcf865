#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Test for running easybuilder as a module."""

import runpy
import sys

import pytest


def test_main_module_entrypoint() -> None:
    """Tests that `python -m easybuilder --version` exits cleanly."""
    with pytest.raises(SystemExit) as e:
        original_argv = sys.argv
        sys.argv = ["easybuilder", "--version"]
        try:
            runpy.run_module("easybuilder", run_name="__main__")
        finally:
            sys.argv = original_argv

    assert e.value.code == 0


# 🏗️🎮🔚
