#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Allows running the CLI with ``python -m easybuilder``."""

from easybuilder.cli import main

if __name__ == "__main__":
    main()

# 🏗️🎮🔚
