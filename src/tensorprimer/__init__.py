# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the TensorPrimer project.
# Licensed under the MIT License – see LICENSE in the repo root.
"""Interactive console demos of array and tensor arithmetic built on NumPy."""

__version__ = "0.1.0"
