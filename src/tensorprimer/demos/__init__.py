# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the TensorPrimer project.
# Licensed under the MIT License – see LICENSE in the repo root.
from __future__ import annotations

from . import (
    batched_matmul_demo,
    constructors_demo,
    elementwise_demo,
    full_vs_slice_demo,
    tensor_dot_demo,
    transpose_dot_demo,
)

# menu number -> demo module, in menu order
DEMOS = {
    1: elementwise_demo,
    2: tensor_dot_demo,
    3: batched_matmul_demo,
    4: constructors_demo,
    5: full_vs_slice_demo,
    6: transpose_dot_demo,
}

BY_NAME = {mod.NAME: mod for mod in DEMOS.values()}

__all__ = ["DEMOS", "BY_NAME"]
