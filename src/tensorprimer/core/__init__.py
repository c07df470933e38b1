# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the TensorPrimer project.
# Licensed under the MIT License – see LICENSE in the repo root.
from __future__ import annotations

from .ops import (
    batched_slice_demo,
    batched_slice_matmul,
    broadcasting_constructors,
    elementwise_vs_matrix,
    full_vs_slice_dot,
    make_rng,
    tensor_dot_equivalence,
    transpose_dot_1d,
    transpose_dot_2d,
)

__all__ = [
    "make_rng",
    "elementwise_vs_matrix",
    "tensor_dot_equivalence",
    "batched_slice_matmul",
    "batched_slice_demo",
    "broadcasting_constructors",
    "full_vs_slice_dot",
    "transpose_dot_1d",
    "transpose_dot_2d",
]
