# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the TensorPrimer project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/tensorprimer/core/formatting.py
from __future__ import annotations

import numpy as np

__all__ = ["banner", "fmt_shape", "fmt_scalar", "format_array", "labeled"]

SEP_WIDTH = 60
PRECISION = 6


def banner(title: str, width: int = SEP_WIDTH, char: str = "=") -> str:
    line = char * width
    return f"\n{line}\n{title}\n{line}\n"


def fmt_shape(shape) -> str:
    return "(" + ", ".join(str(int(s)) for s in shape) + ")"


def fmt_scalar(value) -> str:
    return f"{float(value):.{PRECISION}f}"


def _dims(arr: np.ndarray) -> str:
    if arr.ndim == 1:
        return f"{arr.shape[0]}-element"
    return "×".join(str(s) for s in arr.shape)


def format_array(arr) -> str:
    """
    Human-readable grid with a "3×3 float64:" style header.
    3D arrays are printed one trailing-axis slice at a time.
    """
    arr = np.asarray(arr)
    header = f"{_dims(arr)} {arr.dtype}:"
    opts = {"precision": PRECISION, "suppress_small": True, "floatmode": "fixed"}
    if not np.issubdtype(arr.dtype, np.floating):
        opts = {}

    if arr.ndim == 3:
        parts = [header]
        for i in range(arr.shape[2]):
            parts.append(f"[:, :, {i}] =")
            parts.append(np.array2string(arr[:, :, i], **opts))
        return "\n".join(parts)
    return header + "\n" + np.array2string(arr, **opts)


def labeled(label: str, arr) -> str:
    return f"{label}\n{format_array(arr)}\n"
