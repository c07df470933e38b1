# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the TensorPrimer project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/tensorprimer/core/ops.py
from __future__ import annotations

import numpy as np

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

# tolerance for comparing two accumulation orders of the same sum
RTOL = 1e-9
ATOL = 1e-12


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Return a numpy Generator; ``seed=None`` draws fresh OS entropy."""
    return np.random.default_rng(seed)


# =========================
# (1) Element-wise vs matrix product (2D)
# =========================

def elementwise_vs_matrix(rng: np.random.Generator, n: int = 3) -> dict:
    """
    Draw two n×n matrices uniform in [0, 1) and multiply them both ways.
    Returns dict with keys 'A', 'B', 'E' (Hadamard A*B) and 'M' (matrix A@B).
    """
    A = rng.random((n, n))
    B = rng.random((n, n))
    E = A * B
    M = A @ B
    return {"A": A, "B": B, "E": E, "M": M}


# =========================
# (2) Whole-tensor dot on 3D arrays
# =========================

def tensor_dot_equivalence(rng: np.random.Generator, shape: tuple[int, ...] = (2, 3, 4)) -> dict:
    """
    sum(B * C) over every axis vs dot(B.ravel(), C.ravel()).

    Both reduce the same products, only the accumulation order differs, so
    'exact' may be False while 'close' must be True.
    """
    B = rng.random(shape)
    C = rng.random(shape)
    d_sum = float(np.sum(B * C))
    d_dot = float(np.dot(B.ravel(), C.ravel()))
    return {
        "B": B,
        "C": C,
        "d_sum": d_sum,
        "d_dot": d_dot,
        "exact": d_sum == d_dot,
        "close": bool(np.isclose(d_sum, d_dot, rtol=RTOL, atol=ATOL)),
    }


# =========================
# (3) Per-slice (batched) matrix multiplication
# =========================

def batched_slice_matmul(B: np.ndarray, C: np.ndarray) -> np.ndarray:
    """
    Multiply B[:, :, i] @ C[:, :, i] for every i along the trailing axis.

    B has shape (m, n, k) and C has shape (n, p, k); the k products are stacked
    on a new trailing axis, giving shape (m, p, k).
    """
    B = np.asarray(B)
    C = np.asarray(C)
    if B.ndim != 3 or C.ndim != 3:
        raise ValueError(f"expected two 3D arrays, got shapes {B.shape} and {C.shape}")
    if B.shape[2] != C.shape[2]:
        raise ValueError(f"trailing axes differ: {B.shape} vs {C.shape}")
    if B.shape[1] != C.shape[0]:
        raise ValueError(f"inner dimensions differ: {B.shape} vs {C.shape}")

    slices = [B[:, :, i] @ C[:, :, i] for i in range(B.shape[2])]
    return np.stack(slices, axis=2)


def batched_slice_demo(
    rng: np.random.Generator, m: int = 2, n: int = 3, p: int = 2, k: int = 4
) -> dict:
    B = rng.random((m, n, k))
    C = rng.random((n, p, k))
    R = batched_slice_matmul(B, C)
    return {"B": B, "C": C, "R": R}


# =========================
# (4) Broadcasting & common constructors
# =========================

def broadcasting_constructors() -> dict:
    """
    Build the same kinds of arrays through different constructors.

    X71 and X72 come from the same nine values 1..9, once through a reshaped
    range and once through a comprehension; both reshape column-major.
    """
    x = np.ascontiguousarray(np.arange(0, 12, dtype=np.float32))
    y = np.ascontiguousarray(np.arange(0, 13, 2, dtype=np.float32))
    X3 = np.array([[1, 2, 3], [4, 5, 6], [7, 8, 9]]).astype(np.float32)

    sample = range(1, 10)
    X71 = np.arange(1, 10).astype(np.float64).reshape((3, 3), order="F")
    X72 = np.array([float(i) for i in sample], dtype=np.float64).reshape((3, 3), order="F")

    return {
        "x": x,
        "y": y,
        "X3": X3,
        "X71": X71,
        "X72": X72,
        "equal": bool(np.array_equal(X71, X72)),
    }


# =========================
# (5) Full-tensor dot vs per-slice product
# =========================

def full_vs_slice_dot(rng: np.random.Generator, m: int = 2, n: int = 3, k: int = 4) -> dict:
    """
    Contrast a single "full dot" scalar with the per-slice batched product.

    C has shape (n, m, k); its first two axes are swapped and cropped to B's
    extent before the element-wise sum. This is an illustration of overall
    similarity, not a tensor contraction, and is kept as such.
    """
    B = rng.random((m, n, k))
    C = rng.random((n, m, k))

    C_aligned = np.transpose(C, (1, 0, 2))[:m, :n, :k]
    d_full = float(np.sum(B * C_aligned))

    R = batched_slice_matmul(B, C)
    return {"B": B, "C": C, "d_full": d_full, "R": R}


# =========================
# (6) Dot product through a transpose
# =========================

def transpose_dot_1d(x=(1, 2, 3), y=(4, 5, 6)) -> dict:
    """
    x' * y as a (1×n)·(n×1) product next to the plain dot product.
    'xt_y' is a 1×1 array, 'dot' a scalar; their values agree.
    """
    x = np.asarray(x)
    y = np.asarray(y)
    if x.ndim != 1 or y.ndim != 1 or x.shape != y.shape:
        raise ValueError(f"expected two vectors of equal length, got {x.shape} and {y.shape}")

    xt_y = x.reshape(1, -1) @ y.reshape(-1, 1)
    dot = np.dot(x, y)
    return {"x": x, "y": y, "xt_y": xt_y, "dot": dot}


def transpose_dot_2d(A=((1, 2), (3, 4), (5, 6)), B=((2, 0), (1, 3), (4, 5))) -> dict:
    """
    A' * B for A, B of shape (r×c): entry (i, j) is column i of A dotted with
    column j of B, so the result is c×c.
    """
    A = np.asarray(A)
    B = np.asarray(B)
    if A.ndim != 2 or B.ndim != 2 or A.shape[0] != B.shape[0]:
        raise ValueError(f"expected two matrices with equal row counts, got {A.shape} and {B.shape}")

    G = A.T @ B
    return {"A": A, "B": B, "G": G}
