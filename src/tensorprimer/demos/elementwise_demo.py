# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the TensorPrimer project.
# Licensed under the MIT License – see LICENSE in the repo root.

# demos/elementwise_demo.py
from __future__ import annotations

import numpy as np

from tensorprimer.core.formatting import banner, labeled
from tensorprimer.core.ops import elementwise_vs_matrix, make_rng

NAME = "elementwise"
TITLE = "Element-wise (*) vs Matrix (@) Multiplication (2D)"
MENU_LABEL = "Element-wise (*) vs Matrix (@) multiplication (2D)"


def compute(rng: np.random.Generator) -> dict:
    return elementwise_vs_matrix(rng, n=3)


def report(res: dict) -> str:
    n = res["A"].shape[0]
    lines = [
        banner(TITLE),
        labeled(f"A ({n}×{n}):", res["A"]),
        labeled(f"B ({n}×{n}):", res["B"]),
        labeled("A * B  (element-wise):", res["E"]),
        labeled("A @ B  (matrix product):", res["M"]),
        "Notes:",
        "'*' multiplies each corresponding entry (Hadamard product).",
        "'@' does row-by-column dot products; result shape is (m×p) for (m×n)@(n×p).",
    ]
    return "\n".join(lines)


def save_figure(res: dict, outputs_dir: str) -> str:
    from tensorprimer.core.plots import save_heatmaps

    return save_heatmaps(
        {"A": res["A"], "B": res["B"], "A * B": res["E"], "A @ B": res["M"]},
        outputs_dir,
        "elementwise_vs_matrix.pdf",
    )


def main(rng: np.random.Generator | None = None, outputs_dir: str | None = None) -> dict:
    rng = make_rng() if rng is None else rng
    res = compute(rng)
    print(report(res))

    if outputs_dir:
        save_figure(res, outputs_dir)
    return res


if __name__ == "__main__":
    main()
