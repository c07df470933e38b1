# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the TensorPrimer project.
# Licensed under the MIT License – see LICENSE in the repo root.

# demos/batched_matmul_demo.py
from __future__ import annotations

import numpy as np

from tensorprimer.core.formatting import banner, fmt_shape, labeled
from tensorprimer.core.ops import batched_slice_demo, make_rng

NAME = "batched"
TITLE = "Per-slice (batched) matrix multiplication for 3D arrays"
MENU_LABEL = "Per-slice (batched) matrix multiplication (3D)"


def compute(rng: np.random.Generator) -> dict:
    return batched_slice_demo(rng, m=2, n=3, p=2, k=4)


def report(res: dict) -> str:
    B, C, R = res["B"], res["C"], res["R"]
    return "\n".join(
        [
            banner(TITLE),
            f"B shape: {fmt_shape(B.shape)}   C shape: {fmt_shape(C.shape)}",
            f"Per-slice result shape (stacked): {fmt_shape(R.shape)}",
            "",
            labeled("First slice result R[:, :, 0]:", R[:, :, 0]),
            "Tip: Use this pattern when you mean 'batched' matmul:",
            f"{R.shape[2]} independent products B[:, :, i] @ C[:, :, i], one per trailing index.",
        ]
    )


def save_figure(res: dict, outputs_dir: str) -> str:
    from tensorprimer.core.plots import save_heatmaps

    return save_heatmaps({"B": res["B"], "C": res["C"], "R": res["R"]}, outputs_dir, "batched_matmul.pdf")


def main(rng: np.random.Generator | None = None, outputs_dir: str | None = None) -> dict:
    rng = make_rng() if rng is None else rng
    res = compute(rng)
    print(report(res))

    if outputs_dir:
        save_figure(res, outputs_dir)
    return res


if __name__ == "__main__":
    main()
