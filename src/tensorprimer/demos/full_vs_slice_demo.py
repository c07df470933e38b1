# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the TensorPrimer project.
# Licensed under the MIT License – see LICENSE in the repo root.

# demos/full_vs_slice_demo.py
from __future__ import annotations

import numpy as np

from tensorprimer.core.formatting import banner, fmt_scalar, fmt_shape, labeled
from tensorprimer.core.ops import full_vs_slice_dot, make_rng

NAME = "full-vs-slice"
TITLE = "Comparing full-tensor dot vs per-slice matrix multiplication"
MENU_LABEL = "Compare full-tensor dot vs per-slice matrix multiplication"


def compute(rng: np.random.Generator) -> dict:
    return full_vs_slice_dot(rng, m=2, n=3, k=4)


def report(res: dict) -> str:
    m, n, k = res["B"].shape
    R = res["R"]
    return "\n".join(
        [
            banner(TITLE),
            "Full dot-style sum(B * C) across all dims (approx):",
            f"  → Scalar value: {fmt_scalar(res['d_full'])}",
            "",
            "Per-slice results:",
            f"  R shape = {fmt_shape(R.shape)}",
            labeled("  Example slice R[:, :, 0]:", R[:, :, 0]),
            "Conceptual difference:",
            "Full dot: sums *all* elementwise products into one scalar (like flattening both).",
            f"Per-slice: performs {k} independent ({m}×{n})@({n}×{m}) matrix multiplications "
            f"→ ({m}×{m}×{k}).",
            "So: full dot measures *overall similarity*, per-slice gives *structured batch results*.",
        ]
    )


def save_figure(res: dict, outputs_dir: str) -> str:
    from tensorprimer.core.plots import save_heatmaps

    return save_heatmaps({"B": res["B"], "C": res["C"], "R": res["R"]}, outputs_dir,
                         "full_vs_slice.pdf", title=f"full dot = {fmt_scalar(res['d_full'])}")


def main(rng: np.random.Generator | None = None, outputs_dir: str | None = None) -> dict:
    rng = make_rng() if rng is None else rng
    res = compute(rng)
    print(report(res))

    if outputs_dir:
        save_figure(res, outputs_dir)
    return res


if __name__ == "__main__":
    main()
