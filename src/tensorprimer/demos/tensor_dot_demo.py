# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the TensorPrimer project.
# Licensed under the MIT License – see LICENSE in the repo root.

# demos/tensor_dot_demo.py
from __future__ import annotations

import numpy as np

from tensorprimer.core.formatting import banner, fmt_scalar, fmt_shape
from tensorprimer.core.ops import make_rng, tensor_dot_equivalence

NAME = "tensor-dot"
TITLE = "Whole-tensor dot on 3D arrays: sum(B * C) ≡ dot(B.ravel(), C.ravel())"
MENU_LABEL = "3D tensors: sum(B * C) vs dot(B.ravel(), C.ravel())"


def compute(rng: np.random.Generator) -> dict:
    return tensor_dot_equivalence(rng, shape=(2, 3, 4))


def report(res: dict) -> str:
    return "\n".join(
        [
            banner(TITLE),
            f"B, C shape: {fmt_shape(res['B'].shape)}",
            f"sum(B * C)                 = {fmt_scalar(res['d_sum'])}",
            f"dot(B.ravel(), C.ravel())  = {fmt_scalar(res['d_dot'])}",
            f"Equal? {res['exact']} (isclose: {res['close']})",
            "",
            "Reminder: '@' (matrix multiply) is undefined for raw 3D arrays;",
            "the whole-tensor dot treats both arrays as long flat vectors.",
        ]
    )


def save_figure(res: dict, outputs_dir: str) -> str:
    from tensorprimer.core.plots import save_heatmaps

    return save_heatmaps({"B": res["B"], "C": res["C"], "B * C": res["B"] * res["C"]},
                         outputs_dir, "tensor_dot.pdf",
                         title=f"sum = {fmt_scalar(res['d_sum'])}")


def main(rng: np.random.Generator | None = None, outputs_dir: str | None = None) -> dict:
    rng = make_rng() if rng is None else rng
    res = compute(rng)
    print(report(res))

    if outputs_dir:
        save_figure(res, outputs_dir)
    return res


if __name__ == "__main__":
    main()
