# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the TensorPrimer project.
# Licensed under the MIT License – see LICENSE in the repo root.

# demos/transpose_dot_demo.py
from __future__ import annotations

import numpy as np

from tensorprimer.core.formatting import banner, labeled
from tensorprimer.core.ops import transpose_dot_1d, transpose_dot_2d

NAME = "transpose"
TITLE = "Dot Product using Transpose (x.T @ y) in NumPy"
MENU_LABEL = "Dot product using transpose (x.T @ y) — 1D & 2D examples"


def compute(rng: np.random.Generator | None = None) -> dict:
    return {"vec": transpose_dot_1d(), "mat": transpose_dot_2d()}


def _report_1d(res: dict) -> list[str]:
    x, y = res["x"], res["y"]
    terms = " + ".join(f"{a}×{b}" for a, b in zip(x.tolist(), y.tolist()))
    return [
        "1D vectors:",
        f"x = {x.tolist()}",
        f"y = {y.tolist()}",
        "",
        "Compute:",
        f"x.reshape(1, -1) @ y.reshape(-1, 1) = {res['xt_y'].tolist()}",
        f"np.dot(x, y) = {res['dot']}",
        "",
        "Explanation:",
        f"Transposing turns the column vector {x.tolist()} into a 1×{x.size} row.",
        f"Then row × column = scalar: {terms} = {res['dot']}.",
        "So the transpose product is equivalent to np.dot(x, y).",
        "The transpose product returns a 1×1 array; np.dot(x, y) returns a plain scalar.",
        "",
    ]


def _report_2d(res: dict) -> list[str]:
    A, B, G = res["A"], res["B"], res["G"]
    r, c = A.shape
    return [
        "2D matrices:",
        labeled(f"A ({r}×{c}):", A),
        labeled(f"B ({r}×{c}):", B),
        labeled("A.T @ B =", G),
        "Explanation:",
        f"A is {r}×{c}, so A.T is {c}×{r}.",
        f"A.T @ B multiplies ({c}×{r}) × ({r}×{c}) → ({c}×{c}).",
        "Each entry of A.T @ B is the dot product between one column of A and one column of B.",
        "This generalizes the vector dot product to matrices: it gives all pairwise dot "
        "products between columns of A and B.",
    ]


def report(res: dict) -> str:
    return "\n".join([banner(TITLE)] + _report_1d(res["vec"]) + _report_2d(res["mat"]))


def save_figure(res: dict, outputs_dir: str) -> str:
    from tensorprimer.core.plots import save_heatmaps

    mat = res["mat"]
    return save_heatmaps({"A": mat["A"], "B": mat["B"], "A.T @ B": mat["G"]}, outputs_dir, "transpose_dot.pdf")


def main(rng: np.random.Generator | None = None, outputs_dir: str | None = None) -> dict:
    res = compute(rng)
    print(report(res))

    if outputs_dir:
        save_figure(res, outputs_dir)
    return res


if __name__ == "__main__":
    main()
