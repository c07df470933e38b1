# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the TensorPrimer project.
# Licensed under the MIT License – see LICENSE in the repo root.

# demos/constructors_demo.py
from __future__ import annotations

import numpy as np

from tensorprimer.core.formatting import banner, labeled
from tensorprimer.core.ops import broadcasting_constructors

NAME = "constructors"
TITLE = "Broadcasting & Common Constructors (quick demo)"
MENU_LABEL = "Broadcasting & common constructors demo"


# deterministic: the generator is accepted only to share the demo signature
def compute(rng: np.random.Generator | None = None) -> dict:
    return broadcasting_constructors()


def report(res: dict) -> str:
    return "\n".join(
        [
            banner(TITLE),
            labeled("x  = np.arange(0, 12, dtype=np.float32):", res["x"]),
            labeled("y  = np.arange(0, 13, 2, dtype=np.float32):", res["y"]),
            labeled("X3 = np.array([[1, 2, 3], [4, 5, 6], [7, 8, 9]]).astype(np.float32):", res["X3"]),
            labeled("X71 reshape from range -> 3×3 float64:", res["X71"]),
            labeled("X72 same via comprehension -> 3×3 float64:", res["X72"]),
            f"Equivalence X71 == X72? {res['equal']}",
        ]
    )


def save_figure(res: dict, outputs_dir: str) -> str:
    from tensorprimer.core.plots import save_heatmaps

    return save_heatmaps({"X3": res["X3"], "X71": res["X71"], "X72": res["X72"]},
                         outputs_dir, "constructors.pdf")


def main(rng: np.random.Generator | None = None, outputs_dir: str | None = None) -> dict:
    res = compute(rng)
    print(report(res))

    if outputs_dir:
        save_figure(res, outputs_dir)
    return res


if __name__ == "__main__":
    main()
