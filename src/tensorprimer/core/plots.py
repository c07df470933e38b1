# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the TensorPrimer project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/tensorprimer/core/plots.py
from __future__ import annotations

import logging
import os

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

logger = logging.getLogger(__name__)


def _as_grid(arr: np.ndarray) -> tuple[np.ndarray, str]:
    arr = np.atleast_2d(np.asarray(arr, dtype=float))
    if arr.ndim == 3:
        return arr[:, :, 0], " [:, :, 0]"
    return arr, ""


def save_heatmaps(arrays: dict, outputs_dir: str, filename: str, title: str | None = None) -> str:
    """
    Draw one annotated heatmap per array side by side and save as PDF.
    3D arrays contribute their first trailing-axis slice. Returns the path.
    """
    os.makedirs(outputs_dir, exist_ok=True)
    fig, axes = plt.subplots(1, len(arrays), figsize=(3.2 * len(arrays), 3.4), squeeze=False)

    for ax, (name, arr) in zip(axes[0], arrays.items()):
        grid, suffix = _as_grid(arr)
        ax.imshow(grid, cmap="viridis")
        for (i, j), v in np.ndenumerate(grid):
            ax.text(j, i, f"{v:.2f}", ha="center", va="center", color="w", fontsize=8)
        ax.set_title(f"{name}{suffix}")
        ax.set_xticks([])
        ax.set_yticks([])

    if title:
        fig.suptitle(title)
    fig.tight_layout()
    out = os.path.join(outputs_dir, filename)
    fig.savefig(out, format="pdf", bbox_inches="tight")
    plt.close(fig)
    logger.info("Saved figure %s", out)
    return out
