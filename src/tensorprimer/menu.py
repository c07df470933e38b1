# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the TensorPrimer project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/tensorprimer/menu.py
from __future__ import annotations

import logging
from typing import Callable

import numpy as np

from tensorprimer.core.ops import make_rng
from tensorprimer.demos import DEMOS

logger = logging.getLogger(__name__)

HEADER = "\n===== Tensor & Matrix Ops Menu ====="
PROMPT = "Choose an option: "
PAUSE = "\nPress ENTER to continue..."
EXIT_CODE = 0


def parse_choice(line: str) -> int | None:
    """Integer menu selection, or None for blank / non-numeric input."""
    try:
        return int(line.strip())
    except ValueError:
        return None


def menu_text() -> str:
    lines = [HEADER]
    lines += [f"{key}) {mod.MENU_LABEL}" for key, mod in DEMOS.items()]
    lines.append(f"{EXIT_CODE}) Exit")
    return "\n".join(lines)


def run_menu(
    rng: np.random.Generator | None = None,
    read: Callable[[str], str] | None = None,
    write: Callable[[str], None] = print,
    outputs_dir: str | None = None,
) -> int:
    """
    Show the menu, dispatch the selected demo, pause, repeat until "0) Exit".

    ``read`` gets the prompt and returns one line (``input`` by default);
    ``write`` receives every block of output. End of input on the menu prompt
    ends the loop like "0) Exit" does.
    """
    rng = make_rng() if rng is None else rng
    read = input if read is None else read

    while True:
        write(menu_text())
        try:
            line = read(PROMPT)
        except EOFError:
            logger.debug("stdin closed, leaving menu")
            return 0

        choice = parse_choice(line)
        if choice is None:
            continue

        if choice == EXIT_CODE:
            write("Bye!")
            return 0

        demo = DEMOS.get(choice)
        if demo is None:
            write("Invalid choice.")
            continue

        logger.info("Running demo %d (%s)", choice, demo.NAME)
        res = demo.compute(rng)
        write(demo.report(res))
        if outputs_dir:
            demo.save_figure(res, outputs_dir)

        try:
            read(PAUSE)
        except EOFError:
            return 0
