# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the TensorPrimer project.
# Licensed under the MIT License – see LICENSE in the repo root.
"""
Logging configuration for the 'tensorprimer' logger namespace.

Demo narration is printed; the logger carries diagnostics only
(seed, dispatched demo, saved figure paths).
"""
from __future__ import annotations

import logging
import sys


def setup_logging(level: int | str = logging.WARNING, log_file: str | None = None) -> logging.Logger:
    """
    Configure the 'tensorprimer' logger.

    Args:
        level: logging level, as int or name ("DEBUG", "INFO", ...)
        log_file: optional path; logs are also written there
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger("tensorprimer")
    logger.setLevel(level)

    # avoid duplicate lines when called twice (tests, repeated CLI calls)
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
