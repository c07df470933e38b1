# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the TensorPrimer project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/tensorprimer/cli.py
from __future__ import annotations

import argparse
import logging
import sys

from tensorprimer.core.ops import make_rng
from tensorprimer.demos import BY_NAME, DEMOS
from tensorprimer.logging_config import setup_logging

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _add_common(parser: argparse.ArgumentParser, sub: bool = False) -> None:
    # subcommands only override what was passed, the top-level parser owns the defaults
    def default(value):
        return argparse.SUPPRESS if sub else value

    parser.add_argument("--seed", type=int, default=default(None), help="Seed for reproducible random inputs")
    parser.add_argument("--outputs_dir", default=default(None), help="Save a PDF figure per demo into this folder")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=default("WARNING"),
                        help="Logging level")


def cmd_menu(args: argparse.Namespace) -> int:
    from tensorprimer.menu import run_menu

    return run_menu(rng=make_rng(args.seed), outputs_dir=args.outputs_dir)


def cmd_run(args: argparse.Namespace) -> int:
    rng = make_rng(args.seed)
    names = [mod.NAME for mod in DEMOS.values()] if args.demo == "all" else [args.demo]
    for name in names:
        logger.info("Running demo %s", name)
        BY_NAME[name].main(rng=rng, outputs_dir=args.outputs_dir)
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    from tensorprimer.experiments.run_from_config import load_config, run_config

    run_config(load_config(args.config), seed=args.seed, outputs_dir=args.outputs_dir)
    return 0


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    p = argparse.ArgumentParser(prog="tensorprimer", description="Tensor & matrix arithmetic demos")
    _add_common(p)
    p.set_defaults(func=cmd_menu)
    sub = p.add_subparsers(dest="cmd")

    sp = sub.add_parser("menu", help="Interactive menu (default)")
    _add_common(sp, sub=True)
    sp.set_defaults(func=cmd_menu)

    sp = sub.add_parser("run", help="Run one demo (or all) without the menu")
    sp.add_argument("demo", choices=sorted(BY_NAME) + ["all"])
    _add_common(sp, sub=True)
    sp.set_defaults(func=cmd_run)

    sp = sub.add_parser("config", help="Run demos listed in a YAML config")
    sp.add_argument("--config", required=True, help="Path to YAML config")
    _add_common(sp, sub=True)
    sp.set_defaults(func=cmd_config)

    args = p.parse_args(argv)
    setup_logging(args.log_level)
    if args.seed is not None:
        logger.info("Using seed %d", args.seed)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
