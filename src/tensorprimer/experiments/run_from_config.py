# src/tensorprimer/experiments/run_from_config.py
from __future__ import annotations
import argparse, sys, os, logging, yaml

import numpy as np
import pandas as pd

from tensorprimer.core.ops import make_rng
from tensorprimer.demos import BY_NAME, DEMOS

logger = logging.getLogger(__name__)

DEFAULT_SUMMARY = "summary.csv"


def _summarize(name: str, res: dict) -> list[tuple[str, object]]:
    """(check, value) rows recorded for one demo run."""
    if name == "elementwise":
        return [
            ("hadamard_matches", bool(np.allclose(res["E"], res["A"] * res["B"]))),
            ("matmul_trace", float(np.trace(res["M"]))),
        ]
    if name == "tensor-dot":
        return [("d_sum", res["d_sum"]), ("d_dot", res["d_dot"]), ("close", res["close"])]
    if name == "batched":
        return [("R_shape", str(res["R"].shape))]
    if name == "constructors":
        return [("X71_equals_X72", res["equal"])]
    if name == "full-vs-slice":
        return [("d_full", res["d_full"]), ("R_shape", str(res["R"].shape))]
    if name == "transpose":
        return [
            ("dot", int(res["vec"]["dot"])),
            ("xt_y", int(res["vec"]["xt_y"][0, 0])),
            ("gram_shape", str(res["mat"]["G"].shape)),
        ]
    raise SystemExit(f"Unknown demo: {name}")


def run(demos: list[str], outputs_dir: str, seed: int | None = None, plot: bool = False,
        summary_csv: str = DEFAULT_SUMMARY) -> pd.DataFrame:
    unknown = [d for d in demos if d not in BY_NAME]
    if unknown:
        raise SystemExit(f"Unknown demo: {', '.join(unknown)}")

    rng = make_rng(seed)
    rows = []
    for name in demos:
        logger.info("Running demo %s (seed=%s)", name, seed)
        res = BY_NAME[name].main(rng=rng, outputs_dir=outputs_dir if plot else None)
        rows += [{"demo": name, "check": check, "value": value} for check, value in _summarize(name, res)]

    df = pd.DataFrame(rows, columns=["demo", "check", "value"])
    os.makedirs(outputs_dir, exist_ok=True)
    out = os.path.join(outputs_dir, summary_csv)
    df.to_csv(out, index=False)
    print("Saved:", out)
    return df


def load_config(path: str) -> dict:
    """Read a YAML config and check its shape; bad shapes exit with a message."""
    with open(path, "r", encoding="utf-8") as fh:
        cfg = yaml.safe_load(fh) or {}

    if not isinstance(cfg, dict):
        raise SystemExit(f"Config {path} must be a mapping, got {type(cfg).__name__}")
    demos = cfg.get("demos")
    if demos is not None and not (isinstance(demos, list) and all(isinstance(d, str) for d in demos)):
        raise SystemExit(f"Config key 'demos' must be a list of demo names, got {demos!r}")
    return cfg


def run_config(cfg: dict, seed: int | None = None, outputs_dir: str | None = None) -> pd.DataFrame:
    """Run a loaded config; ``seed``/``outputs_dir`` override the file when given."""
    return run(
        demos=cfg.get("demos") or [mod.NAME for mod in DEMOS.values()],
        outputs_dir=outputs_dir if outputs_dir is not None else cfg.get("outputs_dir", "outputs"),
        seed=seed if seed is not None else cfg.get("seed"),
        plot=bool(cfg.get("plot", False)),
        summary_csv=cfg.get("summary_csv", DEFAULT_SUMMARY),
    )


def main(argv: list[str] | None = None):
    ap = argparse.ArgumentParser(description="Run TensorPrimer demos from YAML config")
    ap.add_argument("--config", required=True, help="Path to YAML config")
    args = ap.parse_args(sys.argv[1:] if argv is None else argv)
    return run_config(load_config(args.config))


if __name__ == "__main__":
    main()
