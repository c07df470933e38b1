import logging

import pandas as pd
import pytest

from tensorprimer import cli
from tensorprimer.experiments import run_from_config
from tensorprimer.logging_config import setup_logging


def test_run_single_demo(capsys):
    assert cli.main(["run", "transpose"]) == 0
    out = capsys.readouterr().out
    assert "Dot Product using Transpose" in out
    assert "A.T @ B =" in out


def test_run_all_with_seed_is_reproducible(capsys):
    cli.main(["--seed", "11", "run", "all"])
    first = capsys.readouterr().out
    cli.main(["run", "all", "--seed", "11"])
    second = capsys.readouterr().out
    assert first == second
    assert "Tensor & Matrix" not in first  # no menu in run mode


def test_unknown_demo_rejected():
    with pytest.raises(SystemExit):
        cli.main(["run", "nope"])


def test_default_is_menu(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "0")
    assert cli.main([]) == 0
    assert "Bye!" in capsys.readouterr().out


def test_config_run_writes_summary(tmp_path, capsys):
    cfg = tmp_path / "cfg.yaml"
    out_dir = tmp_path / "out"
    cfg.write_text(
        f"seed: 5\ndemos: [tensor-dot, constructors, transpose]\noutputs_dir: {out_dir}\nplot: true\n",
        encoding="utf-8",
    )
    df = run_from_config.main(["--config", str(cfg)])

    assert list(df["demo"].unique()) == ["tensor-dot", "constructors", "transpose"]
    csv = pd.read_csv(out_dir / "summary.csv")
    assert len(csv) == len(df)
    row = df[(df["demo"] == "transpose") & (df["check"] == "dot")]
    assert row["value"].iloc[0] == 32
    assert (out_dir / "tensor_dot.pdf").exists()
    assert "Saved:" in capsys.readouterr().out


def test_config_unknown_demo(tmp_path):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text(f"demos: [bogus]\noutputs_dir: {tmp_path}\n", encoding="utf-8")
    with pytest.raises(SystemExit, match="Unknown demo"):
        run_from_config.main(["--config", str(cfg)])


def test_cli_config_subcommand(tmp_path):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text(f"demos: [constructors]\noutputs_dir: {tmp_path}\n", encoding="utf-8")
    assert cli.main(["config", "--config", str(cfg)]) == 0
    assert (tmp_path / "summary.csv").exists()


def test_setup_logging_is_idempotent(tmp_path):
    log_file = tmp_path / "run.log"
    setup_logging("INFO")
    logger = setup_logging(logging.DEBUG, log_file=str(log_file))
    assert len(logger.handlers) == 2
    logging.getLogger("tensorprimer.test").info("hello")
    for h in logger.handlers:
        h.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")
    setup_logging()


def test_cli_config_seed_overrides_and_reproduces(tmp_path):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text(f"demos: [tensor-dot]\noutputs_dir: {tmp_path / 'unused'}\n", encoding="utf-8")

    first, second = tmp_path / "a", tmp_path / "b"
    cli.main(["config", "--config", str(cfg), "--seed", "3", "--outputs_dir", str(first)])
    cli.main(["config", "--config", str(cfg), "--seed", "3", "--outputs_dir", str(second)])

    a = pd.read_csv(first / "summary.csv")
    b = pd.read_csv(second / "summary.csv")
    pd.testing.assert_frame_equal(a, b)
    assert not (tmp_path / "unused").exists()


def test_log_level_is_case_insensitive(capsys):
    assert cli.main(["--log-level", "info", "run", "constructors"]) == 0
    assert logging.getLogger("tensorprimer").level == logging.INFO
    setup_logging()


@pytest.mark.parametrize("argv", [
    ["--log-level", "LOUD", "run", "constructors"],
    ["run", "constructors", "--log-level", "LOUD"],
])
def test_unknown_log_level_is_usage_error(argv):
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    assert exc.value.code == 2


@pytest.mark.parametrize("text, message", [
    ("demos: batched\n", "list of demo names"),
    ("- batched\n- transpose\n", "must be a mapping"),
])
def test_config_shape_errors(tmp_path, text, message):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text(text, encoding="utf-8")
    with pytest.raises(SystemExit, match=message):
        run_from_config.main(["--config", str(cfg)])
