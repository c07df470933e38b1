import numpy as np
import pytest

from tensorprimer.core.formatting import banner, fmt_scalar, fmt_shape, format_array
from tensorprimer.core.ops import make_rng
from tensorprimer.demos import DEMOS, BY_NAME


def test_banner_frames_title():
    lines = banner("Title").split("\n")
    assert lines[1] == "=" * 60
    assert lines[2] == "Title"
    assert lines[3] == "=" * 60


def test_scalar_and_shape_formatting():
    assert fmt_scalar(32) == "32.000000"
    assert fmt_scalar(1 / 3) == "0.333333"
    assert fmt_shape((2, 3, 4)) == "(2, 3, 4)"


def test_format_array_headers():
    assert format_array(np.zeros((3, 3))).startswith("3×3 float64:")
    assert format_array(np.arange(4)).splitlines()[0].startswith("4-element int")

    text = format_array(np.zeros((2, 2, 3)))
    assert text.count("[:, :, ") == 3


@pytest.mark.parametrize("key", sorted(DEMOS))
def test_every_report_has_banner(key):
    mod = DEMOS[key]
    text = mod.report(mod.compute(make_rng(0)))
    assert mod.TITLE in text
    assert "=" * 60 in text


def test_same_seed_same_report():
    mod = BY_NAME["elementwise"]
    assert mod.report(mod.compute(make_rng(3))) == mod.report(mod.compute(make_rng(3)))


def test_tensor_dot_report_prints_six_decimals():
    mod = BY_NAME["tensor-dot"]
    res = mod.compute(make_rng(1))
    text = mod.report(res)
    assert f"= {res['d_sum']:.6f}" in text
    assert "isclose: True" in text
    assert "undefined for raw 3D arrays" in text


def test_constructors_report_cross_check():
    mod = BY_NAME["constructors"]
    assert "Equivalence X71 == X72? True" in mod.report(mod.compute())


def test_full_vs_slice_report_contrast():
    mod = BY_NAME["full-vs-slice"]
    text = mod.report(mod.compute(make_rng(2)))
    assert "R shape = (2, 2, 4)" in text
    assert "4 independent (2×3)@(3×2)" in text
    assert "overall similarity" in text and "structured batch results" in text


def test_transpose_report_explains_32():
    mod = BY_NAME["transpose"]
    text = mod.report(mod.compute())
    assert "1×4 + 2×5 + 3×6 = 32" in text
    assert "np.dot(x, y) = 32" in text
    assert "(2×3) × (3×2) → (2×2)" in text


def test_main_prints_and_saves_figure(tmp_path, capsys):
    res = BY_NAME["batched"].main(rng=make_rng(4), outputs_dir=str(tmp_path))
    out = capsys.readouterr().out
    assert "Per-slice result shape (stacked): (2, 2, 4)" in out
    assert res["R"].shape == (2, 2, 4)
    assert (tmp_path / "batched_matmul.pdf").exists()
