import numpy as np


def test_imports():
    import tensorprimer  # noqa: F401
    import tensorprimer.cli as cli  # noqa: F401
    import tensorprimer.core.formatting as fmt  # noqa: F401
    import tensorprimer.core.ops as ops  # noqa: F401
    import tensorprimer.demos as demos  # noqa: F401
    import tensorprimer.experiments.run_from_config as rfc  # noqa: F401
    import tensorprimer.menu as menu  # noqa: F401


def test_registry_covers_six_demos():
    from tensorprimer.demos import BY_NAME, DEMOS

    assert list(DEMOS) == [1, 2, 3, 4, 5, 6]
    assert set(BY_NAME) == {"elementwise", "tensor-dot", "batched", "constructors", "full-vs-slice", "transpose"}
    for mod in DEMOS.values():
        assert callable(mod.compute) and callable(mod.report) and callable(mod.main)


def test_end_to_end_transpose_dot_is_32():
    # x=[1,2,3], y=[4,5,6] → x'y = dot = 32
    from tensorprimer.core.ops import transpose_dot_1d

    res = transpose_dot_1d([1, 2, 3], [4, 5, 6])
    assert res["dot"] == 32
    assert res["xt_y"].shape == (1, 1)
    assert np.array_equal(res["xt_y"], [[32]])
