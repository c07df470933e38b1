from tensorprimer.core.ops import make_rng
from tensorprimer.menu import PAUSE, PROMPT, menu_text, parse_choice, run_menu


def scripted(lines):
    """read() replacement that feeds lines then raises EOFError; records prompts."""
    feed = iter(lines)
    prompts = []

    def read(prompt):
        prompts.append(prompt)
        try:
            return next(feed)
        except StopIteration:
            raise EOFError

    return read, prompts


def run(lines):
    read, prompts = scripted(lines)
    out = []
    status = run_menu(rng=make_rng(0), read=read, write=out.append)
    return status, out, prompts


def test_parse_choice():
    assert parse_choice(" 3\n") == 3
    assert parse_choice("") is None
    assert parse_choice("abc") is None
    assert parse_choice("2.5") is None


def test_menu_lists_options():
    text = menu_text()
    assert "===== Tensor & Matrix Ops Menu =====" in text
    for n in range(7):
        assert f"{n})" in text
    assert "0) Exit" in text


def test_exit_immediately():
    status, out, prompts = run(["0"])
    assert status == 0
    assert out[-1] == "Bye!"
    assert prompts == [PROMPT]


def test_malformed_input_reprompts_silently():
    status, out, prompts = run(["", "x", "0"])
    assert status == 0
    assert prompts == [PROMPT, PROMPT, PROMPT]
    assert "Invalid choice." not in out
    assert out.count(menu_text()) == 3


def test_out_of_range_is_invalid_choice():
    _, out, _ = run(["9", "0"])
    assert "Invalid choice." in out


def test_demo_runs_then_pauses():
    status, out, prompts = run(["6", "", "0"])
    assert status == 0
    assert prompts == [PROMPT, PAUSE, PROMPT]
    assert any("np.dot(x, y) = 32" in block for block in out)


def test_end_of_input_leaves_cleanly():
    status, out, _ = run(["1"])
    assert status == 0
    assert "Bye!" not in out


def test_figures_written_when_outputs_dir(tmp_path):
    read, _ = scripted(["4", "", "0"])
    run_menu(rng=make_rng(0), read=read, write=lambda s: None, outputs_dir=str(tmp_path))
    assert (tmp_path / "constructors.pdf").exists()
