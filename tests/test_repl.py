import io

import pytest

from mal import repl as repl_module
from mal.interpreter import Interpreter


def _feed(lines):
    it = iter(lines)

    def read_line(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    return read_line


def _run(lines):
    out, err = io.StringIO(), io.StringIO()
    repl_module.repl(Interpreter(), _feed(lines), out, err)
    return out.getvalue(), err.getvalue()


def test_repl_prints_results():
    out, err = _run(["(+ 1 2)", '(str "a" "b")'])
    assert out == '3\n"ab"\n\n'
    assert err == ""


def test_repl_continues_after_error():
    out, err = _run(["(def! x 5)", "(undefined)", "(* x 2)"])
    assert out == "5\n10\n\n"
    assert err == "Error: 'undefined' not found\n"


def test_repl_reports_reader_errors():
    out, err = _run(["(1 2", "7"])
    assert out == "7\n\n"
    assert err.startswith("Error: ")


def test_repl_skips_blank_lines():
    out, _ = _run(["", "   ", "1"])
    assert out == "1\n\n"


def test_repl_reports_stack_exhaustion():
    out, err = _run(["(def! loop (fn* (n) (+ 1 (loop n))))", "(loop 1)", "(+ 1 1)"])
    assert "recursion" in err
    assert out.endswith("2\n\n")


def test_repl_survives_huge_products():
    squares = "(let* (a 10000000000 b (* a a) c (* b b) d (* c c) e (* d d) f (* e e) g (* f f) h (* g g) i (* h h) j (* i i)) j)"
    out, err = _run([squares, "(+ 1 2)", "99999999999999999999999"])
    assert out.endswith("3\n\n")
    assert err.startswith("Error: Integer literal")


def test_repl_side_effects_go_to_stdout(capsys):
    out, _ = _run(['(prn "x")'])
    assert capsys.readouterr().out == '"x"\n'
    assert out == "nil\n\n"


def test_main_without_history(monkeypatch):
    seen = {}

    def fake_repl(interpreter, *args, **kwargs):
        seen["interpreter"] = interpreter

    monkeypatch.setattr(repl_module, "repl", fake_repl)
    monkeypatch.setattr(repl_module, "load_history", lambda: pytest.fail("history loaded"))
    monkeypatch.setattr(repl_module, "save_history", lambda: pytest.fail("history saved"))
    assert repl_module.main(["--no-history"]) == 0
    assert isinstance(seen["interpreter"], Interpreter)


def test_history_round_trip(monkeypatch, tmp_path):
    history = tmp_path / "history"
    monkeypatch.setenv("MAL_HISTORY_PATH", str(history))
    repl_module.readline.clear_history()
    repl_module.readline.add_history("(+ 1 2)")
    repl_module.save_history()
    assert history.exists()
    repl_module.readline.clear_history()
    repl_module.load_history()
    assert repl_module.readline.get_history_item(1) == "(+ 1 2)"


def test_missing_history_file_is_fine(monkeypatch, tmp_path):
    monkeypatch.setenv("MAL_HISTORY_PATH", str(tmp_path / "absent"))
    repl_module.load_history()


def test_history_disabled(monkeypatch):
    monkeypatch.setenv("MAL_HISTORY_PATH", "")
    repl_module.load_history()
    repl_module.save_history()
