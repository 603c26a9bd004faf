import io

from blaze.cli import main


def _stdin(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_no_arguments(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_missing_query(capsys):
    assert main(["--no-color"]) == 1
    assert "Usage: blaze [--query <str>]" in capsys.readouterr().err


def test_filters_stdin(monkeypatch, capsys):
    _stdin(monkeypatch, "xaxb\nab\nzzz\n")
    assert main(["--no-color", "ab"]) == 0
    assert capsys.readouterr().out.splitlines() == ["ab", "xaxb"]


def test_limit(monkeypatch, capsys):
    _stdin(monkeypatch, "xaxb\nab\nzzz\n")
    assert main(["--no-color", "--limit", "1", "ab"]) == 0
    assert capsys.readouterr().out.splitlines() == ["ab"]


def test_color_output(monkeypatch, capsys):
    _stdin(monkeypatch, "ab\n")
    assert main(["ab"]) == 0
    out = capsys.readouterr().out
    assert "\033[1;32ma\033[0m" in out
    assert "\033[1;32mb\033[0m" in out


def test_file_input(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text("readme\nrandom\nzeta\n")
    assert main(["--file", str(path), "--no-color", "--query", "rd"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert sorted(lines) == ["random", "readme"]


def test_missing_file(tmp_path, capsys):
    assert main(["--file", str(tmp_path / "absent.txt"), "q"]) == 1
    assert "absent.txt" in capsys.readouterr().err


def test_bad_limit(capsys):
    assert main(["--limit", "many", "q"]) == 1
    assert "Error" in capsys.readouterr().err