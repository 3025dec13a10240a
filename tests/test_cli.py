import io

from workbench.cli import main


def test_runs_named_script(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "run.txt").write_text('log("out.log")\nprint("hi there")\n')
    assert main(["run.txt"]) == 0
    out = capsys.readouterr().out
    assert "File to run" in out
    assert "run.txt: hi there" in (tmp_path / "out.log").read_text()


def test_reads_filename_from_stdin(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "run.txt").write_text("bogus(thing)\n")
    monkeypatch.setattr("sys.stdin", io.StringIO("run.txt\n"))
    assert main([]) == 0
    assert "invalid command!" in capsys.readouterr().out


def test_missing_script_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["absent.txt"]) == 1
    assert "Error opening the file!" in capsys.readouterr().err


def test_empty_stdin_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1
    assert "Error opening the file!" in capsys.readouterr().err