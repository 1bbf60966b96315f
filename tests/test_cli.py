"""
Tests for the command-line interface.
"""

import io

import pytest

from slidenav.cli import main, run_viewer
from slidenav.navigator import Navigator
from slidenav.renderers import TextRenderer


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("SLIDENAV_OUTPUT_DIR", "SLIDENAV_TITLE", "SLIDENAV_RATIO", "SLIDENAV_SHOW_NOTES"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def deck_path(tmp_path):
    path = tmp_path / "idioms.md"
    path.write_text(
        "class: center, middle\nname: intro\n# Idioms\n???\nsay hi\n---\n# RAII\n---\n# Pimpl",
        encoding="utf-8",
    )
    return path


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_render_default_output(deck_path, tmp_path, capsys):
    assert main(["render", str(deck_path)]) == 0

    output = tmp_path / "output" / "idioms.html"
    assert output.exists()
    assert "[Render] Saved HTML slideshow" in capsys.readouterr().out


def test_render_default_title_is_deck_name(deck_path, tmp_path):
    assert main(["render", str(deck_path)]) == 0

    html = (tmp_path / "output" / "idioms.html").read_text(encoding="utf-8")
    assert "<title>idioms</title>" in html


def test_render_title_from_env(deck_path, tmp_path, monkeypatch):
    monkeypatch.setenv("SLIDENAV_TITLE", "C++ Idioms")

    assert main(["render", str(deck_path)]) == 0

    html = (tmp_path / "output" / "idioms.html").read_text(encoding="utf-8")
    assert "<title>C++ Idioms</title>" in html


def test_render_explicit_output_and_title(deck_path, tmp_path):
    output = tmp_path / "site" / "index.html"

    assert main(["render", str(deck_path), "-o", str(output), "--title", "Talk"]) == 0
    assert "<title>Talk</title>" in output.read_text(encoding="utf-8")


def test_render_uses_env_output_dir(deck_path, tmp_path, monkeypatch):
    monkeypatch.setenv("SLIDENAV_OUTPUT_DIR", str(tmp_path / "env_out"))

    assert main(["render", str(deck_path)]) == 0
    assert (tmp_path / "env_out" / "idioms.html").exists()


def test_missing_deck(tmp_path, capsys):
    assert main(["info", str(tmp_path / "nope.md")]) == 1
    assert "Deck not found" in capsys.readouterr().err


def test_empty_deck_is_parse_error(tmp_path, capsys):
    path = tmp_path / "empty.md"
    path.write_text("", encoding="utf-8")

    assert main(["render", str(path)]) == 1
    assert "Error:" in capsys.readouterr().err


def test_info(deck_path, capsys):
    assert main(["info", str(deck_path)]) == 0
    out = capsys.readouterr().out

    assert "3 slides" in out
    assert "#intro [center middle]  Idioms" in out
    assert "RAII" in out


def test_show_reads_events(deck_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("n\nn\nn\nq\n"))

    assert main(["show", str(deck_path)]) == 0
    out = capsys.readouterr().out

    assert "Slide 1/3" in out
    assert out.count("Slide 3/3") == 2


def test_show_start_out_of_range(deck_path, capsys):
    assert main(["show", str(deck_path), "--start", "9"]) == 1
    assert "out of range" in capsys.readouterr().err


def test_run_viewer_reports_errors():
    nav = Navigator.from_source("A\n---\nB")
    stdout = io.StringIO()

    run_viewer(nav, TextRenderer(), stdin=io.StringIO("7\nwhat\n2\n"), stdout=stdout)

    out = stdout.getvalue()
    assert "! No slide 7 (deck has 2 slides)" in out
    assert "! Unknown command: what" in out
    assert "Slide 2/2" in out
    assert nav.index == 1


def test_run_viewer_shows_notes():
    nav = Navigator.from_source("A\n???\nremember")
    stdout = io.StringIO()

    run_viewer(nav, TextRenderer(show_notes=True), stdin=io.StringIO(""), stdout=stdout)

    assert "remember" in stdout.getvalue()
