import io

import pytest

from brewcalc.cli import format_help, format_version, main, parse_args
from brewcalc.session import DEFAULT_FILE


def test_help_text_contents():
    text = format_help()
    assert text.startswith("Usage: qbrew [options] [file]\n")
    assert "--help" in text
    assert "--version" in text
    assert "File to open" in text


def test_version_text_starts_with_package():
    assert format_version().startswith("qbrew ")


def test_parse_args_no_arguments_returns_default():
    assert parse_args([], io.StringIO()) == DEFAULT_FILE


def test_parse_args_returns_first_filename():
    out = io.StringIO()
    assert parse_args(["beer.qbrew", "other.qbrew"], out) == "beer.qbrew"
    assert out.getvalue() == ""


@pytest.mark.parametrize("flag", ["-h", "-help", "--help"])
def test_parse_args_help_exits_zero(flag):
    out = io.StringIO()
    with pytest.raises(SystemExit) as info:
        parse_args([flag], out)
    assert info.value.code == 0
    assert out.getvalue() == format_help()


@pytest.mark.parametrize("flag", ["-v", "-version", "--version"])
def test_parse_args_version_exits_zero(flag):
    out = io.StringIO()
    with pytest.raises(SystemExit) as info:
        parse_args([flag], out)
    assert info.value.code == 0
    assert out.getvalue() == format_version()


def test_parse_args_invalid_option_exits_one():
    out = io.StringIO()
    with pytest.raises(SystemExit) as info:
        parse_args(["--bogus"], out)
    assert info.value.code == 1
    assert out.getvalue() == 'Invalid parameter "--bogus"\n' + format_help()


def test_parse_args_option_before_filename_is_handled_first():
    with pytest.raises(SystemExit) as info:
        parse_args(["--version", "beer.qbrew"], io.StringIO())
    assert info.value.code == 0


def test_main_version(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert capsys.readouterr().out == format_version()


def test_main_new_recipe(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("BREWCALC_CONFIG", str(tmp_path / "missing.ini"))
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    assert "untitled.qbrew" in capsys.readouterr().out


def test_main_opens_existing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("BREWCALC_CONFIG", str(tmp_path / "missing.ini"))
    monkeypatch.chdir(tmp_path)
    (tmp_path / "ale.qbrew").write_text("recipe", encoding="utf-8")
    assert main(["ale.qbrew"]) == 0
    assert "ale.qbrew" in capsys.readouterr().out


def test_main_missing_file_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("BREWCALC_CONFIG", str(tmp_path / "missing.ini"))
    monkeypatch.chdir(tmp_path)
    assert main(["nothere.qbrew"]) == 1
    assert "nothere.qbrew" in capsys.readouterr().err