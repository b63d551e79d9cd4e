"""
Tests for the command-line entry point.
"""

import logging

import pytest

from wordreader.__main__ import main


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by main()."""
    yield
    logging.getLogger("wordreader").handlers.clear()


def test_prints_words(write_config, capsys: pytest.CaptureFixture[str]) -> None:
    main_file = write_config("main.pro", "-keep 'my class'\n")

    assert main(["@", str(main_file), "-verbose"]) == 0

    assert capsys.readouterr().out.splitlines() == ["-keep", "my class", "-verbose"]


def test_prints_locations(write_config, capsys: pytest.CaptureFixture[str]) -> None:
    main_file = write_config("main.pro", "-keep\n")

    assert main(["--locations", "@", str(main_file)]) == 0

    assert capsys.readouterr().out.splitlines() == [f"line 1 of file '{main_file}': -keep"]


def test_no_words(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_missing_include(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--no-color", "@", str(tmp_path / "missing.pro")]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "missing.pro" in captured.err


def test_malformed_configuration(write_config, capsys: pytest.CaptureFixture[str]) -> None:
    main_file = write_config("main.pro", "a\n'b\n")

    assert main(["-q", "@", str(main_file)]) == 1

    captured = capsys.readouterr()
    assert captured.out == "a\n"
    assert "Missing closing quote" in captured.err


def test_include_prefix_in_argument(write_config, capsys: pytest.CaptureFixture[str]) -> None:
    main_file = write_config("main.pro", "x\n")

    assert main([f"@{main_file}", "-verbose"]) == 0

    assert capsys.readouterr().out.splitlines() == ["x", "-verbose"]
