"""
Tests for loading configuration words.
"""

from pathlib import Path

import pytest

from wordreader.words.errors import ParseError
from wordreader.words.loader import LoadError, WordLoader
from wordreader.words.syntax import WordSyntax


def test_load_file(write_config) -> None:
    write_config("common.pro", "-dontwarn\n")
    main = write_config("main.pro", "-verbose\n@ common.pro\n-keep 'a b'\n")

    assert WordLoader().load_file(main) == ["-verbose", "-dontwarn", "-keep", "a b"]


def test_load_file_url(write_config) -> None:
    main = write_config("main.pro", "-verbose\n")

    assert WordLoader().load_file(main.as_uri()) == ["-verbose"]


def test_load_remote_file(remote_client) -> None:
    client = remote_client({"/app.pro": "-verbose -dontshrink\n"})
    loader = WordLoader(client=client)

    assert loader.load_file("https://example.com/app.pro") == ["-verbose", "-dontshrink"]


def test_load_args(write_config, tmp_path: Path) -> None:
    write_config("common.pro", "x\n")

    words = WordLoader().load_args(["-verbose", "-include", "common.pro"], base_dir=tmp_path)

    assert words == ["-verbose", "x"]


def test_load_string(write_config, tmp_path: Path) -> None:
    write_config("common.pro", "x\n")

    words = WordLoader().load_string("a @ common.pro # done\n", base_dir=tmp_path)

    assert words == ["a", "x"]


def test_load_string_with_custom_syntax() -> None:
    loader = WordLoader(syntax=WordSyntax(delimiters=","))

    assert loader.load_string("a,b") == ["a", ",", "b"]


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(LoadError, match="Failed to read configuration") as excinfo:
        WordLoader().load_file(tmp_path / "missing.pro")

    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_malformed_file(write_config) -> None:
    main = write_config("main.pro", "-keep 'a b\n")

    with pytest.raises(LoadError, match="Failed to parse configuration") as excinfo:
        WordLoader().load_file(main)

    assert isinstance(excinfo.value.__cause__, ParseError)
    assert f"line 1 of file '{main}'" in str(excinfo.value)


def test_open_string_description() -> None:
    reader = WordLoader().open_string("a", description="inline rules")

    assert reader.line_location_description() == "line 0 of inline rules"
