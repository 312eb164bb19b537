"""Tests for the command-line entry point."""

import pytest

from plays_mcp import server


@pytest.fixture
def cli_args(config):
    return [
        "--catalog",
        str(config.catalog_path),
        "--plays-dir",
        str(config.plays_dir),
        "--artifact-dir",
        str(config.artifact_dir),
    ]


def test_find_unique_title(cli_args, capsys) -> None:
    assert server.main([*cli_args, "--find", "Fifth"]) == 0
    assert capsys.readouterr().out.strip() == "hen_v\tThe Life of Henry the Fifth"


def test_find_asks_when_ambiguous(cli_args, capsys, monkeypatch) -> None:
    monkeypatch.setattr("builtins.input", lambda prompt="": "1")

    assert server.main([*cli_args, "--find", "Henry"]) == 0
    out = capsys.readouterr().out
    assert "Matching titles (pick one):" in out
    assert out.strip().splitlines()[-1] == "hen_iv_1\tThe First Part of Henry the Fourth"


def test_find_declined_fails(cli_args, capsys, monkeypatch) -> None:
    monkeypatch.setattr("builtins.input", lambda prompt="": "0")

    assert server.main([*cli_args, "--find", "Henry"]) == 1
    assert "Several titles matched" in capsys.readouterr().err


def test_find_unknown_does_not_register_external(cli_args, capsys) -> None:
    assert server.main([*cli_args, "--find", "Pericles"]) == 1
    assert "No play title or key matches" in capsys.readouterr().err


def test_missing_catalog_exits_with_error(tmp_path) -> None:
    assert server.main(["--catalog", str(tmp_path / "missing.csv"), "--find", "x"]) == 2


def test_no_persist_flag(cli_args) -> None:
    args = server._build_parser().parse_args([*cli_args, "--no-persist"])
    config = server._config_from_args(args)
    assert config.persist is False
    assert str(config.plays_dir) == cli_args[3]
