from typer.testing import CliRunner

from aft_cli.__main__ import app


runner = CliRunner()


def test_help_lists_commands() -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "--plain" in result.stdout
    for command in ["log", "history", "recommend", "import", "login", "logout", "whoami"]:
        assert command in result.stdout


def test_version_flag() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.stdout


def test_json_and_plain_are_mutually_exclusive() -> None:
    result = runner.invoke(app, ["--json", "--plain", "history"])
    assert result.exit_code == 2
    assert "mutually exclusive" in result.stdout


def test_invalid_config_exits_with_code_2(tmp_path) -> None:
    path = tmp_path / "broken.toml"
    path.write_text("[defaults\n")
    result = runner.invoke(app, ["--config", str(path), "history"])
    assert result.exit_code == 2
    assert "Config error" in result.stdout
