from click.testing import CliRunner

from pokedex import __version__
from pokedex.cli import main


def test_version() -> None:
    result = CliRunner().invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_rejects_non_positive_interval() -> None:
    result = CliRunner().invoke(main, ["--reap-interval", "0"])
    assert result.exit_code != 0
    assert "reap-interval" in result.output


def test_options_reach_console(monkeypatch) -> None:
    captured = {}

    async def fake_run_console(**kwargs):
        captured.update(kwargs)

    monkeypatch.setattr("pokedex.repl.console.run_console", fake_run_console)

    result = CliRunner().invoke(main, ["--reap-interval", "5", "--max-age", "60", "--base-url", "http://x/api/v2"])

    assert result.exit_code == 0
    assert captured == {"reap_interval": 5.0, "max_age": 60.0, "base_url": "http://x/api/v2"}


def test_startup_errors_are_reported(monkeypatch) -> None:
    async def broken_run_console(**kwargs):
        raise ValueError("Config value api.page_size='lots' is not an integer")

    monkeypatch.setattr("pokedex.repl.console.run_console", broken_run_console)

    result = CliRunner().invoke(main, [])

    assert result.exit_code == 1
    assert "Unable to start the Pokedex" in result.output
