import asyncio
import json

from typer.testing import CliRunner

from techflow.cli import run as run_module
from techflow.cli.app import app
from techflow.cli.watch import watch_feed
from techflow.config import load_config
from techflow.pipeline import build_service

runner = CliRunner()


def test_init_writes_config(tmp_path):
    path = tmp_path / "config.yaml"

    result = runner.invoke(app, ["init", "--config", str(path), "--ttl-hours", "2", "--no-trending"])

    assert result.exit_code == 0
    config = load_config(path)
    assert config.cache.ttl_hours == 2
    assert config.trending.enabled is False


def test_init_refuses_to_overwrite(tmp_path):
    path = tmp_path / "config.yaml"
    runner.invoke(app, ["init", "--config", str(path)])

    result = runner.invoke(app, ["init", "--config", str(path)])

    assert result.exit_code == 1


def test_sources_list(tmp_path):
    result = runner.invoke(
        app,
        ["sources", "list", "--config", str(tmp_path / "missing.yaml")],
        env={"COLUMNS": "250"},
    )

    assert result.exit_code == 0
    assert "TechCrunch" in result.output
    assert "GitHub Trending" in result.output


def test_run_json(tmp_path, monkeypatch, transport, clock, example_source):
    def fake_build_service(config):
        return build_service(config, sources=[example_source], transport=transport, clock=clock)

    monkeypatch.setattr(run_module, "build_service", fake_build_service)

    result = runner.invoke(
        app,
        ["run", "--json", "--limit", "2", "--config", str(tmp_path / "missing.yaml")],
    )

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["cached"] is False
    assert payload["sources"] == ["Example", "GitHub Trending"]
    assert [item["url"] for item in payload["items"]] == [
        "https://github.com/octo/rocket",
        "https://github.com/acme/quiet",
    ]


def test_run_category_filter(tmp_path, monkeypatch, transport, clock, example_source):
    def fake_build_service(config):
        return build_service(config, sources=[example_source], transport=transport, clock=clock)

    monkeypatch.setattr(run_module, "build_service", fake_build_service)

    result = runner.invoke(
        app,
        [
            "run",
            "--json",
            "--category",
            "Tech Conferences",
            "--config",
            str(tmp_path / "missing.yaml"),
        ],
    )

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert [item["url"] for item in payload["items"]] == ["https://www.example.com/summit"]


def test_run_reports_bad_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("fetch:\n  timeout: -1\n", encoding="utf-8")

    result = runner.invoke(app, ["run", "--config", str(path)])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_watch_serves_from_cache(transport, clock, example_source, capsys):
    service = build_service(sources=[example_source], transport=transport, clock=clock)

    asyncio.run(watch_feed(service, interval=0, cycles=3))

    output = capsys.readouterr().out
    assert output.count("refreshed") == 1
    assert output.count("cached since") == 2
