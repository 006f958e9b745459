"""
Tests for the presence CLI.
Run with: pytest test_cli.py -v
"""
import json

import pytest
from click.testing import CliRunner

import cli

RECORDS = [
    {
        "platform": "chatgpt",
        "queryText": "Acme Corp",
        "responseText": "Acme Corp is a leading company founded in 2015. " * 5,
        "citations": ["https://en.wikipedia.org/wiki/Acme", "https://techcrunch.com/acme"],
    },
    {
        "platform": "perplexity",
        "queryText": "Acme Corp",
        "responseText": "Acme Corp sells routing software to logistics customers.",
        "citations": ["https://en.wikipedia.org/wiki/Acme"],
    },
]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the CLI away from the real ~/.presence-analytics."""
    config_dir = tmp_path / "config"
    monkeypatch.setattr(cli, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(cli, "CONFIG_FILE", config_dir / "config.json")
    return config_dir


@pytest.fixture
def records_file(tmp_path):
    path = tmp_path / "records.json"
    path.write_text(json.dumps(RECORDS))
    return path


def test_analyze_prints_results(records_file):
    result = CliRunner().invoke(cli.cli, ["analyze", str(records_file), "-i", "technology"])
    assert result.exit_code == 0, result.output
    assert "AI Presence Results" in result.output
    assert "Dimension Scores" in result.output


def test_analyze_writes_json_output(records_file, tmp_path):
    output = tmp_path / "result.json"
    result = CliRunner().invoke(cli.cli, ["analyze", str(records_file), "-o", str(output), "-v"])
    assert result.exit_code == 0, result.output

    data = json.loads(output.read_text())
    assert data["benchmark"]["industry"] == "default"
    assert [p["platform"] for p in data["platformComparison"]] == ["chatgpt", "perplexity"]


def test_analyze_accepts_wrapped_records(tmp_path):
    path = tmp_path / "audit.json"
    path.write_text(json.dumps({"records": RECORDS}))
    result = CliRunner().invoke(cli.cli, ["analyze", str(path)])
    assert result.exit_code == 0, result.output


def test_analyze_rejects_bad_record(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"platform": "myspace", "queryText": "Acme"}]))
    result = CliRunner().invoke(cli.cli, ["analyze", str(path)])
    assert result.exit_code == 1
    assert "Unknown platform" in result.output


@pytest.mark.parametrize("payload,message", [
    (["oops"], "must be an object"),
    ([{"platform": "chatgpt", "queryText": "Acme", "responseText": 123}], "'responseText' must be a string"),
    ([{"platform": "chatgpt", "queryText": 42}], "'queryText' must be a string"),
    ([{"platform": "chatgpt", "queryText": "Acme", "citations": {"url": "x"}}], "'citations' must be"),
])
def test_analyze_rejects_mistyped_record(tmp_path, payload, message):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(payload))
    result = CliRunner().invoke(cli.cli, ["analyze", str(path)])
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert message in result.output


def test_sources_lists_domains(records_file):
    result = CliRunner().invoke(cli.cli, ["sources", str(records_file)])
    assert result.exit_code == 0, result.output
    assert "en.wikipedia.org" in result.output


def test_changes_first_audit(records_file):
    result = CliRunner().invoke(cli.cli, ["changes", str(records_file)])
    assert result.exit_code == 0, result.output
    assert "First audit" in result.output


def test_changes_between_audits(records_file, tmp_path):
    previous = tmp_path / "previous.json"
    previous.write_text(json.dumps([dict(RECORDS[0], responseText="Acme Corp went bankrupt.")]))
    result = CliRunner().invoke(cli.cli, ["changes", str(records_file), str(previous)])
    assert result.exit_code == 0, result.output
    assert "chatgpt" in result.output


def test_config_saves_defaults(isolated_config):
    result = CliRunner().invoke(cli.cli, ["config", "-t", "person", "-i", "finance"])
    assert result.exit_code == 0, result.output

    saved = json.loads((isolated_config / "config.json").read_text())
    assert saved["entity_type"] == "person"
    assert saved["industry"] == "finance"


def test_config_defaults_apply_to_analyze(records_file, tmp_path):
    runner = CliRunner()
    runner.invoke(cli.cli, ["config", "-t", "company", "-i", "retail"])

    output = tmp_path / "result.json"
    result = runner.invoke(cli.cli, ["analyze", str(records_file), "-o", str(output)])
    assert result.exit_code == 0, result.output
    assert json.loads(output.read_text())["benchmark"]["industry"] == "retail"


def test_check_without_config():
    result = CliRunner().invoke(cli.cli, ["check"])
    assert result.exit_code == 0
    assert "not created" in result.output
