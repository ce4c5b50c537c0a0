import json
from pathlib import Path

import yaml
from typer.testing import CliRunner

from arnkit.cli.main import app


runner = CliRunner()


def test_cli_parse_json():
    res = runner.invoke(app, ["parse", "arn:aws:lambda:us-east-2:123456789012:layer:my-layer:3", "--json"])

    assert res.exit_code == 0, res.stdout
    payload = json.loads(res.stdout)
    assert len(payload) == 1
    item = payload[0]
    assert item["service"] == "lambda"
    assert item["region"] == "us-east-2"
    assert item["qualifiers"] == ["layer", "my-layer", "3"]
    assert item["resource_type"] == "layer"
    assert item["resource_format"] == "QTypeId"
    assert item["details"] == {"type": "layer", "name": "my-layer", "qualifier": "3"}


def test_cli_parse_yaml_multiple():
    res = runner.invoke(app, ["parse", "arn:aws:s3:::b", "arn:aws:iam::123456789012:user/Bob", "--yaml"])

    assert res.exit_code == 0, res.stdout
    payload = yaml.safe_load(res.stdout)
    assert [p["service"] for p in payload] == ["s3", "iam"]
    assert payload[0]["region"] is None
    assert payload[1]["path"] == ["user", "Bob"]


def test_cli_parse_invalid_exits_1():
    res = runner.invoke(app, ["parse", "not-an-arn", "arn:aws:s3:::b", "--json"])

    assert res.exit_code == 1
    payload = json.loads(res.stdout)
    assert payload[0]["kind"] == "too_few_components"
    assert payload[1]["arn"] == "arn:aws:s3:::b"


def test_cli_parse_text():
    res = runner.invoke(app, ["parse", "arn:aws:iam::123456789012:user/${aws:username}"])

    assert res.exit_code == 0, res.stdout
    assert "arn:aws:iam::123456789012:user/${aws:username}" in res.stdout
    assert "aws:username" in res.stdout


def test_cli_parse_with_rules():
    res = runner.invoke(app, ["parse", "arn:aws:iam::123456789012:policy/*", "--validate", "--json"])

    assert res.exit_code == 1
    assert json.loads(res.stdout)[0]["kind"] == "resource_wildcard_not_allowed"


def test_cli_output_options_are_exclusive():
    res = runner.invoke(app, ["parse", "arn:aws:s3:::b", "--json", "--yaml"])
    assert res.exit_code != 0


def test_cli_validate():
    res = runner.invoke(
        app,
        [
            "validate",
            "arn:aws:iam::123456789012:user/Bob",
            "arn:aws:lambda::123456789012:function:f",
            "--json",
        ],
    )

    assert res.exit_code == 1
    payload = json.loads(res.stdout)
    assert payload[0] == {"arn": "arn:aws:iam::123456789012:user/Bob", "valid": True, "rule": "iam-user"}
    assert payload[1]["valid"] is False
    assert payload[1]["kind"] == "missing_region"


def test_cli_validate_all_ok_text():
    res = runner.invoke(app, ["validate", "arn:aws:s3:::b", "--text"])
    assert res.exit_code == 0, res.stdout
    assert "arn:aws:s3:::b" in res.stdout


def test_cli_validate_rules_from_env(monkeypatch, rules_file: Path):
    monkeypatch.setenv("ARNKIT_RULES", str(rules_file))
    res = runner.invoke(app, ["validate", "arn:aws:iam::123456789012:user/*", "--json"])

    assert res.exit_code == 1
    assert json.loads(res.stdout)[0]["kind"] == "resource_wildcard_not_allowed"


def test_cli_validate_missing_rules_file(tmp_path: Path):
    res = runner.invoke(app, ["validate", "arn:aws:s3:::b", "--rules", str(tmp_path / "nope.yaml")])
    assert res.exit_code != 0


def test_cli_validate_rules_file_with_list_top_level(tmp_path: Path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("- name: iam\n  resource_format: Id\n", encoding="utf-8")

    res = runner.invoke(app, ["validate", "arn:aws:s3:::b", "--rules", str(bad)])

    assert res.exit_code == 2
    assert not isinstance(res.exception, AttributeError)


def test_cli_build():
    res = runner.invoke(
        app,
        [
            "build",
            "--service",
            "iam",
            "--resource",
            "user/Bob",
            "--partition",
            "aws",
            "--account",
            "123456789012",
            "--json",
        ],
    )

    assert res.exit_code == 0, res.stdout
    assert json.loads(res.stdout)["arn"] == "arn:aws:iam::123456789012:user/Bob"


def test_cli_build_any_region_and_account():
    res = runner.invoke(app, ["build", "-s", "sqs", "-r", "q", "--any-region", "--any-account", "--json"])

    assert res.exit_code == 0, res.stdout
    assert json.loads(res.stdout)["arn"] == "arn:aws:sqs:*:*:q"


def test_cli_build_invalid_account():
    res = runner.invoke(app, ["build", "-s", "s3", "-r", "b", "--account", "123", "--json"])

    assert res.exit_code == 1
    assert json.loads(res.stdout)["kind"] == "invalid_account_id"


def test_cli_substitute():
    res = runner.invoke(
        app,
        [
            "substitute",
            "arn:aws:s3:::b/${aws:username}/${other}",
            "--var",
            "aws:username=Bob",
            "--json",
        ],
    )

    assert res.exit_code == 0, res.stdout
    payload = json.loads(res.stdout)
    assert payload["arn"] == "arn:aws:s3:::b/Bob/${other}"
    assert payload["unresolved"] == ["other"]


def test_cli_substitute_bad_var():
    res = runner.invoke(app, ["substitute", "arn:aws:s3:::b/${x}", "--var", "novalue"])
    assert res.exit_code != 0


def test_cli_root():
    res = runner.invoke(app, ["root", "*", "--json"])

    assert res.exit_code == 0, res.stdout
    assert json.loads(res.stdout)["arn"] == "arn:aws:iam::*:root"


def test_cli_root_invalid():
    res = runner.invoke(app, ["root", "123456789", "--json"])
    assert res.exit_code == 1


def test_cli_services():
    res = runner.invoke(app, ["services", "--json"])

    assert res.exit_code == 0, res.stdout
    services = {s["service"] for s in json.loads(res.stdout)}
    assert {"iam", "s3", "lambda", "cognito-identity"} <= services


def test_cli_version():
    res = runner.invoke(app, ["--version"])
    assert res.exit_code == 0
    assert res.stdout.strip()
