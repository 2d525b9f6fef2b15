"""End-to-end tests for the validator CLI."""

import json

import pytest
import yaml

from cloudconfig_validator import run_validate
from cloudconfig_validator.config import ValidatorConfig
from cloudconfig_validator.models.cloud_config_schema import CloudConfigValidator
from cloudconfig_validator.run_validate import EXIT_FATAL, EXIT_INVALID, EXIT_VALID, main, run

from conftest import VALID_CLOUD_CONFIG


@pytest.fixture(name="workdir")
def fixture_workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_valid_document_prints_document_and_exits_zero(workdir, write_yaml, capsys):
    write_yaml(VALID_CLOUD_CONFIG)

    assert main([]) == EXIT_VALID

    out = capsys.readouterr().out
    assert json.loads(out) == yaml.safe_load(VALID_CLOUD_CONFIG)


def test_invalid_document_prints_issues_and_exits_one(workdir, write_yaml, capsys, monkeypatch):
    write_yaml("users: []\n")
    monkeypatch.setattr(run_validate, "validator_config", ValidatorConfig())

    assert main([]) == EXIT_INVALID

    captured = capsys.readouterr()
    issues = json.loads(captured.out)
    assert [(i["path"], i["keyword"]) for i in issues] == [("/users", "minItems")]
    # Only the summary reaches stderr by default; the issues are already on stdout.
    assert "cloudconfig.yaml is invalid (1 issue(s))" in captured.err
    assert "cloudconfig.yaml:1:8" not in captured.err


def test_issue_locations_are_logged_at_info(workdir, write_yaml, capsys, monkeypatch):
    write_yaml("users: []\n")
    monkeypatch.setattr(run_validate, "validator_config", ValidatorConfig(log_level="INFO"))

    assert main([]) == EXIT_INVALID

    assert "cloudconfig.yaml:1:8: /users: " in capsys.readouterr().err


def test_document_with_date_and_int_keys_prints_and_exits_zero(workdir, write_yaml, capsys):
    write_yaml(
        "hostname: web-01\n"
        "vendor_data:\n"
        "  2024-06-05: release\n"
        "  8080: port\n"
        "2024-01-01: top\n"
    )

    assert main([]) == EXIT_VALID

    assert json.loads(capsys.readouterr().out) == {
        "hostname": "web-01",
        "vendor_data": {"2024-06-05": "release", "8080": "port"},
        "2024-01-01": "top",
    }


def test_impossible_timestamp_exits_two(workdir, write_yaml, capsys):
    write_yaml("vendor_data:\n  released: 2024-13-45\n")

    assert main([]) == EXIT_FATAL
    assert capsys.readouterr().out == ""


def test_missing_file_exits_two_without_output(workdir, capsys):
    assert main([]) == EXIT_FATAL

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "not found" in captured.err


def test_malformed_yaml_exits_two_without_validating(workdir, write_yaml, capsys, monkeypatch):
    write_yaml('hostname: "web-01\n')

    def _fail(self, document):
        raise AssertionError("validation must not run on malformed YAML")

    monkeypatch.setattr(CloudConfigValidator, "validate", _fail)

    assert main([]) == EXIT_FATAL
    assert capsys.readouterr().out == ""


def test_unknown_schema_version_exits_two(workdir, write_yaml, capsys, monkeypatch):
    write_yaml(VALID_CLOUD_CONFIG)
    monkeypatch.setattr(run_validate, "validator_config", ValidatorConfig(schema_version="v0.0"))

    assert main([]) == EXIT_FATAL
    assert capsys.readouterr().out == ""


def test_run_uses_configured_document_path(tmp_path, write_yaml, capsys):
    path = write_yaml("hostname: web-01\n", name="other.yaml")

    assert run(ValidatorConfig(document_path=str(path))) == EXIT_VALID
    assert json.loads(capsys.readouterr().out) == {"hostname": "web-01"}


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0
    assert "cloudconfig.yaml" in capsys.readouterr().out


def test_unknown_flag_is_rejected():
    with pytest.raises(SystemExit) as exc_info:
        main(["--config", "x.yaml"])
    assert exc_info.value.code == 2
