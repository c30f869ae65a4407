import json
from pathlib import Path

import pytest

from data_schema_validator.cli import main
from data_schema_validator.cli.report import ValidationReport, format_error_line
from data_schema_validator.validator import validate_node


NOTIFY_SCHEMA = """\
type: object
properties:
  type:
    type: string
    values: [info, warning]
  delay:
    type: integer
    minimum: 0
required: [type]
"""


@pytest.fixture
def workspace(tmp_path: Path, restore_root_logging) -> Path:
    schemas = tmp_path / "schemas"
    schemas.mkdir()
    (schemas / "notify.schema.yaml").write_text(NOTIFY_SCHEMA, encoding="utf-8")
    (tmp_path / "good.yaml").write_text("type: info\ndelay: 5\n", encoding="utf-8")
    (tmp_path / "bad.json").write_text('{"type": "debug", "delay": -1, "extra": true}', encoding="utf-8")
    return tmp_path


def run(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


def test_valid_files_exit_zero(workspace: Path, capsys):
    code = run(["--schema", "notify", "--schema-dir", str(workspace / "schemas"), str(workspace / "good.yaml")])

    assert code == 0
    assert "Validated 1 file(s) with no errors." in capsys.readouterr().out


def test_invalid_file_reports_violations(workspace: Path, capsys):
    code = run(
        [
            "--schema", "notify",
            "--schema-dir", str(workspace / "schemas"),
            str(workspace / "good.yaml"),
            str(workspace / "bad.json"),
        ]
    )

    out = capsys.readouterr().out
    assert code == 1
    assert "good.yaml" not in out
    assert "bad.json:" in out
    assert "ERROR: [$] Extra property found (property='extra')" in out
    assert "ERROR: [$.type] Value does not satisfy allowed values constraint" in out
    assert "ERROR: [$.delay] Value does not satisfy minimum constraint (value=-1, minimum=0)" in out


def test_json_output(workspace: Path, capsys):
    code = run(
        [
            "--format", "json",
            "--schema", "notify",
            "--schema-file", str(workspace / "schemas" / "notify.schema.yaml"),
            str(workspace / "bad.json"),
        ]
    )

    output = json.loads(capsys.readouterr().out)
    assert code == 1
    assert output["files"] == 1
    assert output["errors"] == 3
    assert output["results"][0]["errors"][0] == {
        "path": "$",
        "property": "extra",
        "message": "Extra property found",
    }


def test_github_actions_output(workspace: Path, capsys):
    run(
        [
            "--format", "github-actions",
            "--schema", "notify",
            "--schema-dir", str(workspace / "schemas"),
            str(workspace / "bad.json"),
        ]
    )

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert all(line.startswith(f"::error file={workspace / 'bad.json'}::") for line in lines)


def test_unreadable_data_file_is_reported(workspace: Path, capsys):
    code = run(["--schema", "notify", "--schema-dir", str(workspace / "schemas"), str(workspace / "missing.yaml")])

    assert code == 1
    assert "Document not found" in capsys.readouterr().out


def test_unknown_schema_id(workspace: Path, capsys):
    code = run(["--schema", "other", "--schema-dir", str(workspace / "schemas"), str(workspace / "good.yaml")])

    assert code == 2
    assert "schema 'other' is not registered (available: notify)" in capsys.readouterr().err


def test_bad_schema_file_exits_with_error(workspace: Path, capsys):
    broken = workspace / "broken.schema.yaml"
    broken.write_text("type: array\n", encoding="utf-8")

    code = run(["--schema", "broken", "--schema-file", str(broken), str(workspace / "good.yaml")])

    assert code == 1
    assert "Invalid schema definition" in capsys.readouterr().err

    code = run(["--no-strict", "--schema", "broken", "--schema-file", str(broken), str(workspace / "good.yaml")])

    assert code == 1
    assert 'invalid schema, missing "items" key' in capsys.readouterr().out


def test_broken_file_in_schema_dir_exits_with_error(workspace: Path, capsys):
    (workspace / "schemas" / "broken.schema.yaml").write_text("type: [unclosed\n", encoding="utf-8")

    code = run(["--schema", "notify", "--schema-dir", str(workspace / "schemas"), str(workspace / "good.yaml")])

    assert code == 1
    err = capsys.readouterr().err
    assert "Error:" in err
    assert "broken.schema.yaml" in err


def test_report_dict_is_json_encodable_for_self_containing_values():
    data = []
    data.append(data)
    report = ValidationReport(Path("loop.yaml"))
    report.add_violations(validate_node({"type": "number"}, data))

    assert json.loads(json.dumps(report.to_dict())) == {
        "file": "loop.yaml",
        "errors": [{"path": "$", "value": "[[...]]", "type": "number", "message": "Invalid value type"}],
    }
    assert format_error_line(report.errors[0]) == "[$] Invalid value type (value=[[...]], type='number')"
