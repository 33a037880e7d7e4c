from __future__ import annotations

import json
from pathlib import Path

from envmanager.app.cli import main


def write_json(path: Path, data: dict) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_compare_command(capsys):
    assert main(["compare", "1.2", "1.2.0.1"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["ordering"] == "LESS"
    assert output["b_parsed"] == [1, 2, 0, 1]


def test_outdated_command(capsys):
    assert main(["outdated", "17.5", "18.0"]) == 0

    assert json.loads(capsys.readouterr().out)["outdated"] is True


def test_count_command(capsys):
    assert main(["count", "--latest", "18.0", "17.5", "18.0", "18.1-beta"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["total"] == 3
    assert output["outdated_count"] == 1


def test_diff_command(tmp_path, capsys):
    left = write_json(
        tmp_path / "prod.json",
        {
            "tenant_id": "t1",
            "name": "PROD",
            "installed_apps": [
                {"id": "a1", "name": "Reports", "version": "1.0.0.0", "publisher": "Contoso"},
                {"id": "ms", "name": "Base Application", "version": "24.0", "publisher": "Microsoft"},
            ],
        },
    )
    right = write_json(
        tmp_path / "sandbox.json",
        {
            "tenant_id": "t1",
            "name": "SANDBOX",
            "installed_apps": [{"id": "a1", "name": "Reports", "version": "1.1.0.0", "publisher": "Contoso"}],
        },
    )
    catalog = write_json(
        tmp_path / "catalog.json",
        {"applications": [{"id": "a1", "name": "Reports", "publisher": "Contoso", "latest_release_version": "1.1"}]},
    )

    assert main(["diff", str(left), str(right), "--catalog", str(catalog)]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["environments"] == ["t1/PROD", "t1/SANDBOX"]
    assert [row["app_id"] for row in output["rows"]] == ["a1"]
    assert output["rows"][0]["category"] == "DIFFERENT"
    assert output["rows"][0]["outdated_in"] == ["t1/PROD"]
    assert output["stats"]["in_all_with_diff"] == 1


def test_summary_command(tmp_path, capsys):
    snapshot = write_json(
        tmp_path / "prod.json",
        {
            "tenant_id": "t1",
            "name": "PROD",
            "installed_apps": [{"id": "a1", "name": "Reports", "version": "1.0", "publisher": "Contoso"}],
        },
    )
    catalog = write_json(
        tmp_path / "catalog.json",
        {"applications": [{"id": "a1", "name": "Reports", "publisher": "Contoso", "latest_release_version": "2.0"}]},
    )

    assert main(["summary", str(snapshot), "--catalog", str(catalog)]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output[0]["outdated_apps_count"] == 1
    assert output[0]["outdated_app_ids"] == ["a1"]


def test_diff_with_single_snapshot_fails(tmp_path):
    snapshot = write_json(tmp_path / "prod.json", {"tenant_id": "t1", "name": "PROD", "installed_apps": []})

    assert main(["diff", str(snapshot)]) == 2


def test_missing_file_fails(tmp_path):
    assert main(["summary", str(tmp_path / "missing.json")]) == 2


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out
