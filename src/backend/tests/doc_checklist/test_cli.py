import json

from common.doc_checklist.cli import main


APPLICATION = {
    "program": "Conventional",
    "transactionType": "Purchase",
    "propertyType": "Condo",
    "employmentType": "W2",
    "maritalStatus": "Single",
    "incomes": [{"type": "BasePay", "monthlyAmount": 7000}],
    "assets": [{"type": "Checking", "balance": 50000}],
}


def _write(path, payload):
    path.write_text(json.dumps(payload))
    return path


def test_cli_prints_checklist_with_explanations(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("DOC_CHECKLIST_OVERLAYS_FILE", raising=False)
    app_path = _write(tmp_path / "application.json", APPLICATION)

    assert main([str(app_path), "--as-of", "2025-01-01", "--explain"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert set(payload) == {"required", "niceToHave", "clarifications", "explanations"}
    required_ids = [doc["id"] for doc in payload["required"]]
    assert "CONDO_DOCS_BUDGET_MINUTES_INSURANCE" in required_ids
    assert "R-PR-02: Condo budget, minutes, insurance" in payload["explanations"]


def test_cli_reads_overlays_file_from_environment(tmp_path, capsys, monkeypatch):
    app_path = _write(tmp_path / "application.json", APPLICATION)
    overlays_path = _write(tmp_path / "overlays.json", {"requireCondoDocs": False})
    monkeypatch.setenv("DOC_CHECKLIST_OVERLAYS_FILE", str(overlays_path))

    assert main([str(app_path), "--as-of", "2025-01-01"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert [doc["id"] for doc in payload["niceToHave"]] == ["CONDO_DOCS_BUDGET_MINUTES_INSURANCE"]
    assert "explanations" not in payload


def test_cli_defaults_evaluation_date_to_today(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("DOC_CHECKLIST_OVERLAYS_FILE", raising=False)
    app_path = _write(tmp_path / "application.json", APPLICATION)

    assert main([str(app_path)]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert "GOVT_ID" in [doc["id"] for doc in payload["required"]]
