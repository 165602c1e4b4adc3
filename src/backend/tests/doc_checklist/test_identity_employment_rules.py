from datetime import timedelta

from common.doc_checklist.rules.employment import R_E_02
from common.doc_checklist.rules.identity import R_G_01, R_G_05


def test_government_id_and_ssn_always_required(run_checklist):
    result = run_checklist()
    assert [doc.id for doc in result.required][:2] == ["GOVT_ID", "SSN_VERIFICATION"]
    assert result.get("GOVT_ID").rule_hits == ["R-G-01"]


def test_identity_rule_fires_for_sparse_application(make_ctx):
    ctx = make_ctx(program=None, employmentType=None, incomes=[])
    assert R_G_01.test(ctx) is True


def test_name_variations_require_docs_and_explanation(run_checklist):
    result = run_checklist(nameVariations=["Jane Smith", "Jane Doe", "Jane Smith-Doe"])
    ids = [doc.id for doc in result.required]
    assert "NAME_CHANGE_DOCS" in ids
    assert "LOE_ALT_NAMES" in ids


def test_no_name_variations_no_name_docs(run_checklist):
    ids = [doc.id for doc in run_checklist(nameVariations=[]).required]
    assert "NAME_CHANGE_DOCS" not in ids


def test_recent_credit_inquiries_require_explanation(run_checklist):
    ids = [doc.id for doc in run_checklist(creditInquiriesLast90Days=True).required]
    assert "LOE_CREDIT_INQUIRIES" in ids


def test_permanent_resident_or_itin_requires_green_card(make_ctx):
    assert R_G_05.test(make_ctx(isPermanentResident=True)) is True
    assert R_G_05.test(make_ctx(hasITIN=True)) is True
    assert R_G_05.test(make_ctx(isUSCitizen=True)) is False


def test_w2_employment_requires_paystub_w2_and_voe(run_checklist):
    ids = {doc.id for doc in run_checklist().required}
    assert {"PAYSTUB_30D", "W2_LAST2Y", "VOE"} <= ids


def test_retired_borrower_gets_no_w2_docs(run_checklist):
    ids = {doc.id for doc in run_checklist(employmentType="Retired", incomes=[]).required}
    assert not ids & {"PAYSTUB_30D", "W2_LAST2Y", "VOE"}


def test_employment_gap_detected_against_line_of_work(make_ctx, as_of):
    start = (as_of - timedelta(days=300)).isoformat()  # 10 months at current job
    assert R_E_02.test(make_ctx(startDate=start, yearsInLineOfWork=2)) is True
    # 10 months vs 1 year in the line of work is within the 2-month tolerance.
    assert R_E_02.test(make_ctx(startDate=start, yearsInLineOfWork=1)) is False


def test_employment_gap_needs_both_inputs(make_ctx, as_of):
    start = (as_of - timedelta(days=90)).isoformat()
    assert R_E_02.test(make_ctx(startDate=start)) is False
    assert R_E_02.test(make_ctx(yearsInLineOfWork=10)) is False
