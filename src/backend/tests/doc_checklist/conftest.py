import os
import sys


# Ensure `src/backend` is on sys.path so imports like `import common...` work.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

from datetime import date

import pytest

from common.doc_checklist.config import resolve_overlays
from common.doc_checklist.context import RuleContext
from common.doc_checklist.models import LoanApplication
from common.doc_checklist.runner import generate_doc_checklist


BASE_APPLICATION = {
    "program": "Conventional",
    "transactionType": "Purchase",
    "occupancy": "Primary",
    "propertyType": "SFR",
    "employmentType": "W2",
    "maritalStatus": "Single",
    "incomes": [{"type": "BasePay", "monthlyAmount": 5000}],
    "assets": [],
}


@pytest.fixture
def as_of() -> date:
    return date(2025, 1, 1)


@pytest.fixture
def make_application():
    def _make(**overrides) -> LoanApplication:
        payload = dict(BASE_APPLICATION)
        payload.update(overrides)
        return LoanApplication.model_validate(payload)

    return _make


@pytest.fixture
def make_ctx(as_of, make_application):
    def _make(*, application: LoanApplication | None = None, overlays=None, **overrides) -> RuleContext:
        return RuleContext(
            application=application or make_application(**overrides),
            as_of=as_of,
            overlays=resolve_overlays(overlays),
        )

    return _make


@pytest.fixture
def run_checklist(as_of, make_application):
    def _run(overlays=None, **overrides):
        return generate_doc_checklist(make_application(**overrides), overlays, as_of=as_of)

    return _run
