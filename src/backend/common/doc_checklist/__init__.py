"""Deterministic mortgage document checklist engine.

This package intentionally contains only domain logic:
- Inputs are a loan application snapshot + lender overlays + an as-of date.
- No persistence, network, or intake/form adaptation lives here.
"""

from .config import DEFAULT_OVERLAYS, Overlays, resolve_overlays
from .context import RuleContext
from .document_catalog import DOCUMENT_CATALOG, get_document_label, is_valid_document_id
from .explain import explain
from .models import (
    DocChecklistResult,
    DocRequest,
    LoanApplication,
)
from .rule import RuleEvaluationError

# Import built-in rules so they register with the global registry, in declaration order.
from . import rules as _builtin_rules  # noqa: F401

from .runner import ChecklistRunner, explain_application, generate_doc_checklist
