from __future__ import annotations

from typing import List

from ..context import RuleContext
from ..models import DocRequest, PropertyType, TransactionType
from ..registry import register_rule
from ..rule import Rule, computed, fixed, make_doc

GROUP = "property_transaction"


def _is_condo(ctx: RuleContext) -> bool:
    app = ctx.application
    return app.property_type == PropertyType.CONDO or app.is_condo is True


def _condo_docs(ctx: RuleContext) -> List[DocRequest]:
    return [
        make_doc(
            "CONDO_DOCS_BUDGET_MINUTES_INSURANCE",
            "Condo budget, minutes, insurance",
            conditional=not ctx.overlays.require_condo_docs,
        )
    ]


R_PR_01 = register_rule(
    Rule(
        rule_id="R-PR-01",
        rule_title="Purchase transaction requires contract and earnest money proof",
        group=GROUP,
        when=lambda ctx: ctx.application.transaction_type == TransactionType.PURCHASE,
        docs=fixed(
            make_doc("PURCHASE_CONTRACT", "Purchase contract"),
            make_doc("EARNEST_MONEY_PROOF", "Earnest money deposit proof"),
        ),
    )
)

R_PR_02 = register_rule(
    Rule(
        rule_id="R-PR-02",
        rule_title="Condo requires condo documentation",
        group=GROUP,
        when=_is_condo,
        docs=computed(_condo_docs),
    )
)

R_PR_04 = register_rule(
    Rule(
        rule_id="R-PR-04",
        rule_title="Homeowners insurance required",
        group=GROUP,
        when=lambda ctx: True,
        docs=fixed(make_doc("HOMEOWNERS_INSURANCE_QUOTE", "Homeowner insurance quote prior to CTC")),
    )
)
