from __future__ import annotations

from ..context import RuleContext
from ..models import IncomeType, MaritalStatus
from ..registry import register_rule
from ..rule import Rule, fixed, make_doc

GROUP = "family_support"


def _receives_support(ctx: RuleContext) -> bool:
    app = ctx.application
    return app.receives_child_or_alimony is True or app.has_income(
        IncomeType.ALIMONY_RECEIVED, IncomeType.CHILD_SUPPORT_RECEIVED
    )


R_FAM_01 = register_rule(
    Rule(
        rule_id="R-FAM-01",
        rule_title="Receiving support requires proof and continuance documentation",
        group=GROUP,
        when=_receives_support,
        docs=fixed(
            make_doc("ALIMONY_CHILD_SUPPORT_PROOF", "Proof of support receipt (6-12 months)"),
            make_doc("LOE_GAPS_EMPLOYMENT", "Proof of continuance for at least 3 years"),
        ),
    )
)

R_FAM_02 = register_rule(
    Rule(
        rule_id="R-FAM-02",
        rule_title="Paying support requires court order",
        group=GROUP,
        when=lambda ctx: ctx.application.pays_alimony is True or ctx.application.pays_child_support is True,
        docs=fixed(make_doc("ALIMONY_CHILD_SUPPORT_ORDER", "Court order for support payments")),
    )
)

R_FAM_03 = register_rule(
    Rule(
        rule_id="R-FAM-03",
        rule_title="Divorced requires divorce decree",
        group=GROUP,
        when=lambda ctx: ctx.application.marital_status == MaritalStatus.DIVORCED,
        docs=fixed(make_doc("DIVORCE_DECREE", "Divorce decree with support terms")),
    )
)

R_FAM_04 = register_rule(
    Rule(
        rule_id="R-FAM-04",
        rule_title="Support claimed as asset requires documentation",
        group=GROUP,
        when=lambda ctx: ctx.application.support_order_docs_claimed_in_assets is True,
        docs=fixed(make_doc("ALIMONY_CHILD_SUPPORT_PROOF", "Support income documentation")),
    )
)
