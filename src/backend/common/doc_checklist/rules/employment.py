from __future__ import annotations

from ..context import RuleContext
from ..models import EmploymentType
from ..registry import register_rule
from ..rule import Rule, fixed, make_doc

GROUP = "employment"

# Allowed slack, in months, between time at the current job and time in the line of work.
EMPLOYMENT_GAP_TOLERANCE_MONTHS = 2


def _has_employment_gap(ctx: RuleContext) -> bool:
    app = ctx.application
    months_employed = ctx.months_since(app.start_date)
    if months_employed is None or app.years_in_line_of_work is None:
        return False
    return months_employed < app.years_in_line_of_work * 12 - EMPLOYMENT_GAP_TOLERANCE_MONTHS


R_E_01 = register_rule(
    Rule(
        rule_id="R-E-01",
        rule_title="W2 employment requires paystubs, W-2s, and VOE",
        group=GROUP,
        when=lambda ctx: ctx.application.employment_type == EmploymentType.W2,
        docs=fixed(
            make_doc("PAYSTUB_30D", "W2 employment - recent paystub"),
            make_doc("W2_LAST2Y", "W2 employment - last 2 years"),
            make_doc("VOE", "W2 employment - verification of employment"),
        ),
    )
)

R_E_02 = register_rule(
    Rule(
        rule_id="R-E-02",
        rule_title="Employment gaps require explanation",
        group=GROUP,
        when=_has_employment_gap,
        docs=fixed(make_doc("LOE_GAPS_EMPLOYMENT", "Employment gaps detected")),
    )
)
