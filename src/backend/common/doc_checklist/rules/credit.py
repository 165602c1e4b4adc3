from __future__ import annotations

from ..registry import register_rule
from ..rule import Rule, fixed, make_doc

GROUP = "credit_history"

R_CR_01 = register_rule(
    Rule(
        rule_id="R-CR-01",
        rule_title="Bankruptcy requires discharge documentation",
        group=GROUP,
        when=lambda ctx: ctx.application.bk_history is not None,
        docs=fixed(make_doc("BK_PAPERS_DISCHARGE", "Bankruptcy papers & discharge")),
    )
)

R_CR_02 = register_rule(
    Rule(
        rule_id="R-CR-02",
        rule_title="Foreclosure requires documentation",
        group=GROUP,
        when=lambda ctx: ctx.application.foreclosure_history_date is not None,
        docs=fixed(make_doc("FORECLOSURE_DOCS", "Foreclosure documentation")),
    )
)

R_CR_03 = register_rule(
    Rule(
        rule_id="R-CR-03",
        rule_title="Mortgage lates require explanation and proof of cure",
        group=GROUP,
        when=lambda ctx: (ctx.application.mortgage_lates_in_12_mo or 0) > 0,
        docs=fixed(make_doc("LOE_MORTGAGE_LATES", "Mortgage payment history explanation")),
    )
)
