from __future__ import annotations

from ..models import IncomeType
from ..registry import register_rule
from ..rule import Rule, fixed, make_doc

GROUP = "income"

R_1099_01 = register_rule(
    Rule(
        rule_id="R-1099-01",
        rule_title="1099 or commission income requires 2 years of 1099s",
        group=GROUP,
        when=lambda ctx: ctx.application.has_income(IncomeType.COMMISSION),
        docs=fixed(
            make_doc("FORM1099_LAST2Y", "1099 or commission income"),
            make_doc("YTD_PNL", "Year-to-date proof of receipts"),
        ),
    )
)

R_BONUS_01 = register_rule(
    Rule(
        rule_id="R-BONUS-01",
        rule_title="Bonus or overtime requires 2 years W-2 and YTD history",
        group=GROUP,
        when=lambda ctx: ctx.application.has_income(IncomeType.BONUS, IncomeType.OVERTIME),
        docs=fixed(
            make_doc("W2_LAST2Y", "Bonus/overtime requires W-2 history"),
            make_doc("PAYSTUB_30D", "YTD pay history for bonus/overtime"),
        ),
    )
)

R_RENT_01 = register_rule(
    Rule(
        rule_id="R-RENT-01",
        rule_title="Rental income requires leases and Schedule E",
        group=GROUP,
        when=lambda ctx: ctx.application.has_income(IncomeType.RENTAL),
        docs=fixed(
            make_doc("RENTAL_LEASES", "Rental property leases"),
            make_doc("RENTAL_SCHEDULE_E_LAST2Y", "Schedule E - last 2 years"),
        ),
    )
)
