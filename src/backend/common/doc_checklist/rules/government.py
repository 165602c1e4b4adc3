from __future__ import annotations

from typing import List

from ..context import RuleContext
from ..models import DocRequest, IncomeType, LoanProgram
from ..registry import register_rule
from ..rule import Rule, computed, fixed, make_doc

GROUP = "government_program"


def _va_docs(ctx: RuleContext) -> List[DocRequest]:
    app = ctx.application
    scope = [LoanProgram.VA]
    docs = [make_doc("VA_COE", "VA Certificate of Eligibility", program_scope=scope)]
    if app.va is not None and app.va.service_type is not None:
        docs.append(make_doc("DD214", "Military discharge papers", program_scope=scope))
    if app.has_income(IncomeType.VA_COMPENSATION):
        docs.append(make_doc("VA_DISABILITY_AWARD", "VA disability award letter", program_scope=scope))
    return docs


def _usda_household_reported(ctx: RuleContext) -> bool:
    app = ctx.application
    return app.program == LoanProgram.USDA and app.usda is not None and app.usda.household_members > 0


R_FHA_01 = register_rule(
    Rule(
        rule_id="R-FHA-01",
        rule_title="FHA may require CAIVRS check evidence",
        group=GROUP,
        when=lambda ctx: ctx.application.program == LoanProgram.FHA,
        docs=fixed(make_doc("GOVT_ID", "FHA program requirement", program_scope=[LoanProgram.FHA])),
        conditional=True,
    )
)

R_VA_01 = register_rule(
    Rule(
        rule_id="R-VA-01",
        rule_title="VA requires COE and service documentation",
        group=GROUP,
        when=lambda ctx: ctx.application.program == LoanProgram.VA,
        docs=computed(_va_docs),
    )
)

R_USDA_01 = register_rule(
    Rule(
        rule_id="R-USDA-01",
        rule_title="USDA requires household income documentation",
        group=GROUP,
        when=_usda_household_reported,
        docs=fixed(
            make_doc(
                "USDA_HOUSEHOLD_INCOME_DOCS",
                "Household income for all occupants (paystubs/W-2/award letters)",
                program_scope=[LoanProgram.USDA],
            )
        ),
    )
)
