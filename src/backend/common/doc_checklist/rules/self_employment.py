"""Self-employment rules, including the tax-year policy.

Required return years for a self-employed borrower:

| Entity class   | Tenure | Program      | Years                          |
|----------------|--------|--------------|--------------------------------|
| non-structured | any    | any          | overlay default_business_returns_years |
| structured     | < 5y   | Conventional | 1                              |
| structured     | < 5y   | FHA or VA    | 2                              |
| structured     | >= 5y, or USDA | any  | overlay default_business_returns_years |

Structured entities are LLC, S-Corp, C-Corp and Partnership. An unknown
business start date leaves tenure unknown and the overlay default applies.
"""

from __future__ import annotations

from typing import List, Optional

from ..config import Overlays
from ..context import RuleContext
from ..models import BusinessType, DocRequest, EmploymentType, LoanProgram
from ..registry import register_rule
from ..rule import Rule, computed, fixed, make_doc

GROUP = "self_employment"

STRUCTURED_ENTITIES = frozenset(
    {BusinessType.LLC, BusinessType.S_CORP, BusinessType.C_CORP, BusinessType.PARTNERSHIP}
)
SHORT_TENURE_YEARS = 5
K1_OWNERSHIP_THRESHOLD_PCT = 25

_BUSINESS_FORM_BY_TYPE = {
    BusinessType.LLC: "1065",
    BusinessType.PARTNERSHIP: "1065",
    BusinessType.S_CORP: "1120S",
    BusinessType.C_CORP: "1120",
}


def required_tax_return_years(
    program: Optional[LoanProgram],
    business_type: Optional[BusinessType],
    years_in_business: Optional[float],
    overlays: Overlays,
) -> int:
    if business_type not in STRUCTURED_ENTITIES:
        return overlays.default_business_returns_years
    if years_in_business is not None and years_in_business < SHORT_TENURE_YEARS:
        if program == LoanProgram.CONVENTIONAL:
            return 1
        if program in (LoanProgram.FHA, LoanProgram.VA):
            return 2
    return overlays.default_business_returns_years


def personal_return_doc_id(years: int) -> str:
    return f"TAX_RETURN_PERSONAL_1040_YEARS_{1 if years == 1 else 2}"


def business_return_doc_id(business_type: Optional[BusinessType], years: int) -> str:
    form = _BUSINESS_FORM_BY_TYPE.get(business_type, "SCHEDULEC")
    return f"TAX_RETURN_BUSINESS_{form}_YEARS_{1 if years == 1 else 2}"


def _is_self_employed(ctx: RuleContext) -> bool:
    return ctx.application.employment_type == EmploymentType.SELF_EMPLOYED


def _has_detail(ctx: RuleContext) -> bool:
    return _is_self_employed(ctx) and ctx.application.self_employed is not None


def _tax_return_docs(ctx: RuleContext) -> List[DocRequest]:
    app = ctx.application
    detail = app.self_employed
    if detail is None:
        return []

    years_in_business = ctx.years_since(detail.business_start_date)
    years = required_tax_return_years(app.program, detail.business_type, years_in_business, ctx.overlays)

    entity = detail.business_type.value if detail.business_type else "business"
    program = app.program.value if app.program else "unspecified program"
    if years_in_business is None:
        tenure = "with unknown tenure"
    elif years_in_business < SHORT_TENURE_YEARS:
        tenure = f"<{SHORT_TENURE_YEARS}y"
    else:
        tenure = f">={SHORT_TENURE_YEARS}y"
    span = "1 year" if years == 1 else "2 years"

    return [
        make_doc(
            personal_return_doc_id(years),
            f"Self-employed {entity} {tenure} requires {span} of personal returns ({program})",
        ),
        make_doc(
            business_return_doc_id(detail.business_type, years),
            f"Business returns required ({entity})",
        ),
    ]


R_SE_01 = register_rule(
    Rule(
        rule_id="R-SE-01",
        rule_title="Self-employed tax returns based on program and years in business",
        group=GROUP,
        when=_has_detail,
        docs=computed(_tax_return_docs),
    )
)

R_SE_02 = register_rule(
    Rule(
        rule_id="R-SE-02",
        rule_title="K-1 required for ownership of 25% or more",
        group=GROUP,
        when=lambda ctx: _has_detail(ctx)
        and ctx.application.self_employed.ownership_percent is not None
        and ctx.application.self_employed.ownership_percent >= K1_OWNERSHIP_THRESHOLD_PCT,
        docs=fixed(make_doc("K1_LAST2Y", "Ownership of 25% or more requires K-1")),
    )
)

R_SE_03 = register_rule(
    Rule(
        rule_id="R-SE-03",
        rule_title="Business funds for closing require business statements and CPA letter",
        group=GROUP,
        when=lambda ctx: _has_detail(ctx) and ctx.application.self_employed.uses_business_funds_for_close,
        docs=fixed(
            make_doc("BUSINESS_BANK_STATEMENTS_2_12M", "Using business funds to close"),
            make_doc("CPA_LETTER_OR_LICENSE", "CPA letter verifying no adverse impact"),
        ),
    )
)

R_SE_04 = register_rule(
    Rule(
        rule_id="R-SE-04",
        rule_title="Always require YTD P&L for self-employed",
        group=GROUP,
        when=_is_self_employed,
        docs=fixed(
            make_doc("YTD_PNL", "Year-to-date profit & loss"),
            make_doc("YTD_BALANCE_SHEET", "Year-to-date balance sheet (if mid-year)"),
        ),
    )
)

# Adds the 2-year personal return even when R-SE-01 asked for 1 year; the ids differ so both stay.
R_SE_05 = register_rule(
    Rule(
        rule_id="R-SE-05",
        rule_title="Declining income requires additional year regardless of program",
        group=GROUP,
        when=lambda ctx: _has_detail(ctx) and ctx.application.self_employed.business_has_declining_income,
        docs=fixed(make_doc(personal_return_doc_id(2), "Declining income - 2 years required")),
    )
)

R_SE_06 = register_rule(
    Rule(
        rule_id="R-SE-06",
        rule_title="Business license or website proof always required",
        group=GROUP,
        when=_is_self_employed,
        docs=fixed(make_doc("BUSINESS_LICENSE_OR_WEBSITE_PROOF", "Verify business existence")),
    )
)
