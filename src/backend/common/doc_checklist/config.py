from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class StudentLoanImputeRule(str, Enum):
    PROGRAM_DEFAULT = "programDefault"
    ONE_PCT = "1pct"
    HALF_PCT = "0.5pct"


class Overlays(BaseModel):
    """Lender policy knobs that parameterize the rule table.

    Callers pass a partial mapping; unspecified keys keep these defaults.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    default_business_returns_years: int = Field(default=2, ge=1)
    min_bank_stmt_months: int = Field(default=2, ge=1)
    # Accepted for compatibility with lender overlay files; no rule reads these yet.
    student_loan_impute_rule: StudentLoanImputeRule = StudentLoanImputeRule.PROGRAM_DEFAULT
    always_require_2_years_self_employed: bool = Field(
        default=False, alias="alwaysRequire2YearsSelfEmployed"
    )
    # When false, condo project docs drop to the optional list.
    require_condo_docs: bool = True


DEFAULT_OVERLAYS = Overlays()

OverlaysInput = Union[Overlays, Mapping[str, Any], None]


def resolve_overlays(overlays: OverlaysInput = None) -> Overlays:
    """Shallow-merge caller overlays over `DEFAULT_OVERLAYS`."""
    if overlays is None:
        return DEFAULT_OVERLAYS
    if isinstance(overlays, Overlays):
        return overlays
    # Unset fields fall back to the model defaults, which are DEFAULT_OVERLAYS.
    return Overlays.model_validate(dict(overlays))

