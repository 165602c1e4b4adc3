from __future__ import annotations

from typing import List

from .models import EmploymentType, LoanApplication, LoanProgram

MISSING_PROGRAM = "Loan program must be specified"
MISSING_EMPLOYMENT_TYPE = "Employment type must be specified"
MISSING_SELF_EMPLOYED_DETAIL = "Self-employed borrowers must provide business details"
MISSING_BUSINESS_START_DATE = "Business start date required for self-employed borrowers"
MISSING_USDA_DETAIL = "USDA applications require household member information"
MISSING_VA_DETAIL = "VA applications should specify service details"


def validate_application(app: LoanApplication) -> List[str]:
    """Advisory clarifications for data gaps. Never blocks rule evaluation."""
    clarifications: List[str] = []

    if app.program is None:
        clarifications.append(MISSING_PROGRAM)
    if app.employment_type is None:
        clarifications.append(MISSING_EMPLOYMENT_TYPE)

    if app.employment_type == EmploymentType.SELF_EMPLOYED and app.self_employed is None:
        clarifications.append(MISSING_SELF_EMPLOYED_DETAIL)
    if app.self_employed is not None and app.self_employed.business_start_date is None:
        clarifications.append(MISSING_BUSINESS_START_DATE)

    if app.program == LoanProgram.USDA and app.usda is None:
        clarifications.append(MISSING_USDA_DETAIL)
    if app.program == LoanProgram.VA and app.va is None:
        clarifications.append(MISSING_VA_DETAIL)

    return clarifications
