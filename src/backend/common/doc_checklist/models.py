from __future__ import annotations

from datetime import date
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class LoanProgram(str, Enum):
    CONVENTIONAL = "Conventional"
    FHA = "FHA"
    VA = "VA"
    USDA = "USDA"


class TransactionType(str, Enum):
    PURCHASE = "Purchase"
    RATE_TERM_REFI = "RateTermRefi"
    CASH_OUT_REFI = "CashOutRefi"


class Occupancy(str, Enum):
    PRIMARY = "Primary"
    SECOND_HOME = "SecondHome"
    INVESTMENT = "Investment"


class PropertyType(str, Enum):
    SFR = "SFR"
    CONDO = "Condo"
    PUD = "PUD"
    TWO_TO_FOUR_UNIT = "2-4 Unit"
    MANUFACTURED = "Manufactured"


class MaritalStatus(str, Enum):
    SINGLE = "Single"
    MARRIED = "Married"
    SEPARATED = "Separated"
    DIVORCED = "Divorced"


class EmploymentType(str, Enum):
    W2 = "W2"
    SELF_EMPLOYED = "SelfEmployed"
    FORM_1099 = "1099"
    RETIRED = "Retired"
    UNEMPLOYED = "Unemployed"


class BusinessType(str, Enum):
    SOLE_PROP = "SoleProp"
    LLC = "LLC"
    S_CORP = "SCorp"
    C_CORP = "CCorp"
    PARTNERSHIP = "Partnership"


class IncomeType(str, Enum):
    BASE_PAY = "BasePay"
    OVERTIME = "Overtime"
    BONUS = "Bonus"
    COMMISSION = "Commission"
    SELF_EMPLOYMENT = "SelfEmployment"
    RENTAL = "Rental"
    ALIMONY_RECEIVED = "AlimonyReceived"
    CHILD_SUPPORT_RECEIVED = "ChildSupportReceived"
    PENSION = "Pension"
    SOCIAL_SECURITY = "SocialSecurity"
    DISABILITY = "Disability"
    VA_COMPENSATION = "VACompensation"
    OTHER = "Other"


class AssetType(str, Enum):
    CHECKING = "Checking"
    SAVINGS = "Savings"
    BROKERAGE = "Brokerage"
    RETIREMENT = "Retirement"
    CASH_ON_HAND = "CashOnHand"
    GIFT = "Gift"
    CRYPTO = "Crypto"
    OTHER = "Other"


class DownPaymentSource(str, Enum):
    OWN_FUNDS = "OwnFunds"
    GIFT = "Gift"
    GRANT = "Grant"
    EMPLOYER = "Employer"
    SALE_OF_ASSET = "SaleOfAsset"
    CRYPTO_LIQUIDATED = "CryptoLiquidated"
    OTHER = "Other"


class RentMethod(str, Enum):
    PRIVATE_LANDLORD = "PrivateLandlord"
    PROPERTY_MANAGER = "PropertyManager"
    LIVING_RENT_FREE = "LivingRentFree"


class VAServiceType(str, Enum):
    REGULAR = "Regular"
    RESERVES = "Reserves"
    GUARD = "Guard"


class _Snapshot(BaseModel):
    # Intake payloads arrive camelCased; snake_case is accepted too.
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class SelfEmployedDetail(_Snapshot):
    business_type: Optional[BusinessType] = None
    business_start_date: Optional[date] = None
    ownership_percent: Optional[float] = None
    uses_business_funds_for_close: bool = False
    business_has_declining_income: bool = False


class IncomeEntry(_Snapshot):
    type: IncomeType
    monthly_amount: float = 0
    start_date: Optional[date] = None
    expected_to_continue: Optional[bool] = None


class AssetEntry(_Snapshot):
    type: AssetType
    balance: float = 0
    account_title: Optional[str] = None


class BankruptcyHistory(_Snapshot):
    chapter: str
    discharge_date: Optional[date] = None


class RentHistory(_Snapshot):
    paying_rent: Optional[bool] = None
    method: Optional[RentMethod] = None


class VADetail(_Snapshot):
    prior_use_of_entitlement: Optional[bool] = None
    service_type: Optional[VAServiceType] = None


class USDADetail(_Snapshot):
    household_members: int = 0
    non_borrower_household_income: Optional[float] = None


class LoanApplication(_Snapshot):
    """Snapshot of every borrower/loan fact the rule table reads.

    Absent fields mean "condition not met" to the rules; only the validator
    reports on them.
    """

    program: Optional[LoanProgram] = None
    transaction_type: Optional[TransactionType] = None
    occupancy: Optional[Occupancy] = None
    property_type: Optional[PropertyType] = None
    purchase_price: Optional[float] = None
    loan_amount: Optional[float] = None
    down_payment_source: List[DownPaymentSource] = Field(default_factory=list)
    is_first_time_homebuyer: Optional[bool] = None

    credit_score: Optional[int] = None
    bk_history: Optional[BankruptcyHistory] = None
    foreclosure_history_date: Optional[date] = None
    mortgage_lates_in_12_mo: Optional[int] = Field(default=None, alias="mortgageLatesIn12Mo")

    marital_status: Optional[MaritalStatus] = None
    is_us_citizen: Optional[bool] = Field(default=None, alias="isUSCitizen")
    is_permanent_resident: Optional[bool] = None
    has_itin: Optional[bool] = Field(default=None, alias="hasITIN")

    employment_type: Optional[EmploymentType] = None
    employer_name: Optional[str] = None
    start_date: Optional[date] = None
    years_in_line_of_work: Optional[float] = None

    self_employed: Optional[SelfEmployedDetail] = None

    incomes: List[IncomeEntry] = Field(default_factory=list)
    assets: List[AssetEntry] = Field(default_factory=list)

    pays_alimony: Optional[bool] = None
    pays_child_support: Optional[bool] = None
    receives_child_or_alimony: Optional[bool] = None
    support_order_docs_claimed_in_assets: Optional[bool] = None

    is_condo: Optional[bool] = None
    is_new_construction: Optional[bool] = None

    name_variations: List[str] = Field(default_factory=list)
    large_deposits_present: Optional[bool] = None
    credit_inquiries_last_90_days: Optional[bool] = Field(default=None, alias="creditInquiriesLast90Days")
    rent_history: Optional[RentHistory] = None

    va: Optional[VADetail] = None
    usda: Optional[USDADetail] = None

    def has_income(self, *types: IncomeType) -> bool:
        return any(inc.type in types for inc in self.incomes)

    def has_asset(self, *types: AssetType) -> bool:
        return any(asset.type in types for asset in self.assets)

    def has_down_payment_source(self, source: DownPaymentSource) -> bool:
        return source in self.down_payment_source


class DocRequest(_Snapshot):
    """One candidate document. Identity is `id`; `rule_hits` records provenance."""

    id: str
    label: str
    reason: str
    rule_hits: List[str] = Field(default_factory=list)
    conditional: bool = False
    program_scope: Optional[Tuple[LoanProgram, ...]] = None


class DocChecklistResult(_Snapshot):
    required: List[DocRequest] = Field(default_factory=list)
    nice_to_have: List[DocRequest] = Field(default_factory=list)
    clarifications: List[str] = Field(default_factory=list)

    def all_ids(self) -> List[str]:
        return [doc.id for doc in self.required] + [doc.id for doc in self.nice_to_have]

    def get(self, doc_id: str) -> Optional[DocRequest]:
        for doc in self.required:
            if doc.id == doc_id:
                return doc
        for doc in self.nice_to_have:
            if doc.id == doc_id:
                return doc
        return None
