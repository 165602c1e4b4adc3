# Import order is evaluation order.
from .identity import R_G_01, R_G_02, R_G_03, R_G_04, R_G_05
from .employment import R_E_01, R_E_02
from .self_employment import R_SE_01, R_SE_02, R_SE_03, R_SE_04, R_SE_05, R_SE_06
from .income import R_1099_01, R_BONUS_01, R_RENT_01
from .family import R_FAM_01, R_FAM_02, R_FAM_03, R_FAM_04
from .assets import R_AST_01, R_AST_02, R_AST_03, R_AST_04
from .government import R_FHA_01, R_USDA_01, R_VA_01
from .property_transaction import R_PR_01, R_PR_02, R_PR_04
from .credit import R_CR_01, R_CR_02, R_CR_03
from .occupancy import R_OCC_01, R_OCC_02

__all__ = [
    "R_G_01",
    "R_G_02",
    "R_G_03",
    "R_G_04",
    "R_G_05",
    "R_E_01",
    "R_E_02",
    "R_SE_01",
    "R_SE_02",
    "R_SE_03",
    "R_SE_04",
    "R_SE_05",
    "R_SE_06",
    "R_1099_01",
    "R_BONUS_01",
    "R_RENT_01",
    "R_FAM_01",
    "R_FAM_02",
    "R_FAM_03",
    "R_FAM_04",
    "R_AST_01",
    "R_AST_02",
    "R_AST_03",
    "R_AST_04",
    "R_FHA_01",
    "R_VA_01",
    "R_USDA_01",
    "R_PR_01",
    "R_PR_02",
    "R_PR_04",
    "R_CR_01",
    "R_CR_02",
    "R_CR_03",
    "R_OCC_01",
    "R_OCC_02",
]
