from __future__ import annotations

from ..models import RentMethod
from ..registry import register_rule
from ..rule import Rule, fixed, make_doc

GROUP = "occupancy"

R_OCC_01 = register_rule(
    Rule(
        rule_id="R-OCC-01",
        rule_title="Rent history with thin credit may require landlord VOR",
        group=GROUP,
        when=lambda ctx: ctx.application.rent_history is not None
        and ctx.application.rent_history.paying_rent is True,
        docs=fixed(make_doc("LANDLORD_VOR_12M", "Landlord verification of rent - 12 months")),
        conditional=True,
    )
)

R_OCC_02 = register_rule(
    Rule(
        rule_id="R-OCC-02",
        rule_title="Living rent-free requires explanation",
        group=GROUP,
        when=lambda ctx: ctx.application.rent_history is not None
        and ctx.application.rent_history.method == RentMethod.LIVING_RENT_FREE,
        docs=fixed(make_doc("LOE_RENT_FREE", "Explain rent-free living arrangement")),
    )
)
