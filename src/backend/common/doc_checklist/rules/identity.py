from __future__ import annotations

from ..registry import register_rule
from ..rule import Rule, fixed, make_doc

GROUP = "identity"

R_G_01 = register_rule(
    Rule(
        rule_id="R-G-01",
        rule_title="Always require government ID and SSN verification",
        group=GROUP,
        when=lambda ctx: True,
        docs=fixed(
            make_doc("GOVT_ID", "Required for all borrowers"),
            make_doc("SSN_VERIFICATION", "Required for all borrowers"),
        ),
    )
)

R_G_02 = register_rule(
    Rule(
        rule_id="R-G-02",
        rule_title="Name variations require documentation",
        group=GROUP,
        when=lambda ctx: len(ctx.application.name_variations) > 0,
        docs=fixed(
            make_doc("NAME_CHANGE_DOCS", "Name variations present"),
            make_doc("LOE_ALT_NAMES", "Explain name variations"),
        ),
    )
)

R_G_03 = register_rule(
    Rule(
        rule_id="R-G-03",
        rule_title="Recent credit inquiries require explanation",
        group=GROUP,
        when=lambda ctx: ctx.application.credit_inquiries_last_90_days is True,
        docs=fixed(make_doc("LOE_CREDIT_INQUIRIES", "Recent credit inquiries in last 90 days")),
    )
)

R_G_04 = register_rule(
    Rule(
        rule_id="R-G-04",
        rule_title="Large deposits require documentation",
        group=GROUP,
        when=lambda ctx: ctx.application.large_deposits_present is True,
        docs=fixed(
            make_doc("SOURCE_LARGE_DEPOSITS", "Large deposits present"),
            make_doc("BANK_STMTS_2M", "Bank statements to trace deposits"),
            make_doc("LOE_LARGE_DEPOSITS", "Explain large deposits"),
        ),
    )
)

R_G_05 = register_rule(
    Rule(
        rule_id="R-G-05",
        rule_title="Non-US citizens require immigration documentation",
        group=GROUP,
        when=lambda ctx: ctx.application.is_permanent_resident is True or ctx.application.has_itin is True,
        docs=fixed(make_doc("GREEN_CARD_EAD", "Permanent resident or ITIN holder")),
    )
)
