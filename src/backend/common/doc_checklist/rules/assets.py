from __future__ import annotations

from typing import List

from ..context import RuleContext
from ..models import AssetType, DocRequest, DownPaymentSource
from ..registry import register_rule
from ..rule import Rule, computed, fixed, make_doc

GROUP = "assets"


def _statement_docs(ctx: RuleContext) -> List[DocRequest]:
    app = ctx.application
    months = ctx.overlays.min_bank_stmt_months
    docs: List[DocRequest] = []
    if app.has_asset(AssetType.CHECKING, AssetType.SAVINGS):
        docs.append(make_doc("BANK_STMTS_2M", f"Bank statements for assets (most recent {months} months)"))
    if app.has_asset(AssetType.BROKERAGE):
        docs.append(make_doc("BROKERAGE_STMTS_2M", f"Brokerage statements (most recent {months} months)"))
    if app.has_asset(AssetType.RETIREMENT):
        docs.append(make_doc("RETIREMENT_STMTS_2M", f"Retirement account statements (most recent {months} months)"))
    return docs


R_AST_01 = register_rule(
    Rule(
        rule_id="R-AST-01",
        rule_title="Assets used to qualify require statements",
        group=GROUP,
        when=lambda ctx: len(ctx.application.assets) > 0,
        docs=computed(_statement_docs),
    )
)

R_AST_02 = register_rule(
    Rule(
        rule_id="R-AST-02",
        rule_title="Gift funds require gift letter and donor documentation",
        group=GROUP,
        when=lambda ctx: ctx.application.has_down_payment_source(DownPaymentSource.GIFT),
        docs=fixed(
            make_doc("GIFT_LETTER", "Gift letter (Fannie Mae form)"),
            make_doc("DONOR_ASSET_EVIDENCE", "Donor asset evidence"),
            make_doc("GIFT_FUNDS_PROOF_OF_TRANSFER", "Proof of gift transfer"),
        ),
    )
)

R_AST_03 = register_rule(
    Rule(
        rule_id="R-AST-03",
        rule_title="Crypto liquidation requires proof and paper trail",
        group=GROUP,
        when=lambda ctx: ctx.application.has_down_payment_source(DownPaymentSource.CRYPTO_LIQUIDATED)
        or ctx.application.has_asset(AssetType.CRYPTO),
        docs=fixed(
            make_doc("CRYPTO_LIQUIDATION_PROOF", "Cryptocurrency liquidation proof"),
            make_doc("BANK_STMTS_2M", "Full paper trail into verifiable funds"),
        ),
    )
)

R_AST_04 = register_rule(
    Rule(
        rule_id="R-AST-04",
        rule_title="Sale of asset requires bill of sale",
        group=GROUP,
        when=lambda ctx: ctx.application.has_down_payment_source(DownPaymentSource.SALE_OF_ASSET),
        docs=fixed(make_doc("SALE_OF_ASSET_BILL_OF_SALE", "Bill of sale for asset")),
    )
)
