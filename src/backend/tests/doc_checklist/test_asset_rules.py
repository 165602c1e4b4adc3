from common.doc_checklist.rules.assets import R_AST_01


def test_large_deposits_with_bank_accounts(run_checklist):
    result = run_checklist(
        largeDepositsPresent=True,
        assets=[
            {"type": "Checking", "balance": 50000},
            {"type": "Savings", "balance": 10000},
        ],
    )
    ids = [doc.id for doc in result.required]
    assert {"SOURCE_LARGE_DEPOSITS", "BANK_STMTS_2M", "LOE_LARGE_DEPOSITS"} <= set(ids)
    assert ids.count("BANK_STMTS_2M") == 1

    bank = result.get("BANK_STMTS_2M")
    assert bank.rule_hits == ["R-G-04", "R-AST-01"]
    assert bank.reason == (
        "Bank statements to trace deposits; Bank statements for assets (most recent 2 months)"
    )
    assert bank.conditional is False


def test_statements_follow_asset_types(make_ctx):
    ctx = make_ctx(
        assets=[
            {"type": "Brokerage", "balance": 20000},
            {"type": "Retirement", "balance": 90000},
            {"type": "CashOnHand", "balance": 500},
        ]
    )
    assert R_AST_01.test(ctx) is True
    assert [doc.id for doc in R_AST_01.produce(ctx)] == ["BROKERAGE_STMTS_2M", "RETIREMENT_STMTS_2M"]


def test_no_assets_no_statements(make_ctx):
    assert R_AST_01.test(make_ctx(assets=[])) is False


def test_min_bank_statement_months_reflected_in_reason(make_ctx):
    ctx = make_ctx(overlays={"minBankStmtMonths": 3}, assets=[{"type": "Savings", "balance": 100}])
    (doc,) = R_AST_01.produce(ctx)
    assert doc.id == "BANK_STMTS_2M"
    assert "most recent 3 months" in doc.reason


def test_gift_down_payment_requires_gift_documentation(run_checklist):
    result = run_checklist(downPaymentSource=["Gift"], assets=[{"type": "Checking", "balance": 50000}])
    ids = {doc.id for doc in result.required}
    assert {"GIFT_LETTER", "DONOR_ASSET_EVIDENCE", "GIFT_FUNDS_PROOF_OF_TRANSFER"} <= ids


def test_crypto_liquidation_requires_paper_trail(run_checklist):
    result = run_checklist(
        downPaymentSource=["CryptoLiquidated"],
        assets=[
            {"type": "Checking", "balance": 60000},
            {"type": "Crypto", "balance": 0},
        ],
    )
    ids = {doc.id for doc in result.required}
    assert {"CRYPTO_LIQUIDATION_PROOF", "BANK_STMTS_2M"} <= ids
    assert result.get("BANK_STMTS_2M").rule_hits == ["R-AST-01", "R-AST-03"]


def test_crypto_asset_alone_triggers_liquidation_rule(run_checklist):
    result = run_checklist(assets=[{"type": "Crypto", "balance": 4000}])
    bank = result.get("BANK_STMTS_2M")
    assert bank.rule_hits == ["R-AST-03"]
    assert bank.reason == "Full paper trail into verifiable funds"


def test_sale_of_asset_requires_bill_of_sale(run_checklist):
    ids = {doc.id for doc in run_checklist(downPaymentSource=["SaleOfAsset", "OwnFunds"]).required}
    assert "SALE_OF_ASSET_BILL_OF_SALE" in ids
