from common.doc_checklist.classify import PRIORITY_DOC_IDS, classify_documents
from common.doc_checklist.rule import make_doc


def test_partitions_by_conditional_flag():
    required, nice_to_have = classify_documents(
        [
            make_doc("VOE", "r"),
            make_doc("LANDLORD_VOR_12M", "r", conditional=True),
        ]
    )
    assert [doc.id for doc in required] == ["VOE"]
    assert [doc.id for doc in nice_to_have] == ["LANDLORD_VOR_12M"]


def test_priority_ids_first_then_label_order():
    docs = [
        make_doc("W2_LAST2Y", "r"),  # "W-2 Forms ..."
        make_doc("NAME_CHANGE_DOCS", "r"),
        make_doc("BANK_STMTS_2M", "r"),  # "Bank Statements ..."
        make_doc("GOVT_ID", "r"),
        make_doc("GREEN_CARD_EAD", "r"),
        make_doc("SSN_VERIFICATION", "r"),
        make_doc("CONDO_DOCS_BUDGET_MINUTES_INSURANCE", "r"),  # "Condo Docs ..."
    ]
    required, _ = classify_documents(docs)
    assert [doc.id for doc in required] == [
        *PRIORITY_DOC_IDS,
        "BANK_STMTS_2M",
        "CONDO_DOCS_BUDGET_MINUTES_INSURANCE",
        "W2_LAST2Y",
    ]


def test_label_sort_ignores_case():
    lower = make_doc("custom_a", "r").model_copy(update={"label": "apple"})
    upper = make_doc("custom_b", "r").model_copy(update={"label": "Banana"})
    required, _ = classify_documents([upper, lower])
    assert [doc.label for doc in required] == ["apple", "Banana"]


def test_nice_to_have_keeps_merge_order():
    docs = [
        make_doc("TITLE_TRUST_DOCS", "r", conditional=True),  # "Title/Trust ..."
        make_doc("ADDENDA", "r", conditional=True),  # "Contract Addenda"
        make_doc("GOVT_ID", "r", conditional=True),
    ]
    _, nice_to_have = classify_documents(docs)
    assert [doc.id for doc in nice_to_have] == ["TITLE_TRUST_DOCS", "ADDENDA", "GOVT_ID"]
