from common.doc_checklist.merge import merge_documents
from common.doc_checklist.models import LoanProgram
from common.doc_checklist.rule import make_doc


def _doc(doc_id, reason, rule_id, *, conditional=False, program_scope=None):
    return make_doc(doc_id, reason, conditional=conditional, program_scope=program_scope).model_copy(
        update={"rule_hits": [rule_id]}
    )


def test_one_entry_per_id_in_first_seen_order():
    merged = merge_documents(
        [
            _doc("W2_LAST2Y", "a", "R-1"),
            _doc("GOVT_ID", "b", "R-2"),
            _doc("W2_LAST2Y", "c", "R-3"),
            _doc("VOE", "d", "R-4"),
        ]
    )
    assert [doc.id for doc in merged] == ["W2_LAST2Y", "GOVT_ID", "VOE"]


def test_rule_hits_union_keeps_first_seen_order():
    merged = merge_documents(
        [
            _doc("BANK_STMTS_2M", "x", "R-G-04"),
            _doc("BANK_STMTS_2M", "x", "R-AST-01"),
            _doc("BANK_STMTS_2M", "x", "R-G-04"),
        ]
    )
    assert merged[0].rule_hits == ["R-G-04", "R-AST-01"]


def test_identical_reasons_kept_once():
    merged = merge_documents([_doc("YTD_PNL", "same", "R-1"), _doc("YTD_PNL", "same", "R-2")])
    assert merged[0].reason == "same"


def test_distinct_reasons_joined_without_repeats():
    merged = merge_documents(
        [
            _doc("YTD_PNL", "first", "R-1"),
            _doc("YTD_PNL", "second", "R-2"),
            _doc("YTD_PNL", "first", "R-3"),
        ]
    )
    assert merged[0].reason == "first; second"


def test_required_dominates_conditional():
    merged = merge_documents(
        [
            _doc("GOVT_ID", "optional", "R-1", conditional=True),
            _doc("GOVT_ID", "required", "R-2"),
            _doc("GOVT_ID", "optional again", "R-3", conditional=True),
        ]
    )
    assert merged[0].conditional is False


def test_conditional_only_when_every_contributor_is():
    merged = merge_documents(
        [
            _doc("LANDLORD_VOR_12M", "a", "R-1", conditional=True),
            _doc("LANDLORD_VOR_12M", "b", "R-2", conditional=True),
        ]
    )
    assert merged[0].conditional is True


def test_label_and_program_scope_from_first_entry():
    first = _doc("GOVT_ID", "a", "R-1", program_scope=[LoanProgram.FHA])
    second = _doc("GOVT_ID", "b", "R-2").model_copy(update={"label": "Other label"})
    merged = merge_documents([first, second])
    assert merged[0].label == first.label
    assert merged[0].program_scope == (LoanProgram.FHA,)


def test_inputs_are_not_mutated():
    first = _doc("GOVT_ID", "a", "R-1", conditional=True)
    second = _doc("GOVT_ID", "b", "R-2")
    merge_documents([first, second])
    assert first.rule_hits == ["R-1"]
    assert first.reason == "a"
    assert first.conditional is True


def test_empty_input():
    assert merge_documents([]) == []
