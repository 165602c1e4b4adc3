from __future__ import annotations

from typing import Iterable, List, Tuple

from .models import DocRequest

# Identity and basics lead the required list, in this order.
PRIORITY_DOC_IDS: Tuple[str, ...] = (
    "GOVT_ID",
    "SSN_VERIFICATION",
    "GREEN_CARD_EAD",
    "NAME_CHANGE_DOCS",
)
_PRIORITY_RANK = {doc_id: idx for idx, doc_id in enumerate(PRIORITY_DOC_IDS)}


def _required_sort_key(doc: DocRequest) -> Tuple[int, int, str, str]:
    rank = _PRIORITY_RANK.get(doc.id)
    if rank is not None:
        return (0, rank, "", "")
    return (1, 0, doc.label.casefold(), doc.label)


def classify_documents(docs: Iterable[DocRequest]) -> Tuple[List[DocRequest], List[DocRequest]]:
    """Split merged documents into (required, nice_to_have).

    Required is sorted: priority ids first, then by label. Nice-to-have keeps
    merge order.
    """
    required: List[DocRequest] = []
    nice_to_have: List[DocRequest] = []
    for doc in docs:
        (nice_to_have if doc.conditional else required).append(doc)
    required.sort(key=_required_sort_key)
    return required, nice_to_have
