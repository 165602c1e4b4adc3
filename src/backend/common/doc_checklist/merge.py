from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .models import DocRequest

REASON_SEPARATOR = "; "


@dataclass
class _Accumulator:
    first: DocRequest
    rule_hits: Dict[str, None] = field(default_factory=dict)
    reasons: Dict[str, None] = field(default_factory=dict)
    conditional: bool = True

    def add(self, doc: DocRequest) -> None:
        for rule_id in doc.rule_hits:
            self.rule_hits.setdefault(rule_id, None)
        self.reasons.setdefault(doc.reason, None)
        # Required dominates: optional only if every contributor said optional.
        self.conditional = self.conditional and doc.conditional

    def build(self) -> DocRequest:
        return self.first.model_copy(
            update={
                "rule_hits": list(self.rule_hits),
                "reason": REASON_SEPARATOR.join(self.reasons),
                "conditional": self.conditional,
            }
        )


def merge_documents(docs: Iterable[DocRequest]) -> List[DocRequest]:
    """Collapse raw requests to one entry per document id, in first-seen order.

    `label` and `program_scope` come from the first entry seen for an id.
    """
    merged: Dict[str, _Accumulator] = {}
    for doc in docs:
        acc = merged.get(doc.id)
        if acc is None:
            acc = merged[doc.id] = _Accumulator(first=doc)
        acc.add(doc)
    return [acc.build() for acc in merged.values()]
