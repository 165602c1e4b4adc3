from __future__ import annotations

from typing import Dict, List

from .models import DocChecklistResult


def explain(result: DocChecklistResult) -> List[str]:
    """`"<rule id>: <reason>"` lines for every required document, deduplicated.

    Nice-to-have documents are not explained.
    """
    lines: Dict[str, None] = {}
    for doc in result.required:
        for rule_id in doc.rule_hits:
            lines.setdefault(f"{rule_id}: {doc.reason}", None)
    return list(lines)
