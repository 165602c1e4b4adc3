from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, List, Mapping, Optional, Union

from .classify import classify_documents
from .config import OverlaysInput, resolve_overlays
from .context import RuleContext
from .explain import explain
from .merge import merge_documents
from .models import DocChecklistResult, DocRequest, LoanApplication
from .registry import registry
from .rule import Rule, RuleEvaluationError
from .validation import validate_application

logger = logging.getLogger(__name__)

ApplicationInput = Union[LoanApplication, Mapping[str, Any]]


class ChecklistRunner:
    def __init__(self, rules: Optional[Iterable[Rule]] = None):
        self._rules = tuple(rules) if rules is not None else registry.rules()

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def evaluate(self, ctx: RuleContext) -> List[DocRequest]:
        """Raw document requests from every firing rule, in rule order, not deduplicated."""
        raw: List[DocRequest] = []
        for rule in self._rules:
            try:
                fired = rule.test(ctx)
            except Exception as exc:
                logger.exception("Rule %s predicate raised", rule.rule_id)
                raise RuleEvaluationError(rule.rule_id, "predicate") from exc
            if not fired:
                continue

            try:
                docs = rule.produce(ctx)
            except Exception as exc:
                logger.exception("Rule %s producer raised", rule.rule_id)
                raise RuleEvaluationError(rule.rule_id, "producer") from exc

            logger.debug("Rule %s fired: %s", rule.rule_id, [doc.id for doc in docs])
            raw.extend(_tag(doc, rule) for doc in docs)
        return raw

    def run(
        self,
        application: ApplicationInput,
        overlays: OverlaysInput = None,
        *,
        as_of: date,
    ) -> DocChecklistResult:
        ctx = build_context(application, overlays, as_of=as_of)
        clarifications = validate_application(ctx.application)
        merged = merge_documents(self.evaluate(ctx))
        required, nice_to_have = classify_documents(merged)

        logger.info(
            "Document checklist computed as of %s: %d required, %d nice-to-have, %d clarifications",
            ctx.as_of.isoformat(),
            len(required),
            len(nice_to_have),
            len(clarifications),
        )
        return DocChecklistResult(
            required=required,
            nice_to_have=nice_to_have,
            clarifications=clarifications,
        )


def _tag(doc: DocRequest, rule: Rule) -> DocRequest:
    rule_hits = list(doc.rule_hits)
    if rule.rule_id not in rule_hits:
        rule_hits.append(rule.rule_id)
    return doc.model_copy(
        update={"rule_hits": rule_hits, "conditional": doc.conditional or rule.conditional}
    )


def build_context(
    application: ApplicationInput,
    overlays: OverlaysInput = None,
    *,
    as_of: date,
) -> RuleContext:
    if not isinstance(application, LoanApplication):
        application = LoanApplication.model_validate(application)
    return RuleContext(
        application=application,
        as_of=as_of,
        overlays=resolve_overlays(overlays),
    )


def generate_doc_checklist(
    application: ApplicationInput,
    overlays: OverlaysInput = None,
    *,
    as_of: date,
) -> DocChecklistResult:
    return ChecklistRunner().run(application, overlays, as_of=as_of)


def explain_application(
    application: ApplicationInput,
    overlays: OverlaysInput = None,
    *,
    as_of: date,
) -> List[str]:
    return explain(generate_doc_checklist(application, overlays, as_of=as_of))
