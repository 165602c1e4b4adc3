from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

from .context import RuleContext
from .document_catalog import get_document_label
from .models import DocRequest, LoanProgram

Predicate = Callable[[RuleContext], bool]
Producer = Callable[[RuleContext], Iterable[DocRequest]]


class RuleEvaluationError(RuntimeError):
    """A rule predicate or producer raised; the checklist is not computed."""

    def __init__(self, rule_id: str, stage: str):
        super().__init__(f"Rule {rule_id} failed during {stage}")
        self.rule_id = rule_id
        self.stage = stage


@dataclass(frozen=True)
class FixedDocs:
    """Documents known when the rule table is declared."""

    docs: Tuple[DocRequest, ...]

    def produce(self, ctx: RuleContext) -> List[DocRequest]:
        return list(self.docs)


@dataclass(frozen=True)
class ComputedDocs:
    """Documents that depend on the application or overlays."""

    producer: Producer

    def produce(self, ctx: RuleContext) -> List[DocRequest]:
        return list(self.producer(ctx))


DocSource = Union[FixedDocs, ComputedDocs]


@dataclass(frozen=True)
class Rule:
    rule_id: str
    rule_title: str
    group: str
    when: Predicate
    docs: DocSource
    # Every document this rule produces lands in niceToHave unless another rule requires it.
    conditional: bool = False

    def __post_init__(self):
        if not self.rule_id:
            raise ValueError("Rule must define rule_id")

    def test(self, ctx: RuleContext) -> bool:
        return bool(self.when(ctx))

    def produce(self, ctx: RuleContext) -> List[DocRequest]:
        return self.docs.produce(ctx)


def make_doc(
    doc_id: str,
    reason: str,
    *,
    conditional: bool = False,
    program_scope: Optional[Sequence[LoanProgram]] = None,
) -> DocRequest:
    return DocRequest(
        id=doc_id,
        label=get_document_label(doc_id),
        reason=reason,
        conditional=conditional,
        program_scope=tuple(program_scope) if program_scope is not None else None,
    )


def fixed(*docs: DocRequest) -> FixedDocs:
    return FixedDocs(docs=tuple(docs))


def computed(producer: Producer) -> ComputedDocs:
    return ComputedDocs(producer=producer)
