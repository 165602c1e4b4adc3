from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from .rule import Rule


class RuleRegistry:
    """Rule table in declaration order. Registration order is evaluation order."""

    def __init__(self):
        self._rules: List[Rule] = []
        self._by_id: Dict[str, Rule] = {}

    def register(self, rule: Rule) -> Rule:
        if not rule.rule_id:
            raise ValueError("Rule missing rule_id")
        if rule.rule_id in self._by_id:
            raise ValueError(f"Duplicate rule_id registered: {rule.rule_id}")
        self._rules.append(rule)
        self._by_id[rule.rule_id] = rule
        return rule

    def rules(self) -> Tuple[Rule, ...]:
        return tuple(self._rules)

    def get(self, rule_id: str) -> Rule:
        return self._by_id[rule_id]

    def ids(self) -> Iterable[str]:
        return [rule.rule_id for rule in self._rules]

    def __len__(self) -> int:
        return len(self._rules)


registry = RuleRegistry()


def register_rule(rule: Rule) -> Rule:
    return registry.register(rule)
