from __future__ import annotations

import argparse
import json
from typing import List, Optional, Sequence

from pydantic import BaseModel, Field

from .registry import registry
from .rule import FixedDocs

# Ensure built-in rules are imported/registered when generating a catalog.
from . import rules as _builtin_rules  # noqa: F401

CATALOG_FORMATS = ("yaml", "json")


class RuleCatalogEntry(BaseModel):
    rule_id: str
    rule_title: str
    group: str
    conditional: bool = False

    # "fixed" documents are listed here; "computed" ones depend on the application.
    doc_source: str
    doc_ids: List[str] = Field(default_factory=list)
    declaration_index: int


def build_catalog(group: Optional[str] = None) -> List[RuleCatalogEntry]:
    entries: List[RuleCatalogEntry] = []
    for idx, rule in enumerate(registry.rules()):
        if group is not None and rule.group != group:
            continue
        is_fixed = isinstance(rule.docs, FixedDocs)
        entries.append(
            RuleCatalogEntry(
                rule_id=rule.rule_id,
                rule_title=rule.rule_title,
                group=rule.group,
                conditional=rule.conditional,
                doc_source="fixed" if is_fixed else "computed",
                doc_ids=[doc.id for doc in rule.docs.docs] if is_fixed else [],
                declaration_index=idx,
            )
        )

    entries.sort(key=lambda e: e.rule_id)
    return entries


def render_catalog(entries: Sequence[RuleCatalogEntry], fmt: str = "yaml") -> str:
    """Serialize catalog entries, keeping each entry's fields in model order."""
    rows = [entry.model_dump() for entry in entries]
    if fmt == "json":
        return json.dumps(rows, indent=2)
    if fmt != "yaml":
        raise ValueError(f"Unsupported catalog format: {fmt!r}")

    try:
        import yaml  # type: ignore
    except ModuleNotFoundError as exc:
        raise SystemExit(
            "PyYAML is required for YAML output. Install the `catalog` extra (e.g., `pip install .[catalog]`)."
        ) from exc
    return yaml.safe_dump(rows, sort_keys=False)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="List the registered document rules.")
    parser.add_argument("--format", choices=CATALOG_FORMATS, default="yaml", help="Output format (default: yaml).")
    parser.add_argument(
        "--group",
        choices=sorted({rule.group for rule in registry.rules()}),
        default=None,
        help="Only list rules from one group.",
    )
    args = parser.parse_args(argv)

    print(render_catalog(build_catalog(args.group), args.format))


if __name__ == "__main__":
    main()
