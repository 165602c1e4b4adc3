from __future__ import annotations

import argparse
import json
import logging
import os
from datetime import date
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from .explain import explain
from .runner import generate_doc_checklist

OVERLAYS_FILE_ENV = "DOC_CHECKLIST_OVERLAYS_FILE"


def _load_json(path: Path):
    with path.open() as handle:
        return json.load(handle)


def _default_overlays_path() -> Optional[Path]:
    value = os.getenv(OVERLAYS_FILE_ENV, "").strip()
    return Path(value) if value else None


def run_doc_checklist_from_files(
    application_path: Path,
    overlays_path: Optional[Path] = None,
    *,
    as_of: date,
    include_explanations: bool = False,
) -> dict[str, Any]:
    overlays = _load_json(overlays_path) if overlays_path is not None else None
    result = generate_doc_checklist(_load_json(application_path), overlays, as_of=as_of)

    payload: dict[str, Any] = result.model_dump(mode="json", by_alias=True)
    if include_explanations:
        payload["explanations"] = explain(result)
    return payload


def main(argv: list[str] | None = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Compute the borrower document checklist for a loan application JSON file."
    )
    parser.add_argument("application", help="Path to a loan application JSON document.")
    parser.add_argument(
        "--overlays",
        default=None,
        help=f"Path to a partial overlays JSON document (defaults to ${OVERLAYS_FILE_ENV}).",
    )
    parser.add_argument(
        "--as-of",
        type=date.fromisoformat,
        default=None,
        help="Evaluation date (YYYY-MM-DD); defaults to today.",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Include rule explanations for required documents.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log each rule that fires.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    overlays_path = Path(args.overlays) if args.overlays else _default_overlays_path()
    payload = run_doc_checklist_from_files(
        Path(args.application),
        overlays_path,
        as_of=args.as_of or date.today(),
        include_explanations=args.explain,
    )
    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
