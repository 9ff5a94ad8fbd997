"""
Candidate record intake.

Turns raw lookup-service payloads into validated Candidate models. Accepts a
bare list of records or the search endpoint's {"data": [...]} envelope.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .models import Candidate


def _records(payload: Any) -> list[Any]:
    if isinstance(payload, dict):
        if "data" not in payload:
            raise ValueError("Expected a list of records or an object with a 'data' list")
        payload = payload["data"]
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise ValueError(f"Expected a list of records, got {type(payload).__name__}")
    return payload


def parse_candidates(payload: Any) -> tuple[list[Candidate], list[str]]:
    """Validate raw records.

    Args:
        payload: A list of record dicts, or {"data": [...]}.

    Returns:
        (candidates, errors) - invalid records are skipped and described in errors.

    Raises:
        ValueError: If the payload is not a list or a data envelope.
    """
    candidates: list[Candidate] = []
    errors: list[str] = []

    for index, record in enumerate(_records(payload)):
        if not isinstance(record, dict):
            errors.append(f"record {index}: expected an object, got {type(record).__name__}")
            continue
        try:
            candidates.append(Candidate.model_validate(record))
        except ValidationError as e:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
            errors.append(f"record {index}: invalid {fields}")

    return candidates, errors


def load_candidates(path: Path) -> tuple[list[Candidate], list[str]]:
    """Load and validate candidate records from a JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file is not valid JSON or has the wrong shape.
    """
    if not path.exists():
        raise FileNotFoundError(f"Candidates file not found: {path}")

    with open(path, encoding="utf-8") as f:
        try:
            payload = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    return parse_candidates(payload)
