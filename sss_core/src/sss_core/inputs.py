"""Test-case document schemas and loading."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Mapping

import regex
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import CaseFormatError
from .models import ShareCase, ShareRecord
from .radix import decode
from .utils.text import int_to_text

KEYS_FIELD = "keys"

_COORDINATE = regex.compile(r"[+-]?[0-9]+", regex.ASCII)


class CaseKeys(BaseModel):
    n: int = Field(ge=1, description="Total number of shares issued")
    k: int = Field(ge=1, description="Threshold needed to reconstruct")

    model_config = ConfigDict(extra="ignore")


class ShareEntry(BaseModel):
    base: int
    value: str

    model_config = ConfigDict(extra="ignore")

    @field_validator("value", mode="before")
    @classmethod
    def _value_as_text(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return int_to_text(value)
        return value


def parse_coordinate(key: Any) -> int | None:
    """Return the x coordinate encoded by a share key, or ``None`` if it is not numeric."""
    if isinstance(key, int) and not isinstance(key, bool):
        return key
    text = str(key)
    if not _COORDINATE.fullmatch(text):
        return None
    # decode() has no digit-count limit, unlike int(str)
    magnitude = decode(text.lstrip("+-"), 10)
    return -magnitude if text.startswith("-") else magnitude


def case_from_mapping(raw: Any, *, strict_keys: bool = False) -> ShareCase:
    if not isinstance(raw, Mapping):
        raise CaseFormatError("Test case must be an object")
    if KEYS_FIELD not in raw:
        raise CaseFormatError(f"Test case is missing the {KEYS_FIELD!r} object")
    try:
        keys = CaseKeys.model_validate(raw[KEYS_FIELD])
    except ValidationError as exc:
        raise CaseFormatError(f"Invalid {KEYS_FIELD!r} object: {exc}") from exc

    records: List[ShareRecord] = []
    skipped: List[str] = []
    for key, entry in raw.items():
        if key == KEYS_FIELD:
            continue
        x = parse_coordinate(key)
        if x is None:
            if strict_keys:
                raise CaseFormatError(f"Share key {key!r} is not an integer")
            skipped.append(str(key))
            continue
        try:
            parsed = ShareEntry.model_validate(entry)
        except ValidationError as exc:
            raise CaseFormatError(f"Invalid share {key!r}: {exc}") from exc
        records.append(ShareRecord(x=x, base=parsed.base, value=parsed.value))

    return ShareCase(n=keys.n, k=keys.k, records=records, skipped_keys=tuple(skipped))


def case_from_path(path: Path, *, strict_keys: bool = False) -> ShareCase:
    """Load a test case from JSON, or from YAML when the suffix says so."""
    with path.open("r", encoding="utf-8") as handle:
        try:
            if path.suffix.lower() in {".yaml", ".yml"}:
                raw = yaml.safe_load(handle)
            else:
                raw = json.load(handle)
        # ValueError covers undecodable bytes, malformed JSON and oversized integer literals
        except (ValueError, yaml.YAMLError) as exc:
            raise CaseFormatError(f"Cannot parse {path}: {exc}") from exc
    return case_from_mapping(raw, strict_keys=strict_keys)


__all__ = [
    "CaseKeys",
    "ShareEntry",
    "case_from_mapping",
    "case_from_path",
    "parse_coordinate",
]
