"""Case-insensitive, null-tolerant JSON decoding for Miro entities.

Miro does not keep key casing stable across endpoints (``imageURL`` vs
``imageUrl``, ``ID`` vs ``id``) and sends ``null`` for optional sub-objects.
Every entity derives from :class:`MiroModel`, whose ``before`` validator
rewrites the raw mapping onto the declared fields before pydantic sees it:

1. each raw key is lower-cased and compared with the lower-cased alias and
   name of every declared field; the first key to match a field wins and
   unmatched keys are dropped;
2. ``null`` values are dropped, so the field keeps its default (``None``
   for nested entities, i.e. absent);
3. the remaining values are validated strictly by the field annotation,
   recursing into nested models and lists with the same rules.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Annotated, Any, TypeVar

import httpx
import pydantic
from pydantic import BaseModel, BeforeValidator, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from miro.exceptions import DecodeError

M = TypeVar("M", bound="MiroModel")

_RFC3339 = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})T([0-9]{2}):([0-9]{2}):([0-9]{2})(?:\.([0-9]+))?"
    r"(?:(Z)|([+-])([0-9]{2}):([0-9]{2}))"
)


def parse_timestamp(value: Any) -> datetime:
    """Parse an RFC 3339 timestamp such as ``2006-01-02T15:04:05Z07:00``.

    Only strings are accepted and the offset is mandatory; fractional
    seconds beyond microseconds are truncated.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise ValueError("timestamp must be timezone-aware")
        return value
    if not isinstance(value, str):
        raise ValueError(f"expected an RFC 3339 string, got {type(value).__name__}")
    match = _RFC3339.fullmatch(value)
    if match is None:
        raise ValueError(f"invalid RFC 3339 timestamp: {value!r}")

    year, month, day, hour, minute, second, frac, zulu, sign, off_h, off_m = match.groups()
    if zulu:
        tz = timezone.utc
    else:
        offset = timedelta(hours=int(off_h), minutes=int(off_m))
        tz = timezone(-offset if sign == "-" else offset)
    micro = int(frac[:6].ljust(6, "0")) if frac else 0
    return datetime(
        int(year), int(month), int(day),
        int(hour), int(minute), int(second), micro,
        tzinfo=tz,
    )


Timestamp = Annotated[datetime, BeforeValidator(parse_timestamp)]


@lru_cache(maxsize=None)
def _field_lookup(model: type[BaseModel]) -> dict[str, str]:
    """Map lower-cased field names and aliases to the key pydantic expects."""
    lookup: dict[str, str] = {}
    for name, info in model.model_fields.items():
        key = info.alias or name
        lookup.setdefault(key.lower(), key)
        lookup.setdefault(name.lower(), key)
    return lookup


class MiroModel(BaseModel):
    """Base class for every decoded Miro entity and request payload."""

    model_config = ConfigDict(alias_generator=to_camel)

    @model_validator(mode="before")
    @classmethod
    def match_keys(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            # Let pydantic report the type error.
            return data
        lookup = _field_lookup(cls)
        seen: set[str] = set()
        matched: dict[str, Any] = {}
        for raw_key, value in data.items():
            if not isinstance(raw_key, str):
                continue
            key = lookup.get(raw_key.lower())
            if key is None or key in seen:
                continue
            seen.add(key)
            if value is not None:
                matched[key] = value
        return matched


def _location(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc)


def _wrap(model: type[BaseModel], exc: pydantic.ValidationError, prefix: str = "") -> DecodeError:
    first = exc.errors()[0]
    field = _location(first["loc"])
    if prefix:
        field = f"{prefix}.{field}" if field else prefix
    where = f"{model.__name__}.{field}" if field else model.__name__
    return DecodeError(f"cannot decode {where}: {first['msg']}", field=field or None)


def decode(model: type[M], raw: Any) -> M:
    """Decode one JSON object (already parsed) into *model*."""
    if not isinstance(raw, Mapping):
        raise DecodeError(
            f"cannot decode {model.__name__}: expected a JSON object, "
            f"got {type(raw).__name__}"
        )
    try:
        return model.model_validate(raw)
    except pydantic.ValidationError as exc:
        raise _wrap(model, exc) from exc


def decode_list(model: type[M], raw: Any) -> list[M]:
    """Decode a JSON array of objects; the first bad element aborts."""
    if not isinstance(raw, list):
        raise DecodeError(
            f"cannot decode list of {model.__name__}: expected a JSON array, "
            f"got {type(raw).__name__}"
        )
    items: list[M] = []
    for index, element in enumerate(raw):
        if not isinstance(element, Mapping):
            raise DecodeError(
                f"cannot decode {model.__name__}.{index}: expected a JSON object, "
                f"got {type(element).__name__}",
                field=str(index),
            )
        try:
            items.append(model.model_validate(element))
        except pydantic.ValidationError as exc:
            raise _wrap(model, exc, prefix=str(index)) from exc
    return items


def decode_response(model: type[M], response: httpx.Response, *, many: bool = False) -> Any:
    """Parse *response* as JSON and decode it into *model* (or a list of it)."""
    try:
        raw = response.json()
    except ValueError as exc:
        raise DecodeError(
            f"cannot decode {model.__name__}: response body is not valid JSON"
        ) from exc
    if many:
        return decode_list(model, raw)
    return decode(model, raw)
