"""JSON helpers for plain values, dataclasses and pydantic models."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from selectorcraft.exceptions import SerializationError

T = TypeVar("T")


def _encode(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    msg = f"Object of type {type(obj).__name__} is not JSON serializable"
    raise TypeError(msg)


def get_json(obj: Any) -> str:
    """Return the compact JSON representation of ``obj``."""
    try:
        return json.dumps(obj, separators=(",", ":"), default=_encode)
    except (TypeError, ValueError) as exc:
        raise SerializationError(str(exc)) from exc


def from_json(cls: type[T], json_text: str) -> T:
    """Build an instance of ``cls`` from a JSON object string.

    Pydantic models are validated. Any other class gets an instance created
    without running ``__init__``, with attributes taken from the decoded object.
    """
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        try:
            return cls.model_validate_json(json_text)
        except ValidationError as exc:
            raise SerializationError(str(exc)) from exc

    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON: {exc}") from exc

    if not isinstance(data, dict):
        msg = f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        raise SerializationError(msg)

    obj = cls.__new__(cls)
    # frozen dataclasses reject setattr
    assign = object.__setattr__ if dataclasses.is_dataclass(cls) else setattr
    try:
        for key, value in data.items():
            assign(obj, key, value)
    except AttributeError as exc:
        raise SerializationError(f"Cannot populate {cls.__name__}: {exc}") from exc
    return obj
