"""Helpers for marking fields that only the tester itself writes."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


def read_only(**kwargs: Any) -> Any:
    """Field produced by the tester. Users and environment variables never set it."""
    return Field(json_schema_extra={"read_only": True}, **kwargs)


def is_read_only(model: type[BaseModel], name: str) -> bool:
    extra = model.model_fields[name].json_schema_extra
    return isinstance(extra, dict) and bool(extra.get("read_only"))


def user_fields(model: type[BaseModel]) -> list[str]:
    """Names of the fields a user may supply, in declaration order."""
    return [name for name in model.model_fields if not is_read_only(model, name)]
