"""Ordered default rules applied to configuration models.

Each rule owns exactly one field. A rule only fires when its field is unset,
so applying a table twice changes nothing the second time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from pydantic import BaseModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DefaultRule:
    """Default for one field.

    ``field`` is a dotted attribute path relative to the target model and
    ``derive`` receives the parent config and the target.
    """
    field: str
    derive: Callable[[Any, BaseModel], Any]


def is_unset(value: Any) -> bool:
    """Empty strings, zero numbers and None count as unset. False does not."""
    if value is None:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, str):
        return value == ""
    return False


def _split(target: BaseModel, field: str) -> tuple[Any, str]:
    *parents, name = field.split(".")
    obj = target
    for parent in parents:
        obj = getattr(obj, parent)
    return obj, name


def get_field(target: BaseModel, field: str) -> Any:
    obj, name = _split(target, field)
    return getattr(obj, name)


def set_field(target: BaseModel, field: str, value: Any) -> None:
    obj, name = _split(target, field)
    setattr(obj, name, value)


def effective_value(cfg: Any, target: BaseModel, rule: DefaultRule) -> Any:
    """Current value of the rule's field, or what the rule would set."""
    value = get_field(target, rule.field)
    if is_unset(value):
        return rule.derive(cfg, target)
    return value


def apply_defaults(cfg: Any, target: BaseModel, rules: Iterable[DefaultRule]) -> list[str]:
    """Apply every rule whose field is unset and return the fields set."""
    applied = []
    for rule in rules:
        if not is_unset(get_field(target, rule.field)):
            continue
        value = rule.derive(cfg, target)
        set_field(target, rule.field, value)
        applied.append(rule.field)
        logger.debug(f"Defaulted {rule.field} = {value!r}")
    return applied
