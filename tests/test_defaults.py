"""Unit tests for the default rule engine."""

from typing import Optional

import pytest
from pydantic import BaseModel, Field

from eksconfig.defaults import (
    DefaultRule,
    apply_defaults,
    effective_value,
    get_field,
    is_unset,
    set_field,
)


class Inner(BaseModel):
    path: str = ""


class Target(BaseModel):
    name: str = ""
    count: int = 0
    flag: bool = False
    note: Optional[str] = None
    inner: Inner = Field(default_factory=Inner)


class TestIsUnset:
    """Tests for the unset check."""

    @pytest.mark.parametrize("value", ["", 0, 0.0, None])
    def test_unset_values(self, value):
        assert is_unset(value) is True

    @pytest.mark.parametrize("value", ["a", 1, -1, 0.5, False, True, [], {}])
    def test_set_values(self, value):
        assert is_unset(value) is False


class TestFieldAccess:
    """Tests for dotted field access."""

    def test_get_nested(self):
        target = Target(inner=Inner(path="/a"))

        assert get_field(target, "inner.path") == "/a"
        assert get_field(target, "name") == ""

    def test_set_nested(self):
        target = Target()

        set_field(target, "inner.path", "/b")

        assert target.inner.path == "/b"

    def test_unknown_field(self):
        with pytest.raises(AttributeError):
            get_field(Target(), "inner.missing")


class TestApplyDefaults:
    """Tests for applying rule tables."""

    def test_applies_unset_only(self):
        """Test set fields are skipped and unset fields defaulted."""
        target = Target(name="kept")
        rules = [
            DefaultRule("name", lambda cfg, t: "new"),
            DefaultRule("count", lambda cfg, t: 3),
            DefaultRule("inner.path", lambda cfg, t: cfg["base"] + "/out.json"),
        ]

        applied = apply_defaults({"base": "/tmp"}, target, rules)

        assert applied == ["count", "inner.path"]
        assert target.name == "kept"
        assert target.count == 3
        assert target.inner.path == "/tmp/out.json"

    def test_false_is_not_defaulted(self):
        """Test a False flag counts as set."""
        target = Target()

        applied = apply_defaults(None, target, [DefaultRule("flag", lambda cfg, t: True)])

        assert applied == []
        assert target.flag is False

    def test_second_pass_is_noop(self):
        """Test rules never fire twice."""
        target = Target()
        calls = []

        def derive(cfg, t):
            calls.append(1)
            return "generated"

        rules = [DefaultRule("note", derive)]
        apply_defaults(None, target, rules)
        apply_defaults(None, target, rules)

        assert target.note == "generated"
        assert len(calls) == 1

    def test_effective_value(self):
        """Test effective values do not modify the target."""
        target = Target()
        rule = DefaultRule("name", lambda cfg, t: "derived")

        assert effective_value(None, target, rule) == "derived"
        assert target.name == ""

        target.name = "given"
        assert effective_value(None, target, rule) == "given"
