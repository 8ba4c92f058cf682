"""Tests for errdetails.render module."""

from dataclasses import dataclass
from enum import Enum

import pytest

from errdetails.factory import ErrorFactory
from errdetails.keys import Key, Label
from errdetails.render import SEPARATOR, display_text, render_detail


class Severity(str, Enum):
    HIGH = "high"


class Silent:
    def display(self) -> str:
        return ""


class TestDisplayText:
    """Test display_text classification."""

    def test_displayable(self, shown):
        assert display_text(shown("text")) == "text"

    def test_plain_string(self):
        assert display_text("text") == "text"

    def test_str_enum_renders_value(self):
        assert display_text(Severity.HIGH) == "high"

    def test_label_displays_key_does_not(self):
        assert display_text(Label("shown")) == "shown"
        assert display_text(Key("hidden")) == ""

    @pytest.mark.parametrize("obj", [None, 42, 3.5, b"bytes", ["list"], object()])
    def test_not_displayable(self, obj):
        assert display_text(obj) == ""

    def test_empty_display(self):
        assert display_text(Silent()) == ""


class TestRenderDetail:
    """Test the per-detail line rule."""

    def test_both_displayable(self):
        assert render_detail("key", "value") == "key : value"

    def test_separator_is_exact(self):
        assert SEPARATOR == " : "

    def test_only_key(self, opaque):
        assert render_detail("key", opaque()) == "key"

    def test_only_value(self, opaque):
        assert render_detail(opaque(), "value") == "value"

    def test_neither(self, opaque):
        assert render_detail(opaque(), opaque()) == ""

    def test_empty_display_counts_as_missing(self):
        assert render_detail(Silent(), "value") == "value"
        assert render_detail("key", Silent()) == "key"
        assert render_detail("", "") == ""


@dataclass(frozen=True)
class Flagged:
    display: bool = True


class NotText:
    def display(self):
        return 42


class TestDisplayShapedObjects:
    """Objects that merely look displayable are rendered as nothing."""

    def test_class_is_not_displayable(self):
        assert display_text(Label) == ""
        assert render_detail(Label, "kind") == "kind"
        assert render_detail("kind", Label) == "kind"

    def test_display_field_is_not_displayable(self):
        assert display_text(Flagged()) == ""
        assert render_detail("flag", Flagged()) == "flag"

    def test_non_string_display_result(self):
        assert display_text(NotText()) == ""
        assert render_detail(NotText(), "value") == "value"

    def test_detailed_never_raises(self):
        err = ErrorFactory().new(
            "m", (Label, "kind"), ("flag", Flagged()), (NotText(), NotText())
        )
        assert err.detailed() == "m\nflag\nkind\n"
