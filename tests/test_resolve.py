"""Tests for resolve.py: resolution against a bare resource table.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given

from deferredtext.enums import SpanStyle
from deferredtext.errors import ErrorCode, ResourceNotFoundError, UnsupportedTextError
from deferredtext.render import RenderContext, render
from deferredtext.resolve import resolve
from deferredtext.resources import ResourceTable
from deferredtext.rich_text import RichText, Span
from deferredtext.text import (
    HtmlResource,
    PluralResource,
    PluralResourceArgs,
    Raw,
    StringResource,
    StringResourceArgs,
    Text,
    from_html_resource,
    from_literal,
    from_plural_resource,
    from_string_resource,
)
from tests.helpers.resources import (
    GREETING,
    GREETING_NAMED,
    HTML_NOTICE,
    ITEMS,
    RecordingResources,
)
from tests.strategies import html_resources, texts


class TestResolveVariants:
    """Each variant maps to exactly one resource call."""

    def test_literal_returns_payload_without_lookup(
        self, recording: RecordingResources
    ) -> None:
        rich = RichText("hello", (Span(0, 5, SpanStyle.ITALIC),))
        assert resolve(recording, from_literal(rich)) is rich
        assert recording.calls == []

    def test_literal_matches_render(self, context: RenderContext) -> None:
        text = from_literal("hello")
        assert resolve(context.resources, text) == render(text, context) == RichText("hello")

    def test_string_resource(self) -> None:
        resources = RecordingResources(strings={7: "Seven"})
        assert resolve(resources, from_string_resource(7)) == RichText("Seven")
        assert resources.calls == [("get_string", 7, ())]

    def test_string_resource_args_passed_through(self) -> None:
        resources = RecordingResources(strings={(7, ("a", "b")): "X"})
        assert resolve(resources, from_string_resource(7, ["a", "b"])).text == "X"
        assert resources.calls == [("get_string", 7, ("a", "b"))]

    def test_empty_args_call_without_arguments(self) -> None:
        resources = RecordingResources(strings={7: "Seven"})
        assert resolve(resources, from_string_resource(7, [])).text == "Seven"

    def test_plural_resource(self) -> None:
        resources = RecordingResources(quantities={(42, 3): "3 items", (42, 1): "1 item"})
        assert resolve(resources, from_plural_resource(42, 3)).text == "3 items"
        assert resolve(resources, from_plural_resource(42, 1)).text == "1 item"
        assert resources.calls == [
            ("get_quantity_string", 42, 3, ()),
            ("get_quantity_string", 42, 1, ()),
        ]

    def test_plural_resource_args_passed_through(self) -> None:
        resources = RecordingResources(quantities={(42, 3, (3, "<b>")): "3 <b>"})
        rich = resolve(resources, from_plural_resource(42, 3, 3, "<b>"))
        assert rich == RichText("3 <b>")
        assert resources.calls == [("get_quantity_string", 42, 3, (3, "<b>"))]

    def test_results_are_plain(self, table: ResourceTable) -> None:
        """resolve() never parses markup."""
        rich = resolve(table, from_string_resource(HTML_NOTICE))
        assert rich.spans == ()
        assert rich.text.startswith("<b>Heads up:</b>")

    def test_against_resource_table(self, table: ResourceTable) -> None:
        assert resolve(table, from_string_resource(GREETING_NAMED, ["Ada"])).text == "Hello, Ada!"
        assert resolve(table, from_plural_resource(ITEMS, 1, 1)).text == "1 item"
        assert resolve(table, from_plural_resource(ITEMS, 5, 5)).text == "5 items"


class TestResolveNone:
    """None resolves to None."""

    def test_none_returns_none(self, recording: RecordingResources) -> None:
        assert resolve(recording, None) is None
        assert recording.calls == []


class TestResolveErrors:
    """Unsupported variants and lookup failures."""

    def test_html_resource_rejected(self, table: ResourceTable) -> None:
        text = from_html_resource(HTML_NOTICE)
        with pytest.raises(UnsupportedTextError) as exc_info:
            resolve(table, text)
        err = exc_info.value
        assert err.text is text
        assert err.code is ErrorCode.UNSUPPORTED_TEXT
        assert "HtmlResource" in str(err)

    @given(text=html_resources)
    def test_html_resource_never_touches_table(self, text: HtmlResource) -> None:
        """PROPERTY: HtmlResource is rejected before any lookup."""
        resources = RecordingResources(strings={text.id: "present"})
        with pytest.raises(UnsupportedTextError):
            resolve(resources, text)
        assert resources.calls == []

    def test_missing_resource_propagates(self, table: ResourceTable) -> None:
        with pytest.raises(ResourceNotFoundError) as exc_info:
            resolve(table, from_plural_resource(0x7F0F00FF, 2))
        assert exc_info.value.resource_id == 0x7F0F00FF

    def test_foreign_errors_propagate_unwrapped(self, recording: RecordingResources) -> None:
        with pytest.raises(KeyError):
            resolve(recording, from_string_resource(GREETING))

    def test_non_text_raises_type_error(self, recording: RecordingResources) -> None:
        with pytest.raises(TypeError, match="Expected a Text descriptor"):
            resolve(recording, 42)  # type: ignore[call-overload]


class TestResolveProperties:
    """Variant-to-call mapping holds for every generated descriptor."""

    @given(text=texts())
    def test_single_call_per_descriptor(self, text: Text) -> None:
        """PROPERTY: every resource variant except HtmlResource makes one call."""
        resources = _EchoResources()
        match text:
            case Raw(value=value):
                assert resolve(resources, text) is value
                assert resources.calls == 0
            case HtmlResource():
                with pytest.raises(UnsupportedTextError):
                    resolve(resources, text)
                assert resources.calls == 0
            case StringResource(id=rid) | StringResourceArgs(id=rid):
                args = getattr(text, "format_args", ())
                assert resolve(resources, text).text == f"s:{rid}:{len(args)}"
                assert resources.calls == 1
            case PluralResource(id=rid, quantity=q) | PluralResourceArgs(id=rid, quantity=q):
                args = getattr(text, "format_args", ())
                assert resolve(resources, text).text == f"p:{rid}:{q}:{len(args)}"
                assert resources.calls == 1
        event(f"resolved={type(text).__name__}")


class _EchoResources:
    """Answers every lookup with a string describing the call."""

    def __init__(self) -> None:
        self.calls = 0

    def get_string(self, resource_id: int, /, *format_args: object) -> str:
        self.calls += 1
        return f"s:{resource_id}:{len(format_args)}"

    def get_quantity_string(
        self, resource_id: int, quantity: int, /, *format_args: object
    ) -> str:
        self.calls += 1
        return f"p:{resource_id}:{quantity}:{len(format_args)}"
