"""Tests for error rendering."""

from __future__ import annotations

from resultkit.config import ResultSettings, set_settings
from resultkit.render import render_error


class TestRenderError:
    def test_string_is_quoted(self) -> None:
        assert render_error("boom") == '"boom"'

    def test_dict_renders_as_json(self) -> None:
        assert render_error({"code": 404, "message": "Not found"}) == '{"code": 404, "message": "Not found"}'

    def test_number_and_none(self) -> None:
        assert render_error(500) == "500"
        assert render_error(None) == "null"

    def test_non_ascii_kept_readable(self) -> None:
        assert render_error("café") == '"café"'

    def test_exception_falls_back_to_repr(self) -> None:
        assert render_error(ValueError("bad input")) == "ValueError('bad input')"

    def test_circular_structure_falls_back_to_repr(self) -> None:
        data: list[object] = []
        data.append(data)
        assert render_error(data) == "[[...]]"

    def test_truncates_to_configured_length(self) -> None:
        set_settings(ResultSettings(render_max_length=5))
        assert render_error("abcdefgh") == '"abcd...'

    def test_short_text_not_truncated(self) -> None:
        set_settings(ResultSettings(render_max_length=50))
        assert render_error("abc") == '"abc"'

    def test_deeply_nested_structure_uses_limited_repr(self) -> None:
        nested: list[object] = []
        for _ in range(100_000):
            nested = [nested]
        text = render_error(nested)
        assert text.startswith("[[")
        assert len(text) < 100
