"""Tests for Name value object."""

import pytest

from commerce_api.domain.identity.value_objects import Name


class TestName:
    @pytest.mark.parametrize(
        ("raw", "script"),
        [("Yuna", "latin"), ("홍길동", "hangul"), ("王小明", "han"), ("Al", "latin")],
    )
    def test_parse_accepts_single_script_names(self, raw: str, script: str) -> None:
        name = Name.parse(raw).unwrap()
        assert name.value == raw
        assert name.script == script

    def test_parse_trims_surrounding_whitespace(self) -> None:
        assert Name.parse("  Yuna ").unwrap().value == "Yuna"

    def test_parse_normalizes_to_nfc(self) -> None:
        # Decomposed Hangul jamo compose into one syllable each
        decomposed = "\u1112\u1169\u11bc\u1100\u1175\u11af"
        assert Name.parse(decomposed).unwrap().value == "\ud64d\uae38"

    @pytest.mark.parametrize("raw", ["Y", "Abcdefghijk"])
    def test_parse_rejects_bad_length(self, raw: str) -> None:
        error = Name.parse(raw).unwrap_error()
        assert error.field == "name"
        assert "2-10" in error.message

    @pytest.mark.parametrize("raw", ["Yuna Kim", "Yuna1", "Yu-na", "Yuna홍", "홍Gil"])
    def test_parse_rejects_mixed_or_non_letter_content(self, raw: str) -> None:
        assert "single script" in Name.parse(raw).unwrap_error().message

    @pytest.mark.parametrize("raw", [None, "", "  "])
    def test_parse_reports_missing_value_as_required(self, raw: str | None) -> None:
        assert Name.parse(raw).unwrap_error().message == "Name is required"

    def test_masked(self) -> None:
        assert Name("Yuna").masked == "Yun*"
        assert Name("홍길동").masked == "홍길*"
