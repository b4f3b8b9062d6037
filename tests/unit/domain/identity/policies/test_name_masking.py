"""Tests for display-name masking."""

import pytest

from commerce_api.domain.identity.policies import grapheme_clusters, mask_name


class TestMaskName:
    @pytest.mark.parametrize(
        ("name", "masked"),
        [
            ("홍길동", "홍길*"),
            ("Yuna", "Yun*"),
            ("AB", "A*"),
            ("A", "*"),
            ("", ""),
        ],
    )
    def test_masks_last_character(self, name: str, masked: str) -> None:
        assert mask_name(name) == masked

    def test_ten_character_name_masks_only_the_last(self) -> None:
        assert mask_name("Abcdefghij") == "Abcdefghi*"
        assert mask_name("가나다라마바사아자차") == "가나다라마바사아자*"

    def test_combining_mark_is_masked_with_its_base(self) -> None:
        # n + dot below composes to U+1E47, the acute has nowhere to go and extends it
        name = "Ren\u0323\u0301"
        assert mask_name(name) == "Re*"

    def test_zero_width_joiner_sequence_is_one_character(self) -> None:
        family = "\U0001f468\u200d\U0001f469\u200d\U0001f467"
        assert grapheme_clusters(f"A{family}") == ["A", family]
        assert mask_name(f"A{family}") == "A*"

    def test_skin_tone_modifier_stays_with_its_emoji(self) -> None:
        wave = "\U0001f44b\U0001f3fd"
        assert grapheme_clusters(f"Hi{wave}") == ["H", "i", wave]
