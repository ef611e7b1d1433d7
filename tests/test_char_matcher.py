"""Tests for the character brightness index."""

import pytest

from tile_ascii.char_matcher import GlyphBrightnessIndex
from tile_ascii.constants import DEGENERATE_NORMALIZED
from tile_ascii.exceptions import EmptyIndex
from tests.conftest import FakeGlyphs


def test_construction_dedupes_and_orders(make_index):
    index = make_index('b0a0b1')
    assert index.ordered_characters() == ('0', '1', 'a', 'b')
    assert len(index) == 4


def test_raw_brightness_is_background_fraction(make_index):
    index = make_index('.@a')
    assert index.raw_brightness('.') == pytest.approx(0.9)
    assert index.raw_brightness('a') == pytest.approx(0.4)
    assert index.raw_brightness('@') == 0.0


def test_min_maps_to_zero_and_max_to_one(make_index):
    index = make_index('01ab#')
    assert index.normalized_brightness('#') == 0.0
    assert index.normalized_brightness('b') == 1.0
    for char in '01a':
        assert 0.0 < index.normalized_brightness(char) < 1.0


def test_normalization_is_linear(make_index):
    index = make_index(' @ab')
    assert index.normalized_brightness('a') == pytest.approx(0.4)
    assert index.normalized_brightness('b') == pytest.approx(0.6)


def test_add_inserts_in_order_and_renormalizes(make_index):
    index = make_index('0a')
    index.add('@')
    index.add('1')
    assert index.ordered_characters() == ('0', '1', '@', 'a')
    assert index.normalized_brightness('@') == 0.0
    assert index.normalized_brightness('1') == 1.0
    assert index.normalized_brightness('a') == pytest.approx(0.4 / 0.5)


def test_add_is_idempotent(make_index, fake_glyphs):
    index = make_index('0a')
    calls = len(fake_glyphs.calls)
    index.add('a')
    assert index.ordered_characters() == ('0', 'a')
    assert len(fake_glyphs.calls) == calls


def test_remove_is_idempotent(make_index):
    index = make_index('0a')
    index.remove('z')
    assert index.ordered_characters() == ('0', 'a')


def test_remove_extreme_rescans_min_max(make_index):
    index = make_index(' 01@')
    index.remove('@')
    assert index.min_raw == pytest.approx(0.3)
    assert index.normalized_brightness('0') == 0.0
    index.remove(' ')
    assert index.max_raw == pytest.approx(0.5)
    assert index.normalized_brightness('1') == 1.0


def test_add_then_remove_round_trip(make_index):
    index = make_index('01ab')
    before = {c: index.normalized_brightness(c) for c in index}
    for extra in ('@', ' ', 'm'):
        index.add(extra)
        index.remove(extra)
        assert index.ordered_characters() == ('0', '1', 'a', 'b')
        assert {c: index.normalized_brightness(c) for c in index} == before


def test_readding_uses_cached_brightness(make_index, fake_glyphs):
    index = make_index('01')
    index.remove('1')
    index.add('1')
    assert fake_glyphs.calls.count('1') == 1


def test_nearest_picks_closest(make_index):
    index = make_index(' a@')
    assert index.nearest(0.0) == '@'
    assert index.nearest(0.35) == 'a'
    assert index.nearest(0.9) == ' '


def test_nearest_tie_goes_to_smaller_codepoint(make_index):
    index = make_index(' @ab')
    assert index.normalized_brightness('a') == pytest.approx(0.4)
    assert index.normalized_brightness('b') == pytest.approx(0.6)
    assert index.nearest(0.5) == 'a'


def test_nearest_tie_between_two_characters(make_index):
    index = make_index('ba')
    assert index.nearest(0.5) == 'a'


def test_nearest_is_deterministic(make_index):
    index = make_index('01ab#@')
    results = {index.nearest(0.42) for _ in range(20)}
    assert len(results) == 1


def test_single_character_uses_fixed_score(make_index):
    index = make_index('a')
    assert index.normalized_brightness('a') == DEGENERATE_NORMALIZED
    assert index.nearest(0.0) == 'a'
    assert index.nearest(1.0) == 'a'


def test_equal_brightness_characters_do_not_produce_nan():
    index = GlyphBrightnessIndex('xyz', glyph_provider=FakeGlyphs({}))
    for char in 'xyz':
        assert index.normalized_brightness(char) == DEGENERATE_NORMALIZED
    assert index.nearest(0.9) == 'x'


def test_removing_last_character_empties_index(make_index):
    index = make_index('a')
    index.remove('a')
    assert len(index) == 0
    assert index.min_raw is None and index.max_raw is None
    with pytest.raises(EmptyIndex):
        index.nearest(0.5)


def test_empty_index_can_be_refilled(make_index):
    index = make_index('')
    with pytest.raises(EmptyIndex):
        index.nearest(0.1)
    index.add('0')
    index.add('@')
    assert index.nearest(0.1) == '@'


def test_rejects_multi_character_strings(make_index):
    index = make_index('a')
    with pytest.raises(ValueError):
        index.add('ab')
    with pytest.raises(ValueError):
        make_index(['ab'])


def test_contains_and_iter(make_index):
    index = make_index('ba')
    assert 'a' in index
    assert 'z' not in index
    assert list(index) == ['a', 'b']
