#!/usr/bin/env python3
"""
Tile ASCII Art - Character Matching
===================================
Keeps a working set of characters ordered by codepoint, each with the raw
brightness of its glyph and a score rescaled to [0, 1] across the set, and
answers "which character is closest to this brightness" queries.

Normalization is recomputed in full after every add/remove. Character sets
are small and mutations rare next to the per-tile queries of a render.
"""

import bisect
import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from tile_ascii.constants import DEGENERATE_NORMALIZED
from tile_ascii.exceptions import EmptyIndex
from tile_ascii.glyphs import GlyphProvider, GlyphRenderer, bitmap_density

logger = logging.getLogger(__name__)


class GlyphBrightnessIndex:
    """Mutable character set with brightness lookup."""

    def __init__(self, initial_chars: Iterable[str] = (),
                 glyph_provider: Optional[GlyphProvider] = None):
        """
        Args:
            initial_chars: Starting characters; duplicates are collapsed
            glyph_provider: Callable returning a boolean bitmap for a
                character. Defaults to a Pillow GlyphRenderer.
        """
        self._glyph_provider = glyph_provider or GlyphRenderer()
        self._chars: List[str] = []
        self._raw: Dict[str, float] = {}
        self._normalized: Dict[str, float] = {}
        # Raw brightness survives removal so re-adding skips rendering
        self._raw_cache: Dict[str, float] = {}
        self._min_raw: Optional[float] = None
        self._max_raw: Optional[float] = None

        for char in sorted(set(initial_chars)):
            self._check_char(char)
            brightness = self._char_brightness(char)
            self._chars.append(char)
            self._raw[char] = brightness
            self._update_min_max(brightness)
        self._normalize()

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add(self, char: str) -> None:
        """Insert a character in codepoint order. No-op if present."""
        self._check_char(char)
        if char in self._raw:
            return
        bisect.insort(self._chars, char)
        brightness = self._char_brightness(char)
        self._raw[char] = brightness
        self._update_min_max(brightness)
        self._normalize()
        logger.debug("Added %r (raw %.4f)", char, brightness)

    def remove(self, char: str) -> None:
        """Remove a character. No-op if absent."""
        if char not in self._raw:
            return
        del self._chars[bisect.bisect_left(self._chars, char)]
        brightness = self._raw.pop(char)

        if not self._raw:
            self._min_raw = None
            self._max_raw = None
        elif brightness == self._min_raw or brightness == self._max_raw:
            self._rescan_min_max()
        self._normalize()
        logger.debug("Removed %r", char)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def nearest(self, target: float) -> str:
        """
        Find the character whose normalized brightness is closest to target.

        Ties go to the smaller codepoint.

        Raises:
            EmptyIndex: If the set holds no characters
        """
        if not self._chars:
            raise EmptyIndex("Character set is empty")

        best_char = self._chars[0]
        best_diff = abs(self._normalized[best_char] - target)
        # Ascending iteration means a strict < keeps the smaller codepoint on ties
        for char in self._chars[1:]:
            diff = abs(self._normalized[char] - target)
            if diff < best_diff:
                best_char, best_diff = char, diff
        return best_char

    def ordered_characters(self) -> Tuple[str, ...]:
        """Current characters in ascending codepoint order."""
        return tuple(self._chars)

    def raw_brightness(self, char: str) -> float:
        return self._raw[char]

    def normalized_brightness(self, char: str) -> float:
        return self._normalized[char]

    @property
    def min_raw(self) -> Optional[float]:
        return self._min_raw

    @property
    def max_raw(self) -> Optional[float]:
        return self._max_raw

    def __len__(self) -> int:
        return len(self._chars)

    def __contains__(self, char) -> bool:
        return char in self._raw

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._chars))

    def __repr__(self) -> str:
        return f"GlyphBrightnessIndex({''.join(self._chars)!r})"

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    @staticmethod
    def _check_char(char) -> None:
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")

    def _char_brightness(self, char: str) -> float:
        brightness = self._raw_cache.get(char)
        if brightness is None:
            brightness = bitmap_density(self._glyph_provider(char))
            self._raw_cache[char] = brightness
        return brightness

    def _update_min_max(self, brightness: float) -> None:
        if self._min_raw is None or brightness < self._min_raw:
            self._min_raw = brightness
        if self._max_raw is None or brightness > self._max_raw:
            self._max_raw = brightness

    def _rescan_min_max(self) -> None:
        values = self._raw.values()
        self._min_raw = min(values)
        self._max_raw = max(values)

    def _normalize(self) -> None:
        self._normalized = {}
        if not self._raw:
            return
        span = self._max_raw - self._min_raw
        for char, brightness in self._raw.items():
            if span == 0:
                self._normalized[char] = DEGENERATE_NORMALIZED
            else:
                self._normalized[char] = (brightness - self._min_raw) / span
