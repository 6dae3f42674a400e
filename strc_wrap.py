"""
strcodec Wrap — Greedy Paragraph-Aware Word Wrapper
===================================================

Breaks free text into lines of bounded width by turning selected
whitespace characters into newlines. Nothing else is inserted or removed:
the output always has the same length as the input.

Newlines already present in the text are kept. A single newline is a
forced line break; a blank line (two consecutive newlines) separates
paragraphs and survives verbatim. Words longer than the width are never
split; they get a line of their own.
"""

from typing import List

from strc_types import (
    WHITESPACE, DEFAULT_WRAP_WIDTH,
    require_positive, logger,
)


# ═══════════════════════════════════════════════════════════════
# WRAPPER
# ═══════════════════════════════════════════════════════════════

class WordWrapper:
    """
    Greedy word wrapper.

    Usage:
        wrapper = WordWrapper(width=60)
        text = wrapper.wrap(long_text)

    Each line is filled from a window of `width` characters. The last
    whitespace inside the window becomes the break, so a line that is
    followed by a break holds at most width-1 characters before any
    trailing whitespace. The first line of a paragraph (after a blank
    line) starts one column in and holds at most width-2.

    Whitespace that opens a line or directly precedes an existing newline
    is never turned into a break, so no blank line is ever created.
    Re-wrapping wrapped text at the same width is a no-op.
    """

    def __init__(self, width: int = DEFAULT_WRAP_WIDTH):
        self.width = require_positive("width", width)

    def wrap(self, text: str) -> str:
        """Wrap `text` to the configured width."""
        width = self.width
        size = len(text)
        out: List[str] = list(text)

        pos = 0
        count = 0
        while pos < size:
            last_space = -1

            # ── Scan one window, restarting it at embedded newlines ──
            while count < width:
                char = text[pos]
                if char == "\n":
                    # blank line: the paragraph's first line starts one column in
                    count = 0 if pos > 0 and text[pos - 1] == "\n" else -1
                if char in WHITESPACE and self._can_break(out, pos):
                    last_space = pos
                pos += 1
                if pos == size:
                    return "".join(out)
                count += 1

            if last_space >= 0:
                # break at the last whitespace inside the window
                brk = last_space
            else:
                # ── Overlong word: keep it whole, break after it ──
                while pos < size and not (
                    text[pos] in WHITESPACE and self._can_break(out, pos)
                ):
                    pos += 1
                if pos == size:
                    break
                logger.debug("Word wrap: word longer than %d columns ends at %d", width, pos)
                brk = pos

            # whitespace right before a newline: that newline is the break
            if text[brk] != "\n" and brk + 1 < size and text[brk + 1] == "\n":
                brk += 1
            out[brk] = "\n"
            pos = brk + 1
            count = 1 if self._is_blank_line_end(text, brk) else 0

        return "".join(out)

    # ─── Helpers ──────────────────────────────────────────────

    @staticmethod
    def _can_break(out: List[str], pos: int) -> bool:
        # whitespace opening a line is indentation, never a break
        return out[pos] == "\n" or (pos > 0 and out[pos - 1] != "\n")

    @staticmethod
    def _is_blank_line_end(text: str, pos: int) -> bool:
        return text[pos] == "\n" and pos > 0 and text[pos - 1] == "\n"


# ═══════════════════════════════════════════════════════════════
# CONVENIENCE FUNCTIONS
# ═══════════════════════════════════════════════════════════════

def word_wrap(text: str, width: int = DEFAULT_WRAP_WIDTH) -> str:
    """Convenience: wrap text to `width` columns in one call."""
    return WordWrapper(width=width).wrap(text)
