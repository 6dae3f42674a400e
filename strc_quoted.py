"""
strcodec Quoted — Shell-Style Tokenizer & Joiner
================================================

Splits command-line-like strings into tokens, honouring double-quoted
segments with backslash escapes, and joins tokens back with the minimal
quoting needed to split them again unchanged.

    split_quoted('ab c "df  fdlk " f  ')  ->  ['ab', 'c', 'df  fdlk ', 'f']
    join_quoted(['ab', 'c', 'df  fdlk ', 'f'])  ->  'ab c "df  fdlk " f'

Also provides split_words(), a plain whitespace splitter with an
optional field limit.
"""

from typing import Iterable, List, Optional

from strc_types import (
    WHITESPACE, DEFAULT_QUOTE, DEFAULT_ESCAPE,
    MalformedInputError, InvalidArgumentError,
    require_non_negative, logger,
)


# ═══════════════════════════════════════════════════════════════
# TOKENIZER
# ═══════════════════════════════════════════════════════════════

class QuotedTokenizer:
    """
    Quoted split/join pair.

    Inside quotes the escape character introduces:
        \\\\  -> backslash
        \\n  -> newline
        \\"  -> quote
    Any other escaped character is kept together with its backslash.
    Outside quotes the backslash is an ordinary character.
    """

    def __init__(self, quote: str = DEFAULT_QUOTE, escape: str = DEFAULT_ESCAPE):
        if len(quote) != 1 or len(escape) != 1 or quote == escape:
            raise InvalidArgumentError(
                f"quote and escape must be two distinct characters, "
                f"got {quote!r} and {escape!r}"
            )
        if quote in WHITESPACE or escape in WHITESPACE:
            raise InvalidArgumentError("quote and escape must not be whitespace")
        # "n" is taken by the newline escape
        if "n" in (quote, escape):
            raise InvalidArgumentError("quote and escape must not be 'n'")
        self.quote = quote
        self.escape = escape

    # ─── Split ────────────────────────────────────────────────

    def split(self, text: str) -> List[str]:
        """
        Split `text` into tokens.

        Raises:
            MalformedInputError: unterminated quote, or an escape
                character at the end of an open quote.
        """
        quote, escape = self.quote, self.escape
        tokens: List[str] = []
        entry: List[str] = []
        # a quoted segment makes the token real even if it is empty
        has_token = False

        pos, size = 0, len(text)
        while pos < size:
            char = text[pos]

            if char in WHITESPACE:
                if has_token:
                    tokens.append("".join(entry))
                    entry.clear()
                    has_token = False
                pos += 1

            elif char == quote:
                start = pos
                pos += 1
                while pos < size and text[pos] != quote:
                    if text[pos] == escape:
                        pos += 1
                        if pos == size:
                            break
                        entry.append(self._unescape(text[pos]))
                    else:
                        entry.append(text[pos])
                    pos += 1
                if pos >= size:
                    logger.debug("Quoted split: quote opened at %d never closed", start)
                    raise MalformedInputError(
                        f"Unterminated quote starting at offset {start}"
                    )
                pos += 1
                has_token = True

            else:
                entry.append(char)
                has_token = True
                pos += 1

        if has_token:
            tokens.append("".join(entry))
        return tokens

    def _unescape(self, char: str) -> str:
        if char == self.escape:
            return self.escape
        if char == "n":
            return "\n"
        if char == self.quote:
            return self.quote
        return self.escape + char

    # ─── Join ─────────────────────────────────────────────────

    def join(self, tokens: Iterable[str]) -> str:
        """Join tokens with single spaces, quoting only where needed."""
        return " ".join(self.quote_token(token) for token in tokens)

    def quote_token(self, token: str) -> str:
        """Return `token` bare, or quoted and escaped if it needs it."""
        quote, escape = self.quote, self.escape
        if token and not any(
            char in WHITESPACE or char == quote or char == escape for char in token
        ):
            return token

        out = [quote]
        for char in token:
            if char == escape or char == quote:
                out.append(escape + char)
            elif char == "\n":
                out.append(escape + "n")
            else:
                out.append(char)
        out.append(quote)
        return "".join(out)

    # ─── Word Split ───────────────────────────────────────────

    def split_words(self, text: str, limit: Optional[int] = None) -> List[str]:
        """
        Split on runs of whitespace, without any quoting rules.

        Args:
            text: Input string. Leading whitespace is ignored.
            limit: Maximum number of fields. The last field keeps the
                rest of the text verbatim, trailing whitespace included.
                None = no limit.
        """
        if limit is not None:
            require_non_negative("limit", limit)
            if limit == 0:
                return []

        words: List[str] = []
        pos, size = 0, len(text)
        while pos < size:
            while pos < size and text[pos] in WHITESPACE:
                pos += 1
            if pos == size:
                break
            if limit is not None and len(words) == limit - 1:
                words.append(text[pos:])
                break
            end = pos
            while end < size and text[end] not in WHITESPACE:
                end += 1
            words.append(text[pos:end])
            pos = end
        return words


# ═══════════════════════════════════════════════════════════════
# CONVENIENCE FUNCTIONS
# ═══════════════════════════════════════════════════════════════

def split_quoted(text: str) -> List[str]:
    """Convenience: split with the default quote and escape characters."""
    return QuotedTokenizer().split(text)

def join_quoted(tokens: Iterable[str]) -> str:
    """Convenience: inverse of split_quoted()."""
    return QuotedTokenizer().join(tokens)

def split_words(text: str, limit: Optional[int] = None) -> List[str]:
    return QuotedTokenizer().split_words(text, limit)
