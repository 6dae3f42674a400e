"""
strcodec Base64 — Binary <-> Text Codec
=======================================

Encodes arbitrary bytes to standard Base64 text (RFC 4648 alphabet,
`=` padding) and decodes it back, with optional fixed-width line folding.

Decoding is strict: the only character tolerated outside the alphabet
and padding is the newline inserted by line folding.
"""

from typing import List, Optional

from strc_types import (
    BASE64_ENCODE_TABLE, BASE64_DECODE_TABLE, BASE64_PAD,
    B64_INVALID, B64_PADDING, B64_NEWLINE,
    ByteBuffer, EncodedText,
    InvalidEncodingError, as_ascii_bytes, require_non_negative, logger,
)


# ═══════════════════════════════════════════════════════════════
# CODEC
# ═══════════════════════════════════════════════════════════════

class Base64Codec:
    """
    Table-driven Base64 codec.

    Usage:
        codec = Base64Codec(line_width=76)
        text = codec.encode(b"payload")
        data = codec.decode(text)
    """

    def __init__(self, line_width: int = 0):
        self.line_width = require_non_negative("line_width", line_width)

    def encode(self, data: ByteBuffer, line_width: Optional[int] = None) -> str:
        """
        Encode bytes to Base64 text.

        Args:
            data: Bytes to encode. Empty input gives empty output.
            line_width: Insert a newline after every `line_width` output
                characters. 0 disables folding. None = instance default.

        Returns:
            Base64 text, padded to a multiple of 4 characters, with no
            trailing newline.
        """
        if line_width is None:
            line_width = self.line_width
        else:
            require_non_negative("line_width", line_width)

        raw = bytes(data)
        table = BASE64_ENCODE_TABLE
        out: List[str] = []

        # ── Full 3-byte groups ──
        full = len(raw) - len(raw) % 3
        for i in range(0, full, 3):
            n = (raw[i] << 16) | (raw[i + 1] << 8) | raw[i + 2]
            out.append(table[(n >> 18) & 0x3F])
            out.append(table[(n >> 12) & 0x3F])
            out.append(table[(n >> 6) & 0x3F])
            out.append(table[n & 0x3F])

        # ── Final partial group ──
        rest = len(raw) - full
        if rest == 1:
            n = raw[full] << 16
            out.append(table[(n >> 18) & 0x3F])
            out.append(table[(n >> 12) & 0x3F])
            out.append(BASE64_PAD * 2)
        elif rest == 2:
            n = (raw[full] << 16) | (raw[full + 1] << 8)
            out.append(table[(n >> 18) & 0x3F])
            out.append(table[(n >> 12) & 0x3F])
            out.append(table[(n >> 6) & 0x3F])
            out.append(BASE64_PAD)

        text = "".join(out)
        if line_width > 0:
            text = self._fold(text, line_width)
        return text

    def decode(self, text: EncodedText) -> bytes:
        """
        Decode Base64 text to bytes.

        Newlines are skipped anywhere in the input. Any other character
        outside the alphabet and `=` raises InvalidEncodingError, as does
        a length (without newlines) that is not a multiple of 4 or `=`
        anywhere but the end of the final group.
        """
        raw = as_ascii_bytes(text, InvalidEncodingError)

        # ── Translate characters, dropping folding newlines ──
        values: List[int] = []
        for offset, byte in enumerate(raw):
            value = BASE64_DECODE_TABLE[byte]
            if value == B64_NEWLINE:
                continue
            if value == B64_INVALID:
                logger.debug("Base64 decode: invalid character at offset %d", offset)
                raise InvalidEncodingError(
                    f"Invalid character {chr(byte)!r} in base64 input at offset {offset}"
                )
            values.append(value)

        if len(values) % 4 != 0:
            logger.debug("Base64 decode: %d significant characters", len(values))
            raise InvalidEncodingError(
                f"Base64 input length {len(values)} is not a multiple of 4"
            )

        # ── Decode 4-character groups ──
        out = bytearray()
        last_group = len(values) - 4
        for i in range(0, len(values), 4):
            a, b, c, d = values[i:i + 4]
            padding = self._count_padding(a, b, c, d, is_last=(i == last_group))
            if padding == 0:
                n = (a << 18) | (b << 12) | (c << 6) | d
                out.append((n >> 16) & 0xFF)
                out.append((n >> 8) & 0xFF)
                out.append(n & 0xFF)
            elif padding == 1:
                n = (a << 18) | (b << 12) | (c << 6)
                out.append((n >> 16) & 0xFF)
                out.append((n >> 8) & 0xFF)
            else:
                n = (a << 18) | (b << 12)
                out.append((n >> 16) & 0xFF)
        return bytes(out)

    # ─── Helpers ──────────────────────────────────────────────

    @staticmethod
    def _fold(text: str, line_width: int) -> str:
        """Insert a newline after every line_width characters."""
        return "\n".join(
            text[i:i + line_width] for i in range(0, len(text), line_width)
        )

    @staticmethod
    def _count_padding(a: int, b: int, c: int, d: int, is_last: bool) -> int:
        """
        Number of `=` characters closing a group (0, 1 or 2).

        Padding is only legal as `xx==` or `xxx=` in the final group.
        """
        if a == B64_PADDING or b == B64_PADDING:
            raise InvalidEncodingError("Padding in the first two positions of a group")
        if c == B64_PADDING:
            if d != B64_PADDING:
                raise InvalidEncodingError("Padding followed by data in a group")
            padding = 2
        elif d == B64_PADDING:
            padding = 1
        else:
            return 0
        if not is_last:
            logger.debug("Base64 decode: padding before the final group")
            raise InvalidEncodingError("Padding before the end of base64 input")
        return padding


# ═══════════════════════════════════════════════════════════════
# CONVENIENCE FUNCTIONS
# ═══════════════════════════════════════════════════════════════

def base64_encode(data: ByteBuffer, line_width: int = 0) -> str:
    """Convenience: Base64-encode bytes in one call."""
    return Base64Codec(line_width=line_width).encode(data)

def base64_decode(text: EncodedText) -> bytes:
    """Convenience: decode Base64 text in one call."""
    return Base64Codec().decode(text)
