"""
strcodec Types & Constants
==========================

Alphabets, lookup tables, defaults and error classes shared by every
strcodec component. This module has ZERO external dependencies beyond
the Python standard library.

Components:
  - Base64Codec       (strc_base64)
  - HexCodec          (strc_hex)
  - HexSourceEmitter  (strc_hex)
  - WordWrapper       (strc_wrap)
  - QuotedTokenizer   (strc_quoted)
"""

import logging
from typing import List, Union

# Shared application logger. Handlers are attached by the host application
# (see strc_logging.configure_logging), never on import.
LOGGER_NAME = "strcodec"
logger = logging.getLogger(LOGGER_NAME)

# Anything the codecs accept as a byte buffer
ByteBuffer = Union[bytes, bytearray, memoryview]

# Anything the decoders accept as encoded text
EncodedText = Union[str, bytes, bytearray, memoryview]


# ═══════════════════════════════════════════════════════════════
# BASE64 ALPHABET (RFC 4648, standard alphabet only)
# ═══════════════════════════════════════════════════════════════

BASE64_ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789+/"
)
BASE64_PAD = "="

# Decode table sentinels (valid entries are 0..63)
B64_INVALID = -1
B64_PADDING = -2
B64_NEWLINE = -3


def _build_base64_decode_table() -> List[int]:
    table = [B64_INVALID] * 256
    for value, char in enumerate(BASE64_ALPHABET):
        table[ord(char)] = value
    table[ord(BASE64_PAD)] = B64_PADDING
    table[ord("\n")] = B64_NEWLINE
    return table


# value -> character (64 entries)
BASE64_ENCODE_TABLE = tuple(BASE64_ALPHABET)

# byte -> value or sentinel (256 entries)
BASE64_DECODE_TABLE = tuple(_build_base64_decode_table())


# ═══════════════════════════════════════════════════════════════
# HEX DIGITS
# ═══════════════════════════════════════════════════════════════

HEX_DIGITS = "0123456789ABCDEF"
HEX_INVALID = -1


def _build_hex_decode_table() -> List[int]:
    table = [HEX_INVALID] * 256
    for value, char in enumerate(HEX_DIGITS):
        table[ord(char)] = value
        table[ord(char.lower())] = value
    return table


# nibble -> digit (16 entries)
HEX_ENCODE_TABLE = tuple(HEX_DIGITS)

# byte -> nibble or HEX_INVALID (256 entries)
HEX_DECODE_TABLE = tuple(_build_hex_decode_table())


# ═══════════════════════════════════════════════════════════════
# TEXT CONSTANTS & DEFAULTS
# ═══════════════════════════════════════════════════════════════

# Characters treated as word separators by the wrapper and word splitter
WHITESPACE = frozenset(" \t\n\r\f\v")

DEFAULT_WRAP_WIDTH = 80

DEFAULT_VALUES_PER_LINE = 8
DEFAULT_ELEMENT_TYPE = "uint8_t"

DEFAULT_QUOTE = '"'
DEFAULT_ESCAPE = "\\"


# ═══════════════════════════════════════════════════════════════
# ERROR CLASSES
# ═══════════════════════════════════════════════════════════════

class StrCodecError(ValueError):
    """Base error for all strcodec operations."""
    pass

class InvalidEncodingError(StrCodecError):
    """Malformed Base64: bad character, bad padding or bad length."""
    pass

class InvalidHexError(StrCodecError):
    """Odd-length or non-hex-digit input to the hex decoder."""
    pass

class MalformedInputError(StrCodecError):
    """Unterminated quote or dangling escape in quoted text."""
    pass

class InvalidArgumentError(StrCodecError):
    """A width, limit or identifier argument is out of range."""
    pass


# ═══════════════════════════════════════════════════════════════
# UTILITY FUNCTIONS
# ═══════════════════════════════════════════════════════════════

def as_ascii_bytes(text: EncodedText, error: type) -> bytes:
    """
    Normalize decoder input to bytes.

    str input must be pure ASCII; anything else raises `error` (the
    caller's error class) instead of UnicodeEncodeError.
    """
    if isinstance(text, str):
        try:
            return text.encode("ascii")
        except UnicodeEncodeError as e:
            logger.debug("Rejecting non-ASCII input at offset %d", e.start)
            raise error(
                f"Non-ASCII character {text[e.start]!r} at offset {e.start}"
            ) from None
    return bytes(text)


def require_positive(name: str, value: int) -> int:
    """Validate a strictly positive integer argument."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be positive, got {value}")
    return value


def require_non_negative(name: str, value: int) -> int:
    """Validate a non-negative integer argument (0 allowed)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidArgumentError(f"{name} must not be negative, got {value}")
    return value
