"""
strcodec — String & Binary Transformation Utilities
===================================================

Base64 and hex codecs, a C array emitter, a paragraph-aware word
wrapper and a shell-style quoted tokenizer. Pure functions, no I/O.
"""

from strc_types import (
    StrCodecError, InvalidEncodingError, InvalidHexError,
    MalformedInputError, InvalidArgumentError,
)
from strc_base64 import Base64Codec, base64_encode, base64_decode
from strc_hex import HexCodec, HexSourceEmitter, hex_encode, hex_decode, hex_emit_source
from strc_wrap import WordWrapper, word_wrap
from strc_quoted import QuotedTokenizer, split_quoted, join_quoted, split_words
from strc_logging import configure_logging

__version__ = "1.0.0"
__all__ = [
    'Base64Codec', 'HexCodec', 'HexSourceEmitter', 'WordWrapper', 'QuotedTokenizer',
    'base64_encode', 'base64_decode', 'hex_encode', 'hex_decode', 'hex_emit_source',
    'word_wrap', 'split_quoted', 'join_quoted', 'split_words', 'configure_logging',
    'StrCodecError', 'InvalidEncodingError', 'InvalidHexError',
    'MalformedInputError', 'InvalidArgumentError',
]
