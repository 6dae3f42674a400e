"""
strcodec Hex — Hex Dump Codec & Source Emitter
==============================================

HexCodec turns bytes into uppercase hex text ("8DE285D4") and parses it
back. HexSourceEmitter renders a byte buffer as a C array declaration
for code generation; its output is source text, so every space and line
break is part of the contract.
"""

from typing import List

from strc_types import (
    HEX_ENCODE_TABLE, HEX_DECODE_TABLE, HEX_INVALID,
    DEFAULT_VALUES_PER_LINE, DEFAULT_ELEMENT_TYPE,
    ByteBuffer, EncodedText,
    InvalidHexError, InvalidArgumentError,
    as_ascii_bytes, require_positive, logger,
)


# ═══════════════════════════════════════════════════════════════
# HEX CODEC
# ═══════════════════════════════════════════════════════════════

class HexCodec:
    """
    Table-driven hex dump codec.

    Usage:
        codec = HexCodec()
        codec.encode(b"\\x8d\\xe2")  # "8DE2"
        codec.decode("8de2")       # b"\\x8d\\xe2"
    """

    def encode(self, data: ByteBuffer) -> str:
        """Render each byte as two uppercase hex digits, no separator."""
        table = HEX_ENCODE_TABLE
        out: List[str] = []
        for byte in bytes(data):
            out.append(table[byte >> 4])
            out.append(table[byte & 0x0F])
        return "".join(out)

    def decode(self, text: EncodedText) -> bytes:
        """
        Parse hex text back into bytes. Case-insensitive.

        Raises:
            InvalidHexError: odd length or any non-hex character.
        """
        raw = as_ascii_bytes(text, InvalidHexError)
        if len(raw) % 2 != 0:
            logger.debug("Hex decode: odd input length %d", len(raw))
            raise InvalidHexError(f"Hex input has odd length {len(raw)}")

        out = bytearray(len(raw) // 2)
        for i in range(0, len(raw), 2):
            high = HEX_DECODE_TABLE[raw[i]]
            low = HEX_DECODE_TABLE[raw[i + 1]]
            if high == HEX_INVALID or low == HEX_INVALID:
                offset = i if high == HEX_INVALID else i + 1
                logger.debug("Hex decode: invalid digit at offset %d", offset)
                raise InvalidHexError(
                    f"Invalid hex digit {chr(raw[offset])!r} at offset {offset}"
                )
            out[i // 2] = (high << 4) | low
        return bytes(out)


# ═══════════════════════════════════════════════════════════════
# SOURCE EMITTER
# ═══════════════════════════════════════════════════════════════

class HexSourceEmitter:
    """
    Render bytes as a fixed-size C array literal.

    Output for b"\\x8d\\xe2" named "abc":

        const uint8_t abc[2] = {
        0x8D,0xE2
        };

    Values are comma-separated without spaces, `values_per_line` per
    line; a full line keeps its trailing comma. The block ends with a
    newline after the closing `};`.
    """

    def __init__(self,
                 values_per_line: int = DEFAULT_VALUES_PER_LINE,
                 element_type: str = DEFAULT_ELEMENT_TYPE):
        self.values_per_line = require_positive("values_per_line", values_per_line)
        self.element_type = element_type

    def emit(self, data: ByteBuffer, identifier: str) -> str:
        """
        Emit the declaration.

        Args:
            data: Bytes for the initializer.
            identifier: Array name; must be an ASCII identifier.

        Returns:
            Source text terminated by "};\\n".
        """
        if (not isinstance(identifier, str) or not identifier.isascii()
                or not identifier.isidentifier()):
            raise InvalidArgumentError(f"Invalid array identifier: {identifier!r}")

        raw = bytes(data)
        table = HEX_ENCODE_TABLE
        out: List[str] = [
            f"const {self.element_type} {identifier}[{len(raw)}] = {{\n"
        ]

        column = 0
        for i, byte in enumerate(raw):
            out.append("0x" + table[byte >> 4] + table[byte & 0x0F])
            if i == len(raw) - 1:
                break
            out.append(",")
            column += 1
            if column == self.values_per_line:
                column = 0
                out.append("\n")

        out.append("\n};\n")
        return "".join(out)


# ═══════════════════════════════════════════════════════════════
# CONVENIENCE FUNCTIONS
# ═══════════════════════════════════════════════════════════════

def hex_encode(data: ByteBuffer) -> str:
    return HexCodec().encode(data)

def hex_decode(text: EncodedText) -> bytes:
    return HexCodec().decode(text)

def hex_emit_source(data: ByteBuffer, identifier: str) -> str:
    """Convenience: C array declaration with 8 values per line."""
    return HexSourceEmitter().emit(data, identifier)
