"""Base64 decoding into a buffer of fixed length."""

from __future__ import annotations

from typing import Dict, Optional, Union

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_TABLE: Dict[str, int] = {char: index for index, char in enumerate(_ALPHABET)}


def _as_text(encoded: Union[str, bytes]) -> str:
    if isinstance(encoded, (bytes, bytearray)):
        return encoded.decode("latin-1")
    return encoded


def decoded_length(encoded: Union[str, bytes]) -> int:
    """Return the number of bytes a padded base64 string decodes to."""
    text = _as_text(encoded)
    if len(text) < 2:
        raise ValueError("Base64 string is too short")
    blocks = (len(text) // 4) * 3
    if text[-2] == "=":
        return blocks - 2
    if text[-1] == "=":
        return blocks - 1
    return blocks


def decode_base64(encoded: Union[str, bytes], length: Optional[int] = None) -> bytes:
    """Decode ``encoded`` into exactly ``length`` bytes.

    Decoding stops at the first character outside the base64 alphabet,
    padding included. Bytes not reached are left as zero. When ``length``
    is omitted it is taken from :func:`decoded_length`. Raises ValueError
    if the data decodes to more than ``length`` bytes.
    """
    text = _as_text(encoded)
    if length is None:
        length = decoded_length(text)
    if length < 0:
        raise ValueError("Length must not be negative")

    out = bytearray(length)
    buffer = 0
    bits = -8
    position = 0
    for char in text:
        value = _TABLE.get(char)
        if value is None:
            break
        buffer = ((buffer << 6) | value) & 0xFFFFFF
        bits += 6
        if bits >= 0:
            if position >= length:
                raise ValueError("Decoded data exceeds the requested length")
            out[position] = (buffer >> bits) & 0xFF
            position += 1
            bits -= 8
    return bytes(out)