"""Encoded polyline codec.

Implements the compact text encoding used by common mapping platforms:
coordinates are quantized to integers with ``factor``, delta encoded
against the previous point, zig-zag mapped to non-negative integers and
written as base-32 groups offset into the printable ASCII range.

Fields are always written latitude first, then longitude.
"""

import math
from typing import Iterable, Iterator, List, Tuple, Union

from .errors import PolylineDecodeError

DEFAULT_FACTOR = 1e5

_CHUNK_BITS = 5
_CHUNK_MASK = 0x1F
_CONTINUATION = 0x20
_OFFSET = 63


def _check_factor(factor: float) -> float:
    if not factor > 0:
        raise ValueError(f"factor must be positive, got {factor!r}")
    return float(factor)


def quantize(value: float, factor: float = DEFAULT_FACTOR) -> int:
    """Scale ``value`` by ``factor`` and round half away from zero."""
    scaled = value * factor
    return int(math.copysign(math.floor(abs(scaled) + 0.5), scaled))


def encode_signed(value: int) -> str:
    """Encode one signed integer as a self-terminating chunk string."""
    # zig-zag: non-negative -> even, negative -> odd
    shifted = value << 1
    if value < 0:
        shifted = ~shifted
    return encode_unsigned(shifted)


def encode_unsigned(value: int) -> str:
    chunks = []
    while value >= _CONTINUATION:
        chunks.append(chr((_CONTINUATION | (value & _CHUNK_MASK)) + _OFFSET))
        value >>= _CHUNK_BITS
    chunks.append(chr(value + _OFFSET))
    return "".join(chunks)


def encode(
    coords: Iterable[Tuple[float, float]],
    factor: float = DEFAULT_FACTOR,
) -> str:
    """Encode ``(lng, lat)`` pairs into a polyline string.

    Args:
        coords: Iterable of (x=lng, y=lat) pairs. ``Point`` objects work
            too since they unpack as (x, y).
        factor: Fixed-point scale. Must match the one given to ``decode``.

    Returns:
        The encoded string. Empty input encodes to ``""``.
    """
    factor = _check_factor(factor)

    prev_lat = 0
    prev_lng = 0
    parts: List[str] = []

    for lng, lat in coords:
        lat_q = quantize(lat, factor)
        lng_q = quantize(lng, factor)

        parts.append(encode_signed(lat_q - prev_lat))
        parts.append(encode_signed(lng_q - prev_lng))

        prev_lat = lat_q
        prev_lng = lng_q

    return "".join(parts)


def _iter_values(encoded: str) -> Iterator[Tuple[int, int]]:
    """Yield (signed value, start position) for every number in ``encoded``."""
    index = 0
    length = len(encoded)

    while index < length:
        start = index
        result = 0
        shift = 0

        while True:
            if index >= length:
                raise PolylineDecodeError("unterminated value", start)

            chunk = ord(encoded[index]) - _OFFSET
            if chunk < 0 or chunk > 0x3F:
                raise PolylineDecodeError(
                    f"invalid character {encoded[index]!r}", index
                )
            index += 1

            result |= (chunk & _CHUNK_MASK) << shift
            shift += _CHUNK_BITS
            if chunk < _CONTINUATION:
                break

        if result & 1:
            yield ~(result >> 1), start
        else:
            yield result >> 1, start


def decode_ints(encoded: Union[str, bytes]) -> List[Tuple[int, int]]:
    """Decode to the quantized ``(lat, lng)`` integer pairs.

    Raises:
        PolylineDecodeError: If the string is truncated, contains bytes
            outside the encoding alphabet, or ends on a latitude field.
    """
    if isinstance(encoded, (bytes, bytearray)):
        encoded = encoded.decode("ascii", errors="replace")

    pairs: List[Tuple[int, int]] = []
    lat = 0
    lng = 0
    pending_lat = None

    for value, position in _iter_values(encoded):
        if pending_lat is None:
            lat += value
            pending_lat = position
        else:
            lng += value
            pairs.append((lat, lng))
            pending_lat = None

    if pending_lat is not None:
        raise PolylineDecodeError("latitude without longitude", pending_lat)

    return pairs


def decode(
    encoded: Union[str, bytes],
    factor: float = DEFAULT_FACTOR,
) -> List[Tuple[float, float]]:
    """Decode a polyline string into ``(lng, lat)`` pairs.

    The wire order is (lat, lng); output is swapped back to (x=lng, y=lat).
    """
    factor = _check_factor(factor)
    return [(lng / factor, lat / factor) for lat, lng in decode_ints(encoded)]
