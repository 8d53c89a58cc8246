"""Converting accumulated colours to 8-bit pixels and writing images."""

from __future__ import annotations

import math
import struct
import zlib
from os import PathLike
from typing import TextIO, Union

from raytracer.vec3 import Vec3, clamp

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
_COMPRESSION_LEVEL = 8


def to_rgb8(pixel: Vec3, samples: int) -> tuple[int, int, int]:
    """Average *pixel* over *samples*, gamma-correct it and scale to 0..255."""
    corrected = (pixel / float(samples)).sqrt()
    r, g, b = (int(256 * clamp(c, 0.0, 0.999)) for c in corrected)
    return r, g, b


def format_color(pixel: Vec3, samples: int) -> str:
    """The pixel as a plain-PPM text line."""
    r, g, b = to_rgb8(pixel, samples)
    return f"{r} {g} {b}\n"


def write_color(out: TextIO, pixel: Vec3, samples: int) -> None:
    """Write the pixel as a plain-PPM text line to *out*."""
    out.write(format_color(pixel, samples))


def _paeth(a: int, b: int, c: int) -> int:
    p = a + b - c
    pa, pb, pc = abs(p - a), abs(p - b), abs(p - c)
    if pa <= pb and pa <= pc:
        return a
    if pb <= pc:
        return b
    return c


def _filter_row(kind: int, row: bytes, prior: bytes, bpp: int) -> bytes:
    left = bytes(bpp) + row[:-bpp]
    upleft = bytes(bpp) + prior[:-bpp]
    quads = zip(row, left, prior, upleft)
    if kind == 0:
        return bytes(row)
    if kind == 1:
        return bytes((x - a) & 0xFF for x, a, _, _ in quads)
    if kind == 2:
        return bytes((x - b) & 0xFF for x, _, b, _ in quads)
    if kind == 3:
        return bytes((x - ((a + b) >> 1)) & 0xFF for x, a, b, _ in quads)
    return bytes((x - _paeth(a, b, c)) & 0xFF for x, a, b, c in quads)


def _cost(line: bytes) -> int:
    """Sum of the bytes read as signed values; smaller compresses better."""
    return sum(256 - v if v > 127 else v for v in line)


def _chunk(tag: bytes, payload: bytes) -> bytes:
    crc = zlib.crc32(tag + payload) & 0xFFFFFFFF
    return struct.pack(">I", len(payload)) + tag + payload + struct.pack(">I", crc)


def encode_png(width: int, height: int, data: bytes) -> bytes:
    """Encode tightly packed 8-bit RGB rows (top to bottom) as a PNG file."""
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    stride = width * 3
    data = bytes(data)
    if len(data) != stride * height:
        raise ValueError(
            f"expected {stride * height} bytes of RGB data, got {len(data)}"
        )

    filtered = bytearray()
    prior = bytes(stride)
    for start in range(0, len(data), stride):
        row = data[start:start + stride]
        candidates = [_filter_row(kind, row, prior, 3) for kind in range(5)]
        best = min(range(5), key=lambda k: _cost(candidates[k]))
        filtered.append(best)
        filtered += candidates[best]
        prior = row

    header = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    return b"".join(
        (
            PNG_SIGNATURE,
            _chunk(b"IHDR", header),
            _chunk(b"IDAT", zlib.compress(bytes(filtered), _COMPRESSION_LEVEL)),
            _chunk(b"IEND", b""),
        )
    )


def save_png(
    path: Union[str, "PathLike[str]"], width: int, height: int, data: bytes
) -> None:
    """Write RGB data to *path* as a PNG file."""
    encoded = encode_png(width, height, data)
    with open(path, "wb") as fh:
        fh.write(encoded)


__all__ = [
    "PNG_SIGNATURE",
    "to_rgb8",
    "format_color",
    "write_color",
    "encode_png",
    "save_png",
]

_ = math  # kept for callers that expect math-based helpers alongside