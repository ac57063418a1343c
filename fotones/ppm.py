"""Reading and writing plain-text (P3) PPM images."""

from __future__ import annotations

import math
import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

MAGIC = "P3"
MAX_TAG = "#MAX="
SCENE_RESOLUTION = 1_000_000


class PPMFormatError(ValueError):
    """Raised when a file is not a PPM image this module understands."""


@dataclass
class PPMImage:
    """Pixel components in real units, with the metadata of their PPM file.

    ``values`` holds the r, g and b components of every pixel, row by row.
    ``max_value`` is the real value of the brightest component and
    ``resolution`` the integer that stands for it in the file.
    """

    width: int
    height: int
    values: list[float] = field(default_factory=list)
    max_value: float = 1.0
    resolution: float = 255.0


def _first_float(text: str, what: str) -> float:
    tokens = text.split()
    if not tokens:
        raise PPMFormatError(f"missing {what}")
    try:
        return float(tokens[0])
    except ValueError:
        raise PPMFormatError(f"invalid {what}: {tokens[0]!r}") from None


def _leading_floats(tokens: Iterable[str]) -> list[float]:
    """Parse tokens as floats up to the first one that is not a number."""
    numbers = []
    for token in tokens:
        try:
            numbers.append(float(token))
        except ValueError:
            break
    return numbers


def read_ppm(path: str | os.PathLike) -> PPMImage:
    """Read a P3 image, scaling its components to real values by its ``#MAX=`` comment."""
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    if not lines or lines[0].rstrip() != MAGIC:
        found = lines[0].rstrip() if lines else ""
        raise PPMFormatError(f"unsupported file format, expected {MAGIC!r}, not {found!r}")

    max_value = 1.0
    for number, line in enumerate(lines[1:], start=1):
        if line.startswith("#"):
            if MAX_TAG in line:
                max_value = _first_float(line[len(MAX_TAG):], "maximum value")
            continue
        dimensions = line.split()
        if len(dimensions) < 2:
            raise PPMFormatError(f"invalid dimensions line: {line!r}")
        try:
            width, height = int(dimensions[0]), int(dimensions[1])
        except ValueError:
            raise PPMFormatError(f"invalid dimensions line: {line!r}") from None
        remaining = lines[number + 1:]
        break
    else:
        raise PPMFormatError("the file has no dimensions line")

    tokens = " ".join(remaining).split()
    if not tokens:
        raise PPMFormatError("missing colour resolution")
    resolution = _first_float(tokens[0], "colour resolution")
    if resolution == 0:
        raise PPMFormatError("the colour resolution cannot be zero")

    values = [value * max_value / resolution for value in _leading_floats(tokens[1:])]
    return PPMImage(width, height, values, max_value, resolution)


def final_file_name(path: str) -> str:
    """The part of ``path`` after its last '/'."""
    return path.rpartition("/")[2]


def output_path(path: str, function_name: str) -> str:
    """``path`` without its extension, followed by ``_<function_name>.ppm``."""
    stem = path[: path.rfind(".")] if "." in path else path
    return f"{stem}_{function_name}.ppm"


def write_ppm(path: str, image: PPMImage, function_name: str) -> str:
    """Write ``image`` next to ``path`` as ``<stem>_<function_name>.ppm``; return that path."""
    row_length = image.width * 3
    if len(image.values) != row_length * image.height:
        raise ValueError("the number of values does not match width x height")
    if image.max_value == 0:
        raise ValueError("the maximum value of an image cannot be zero")

    scale = image.resolution / image.max_value
    lines = [
        MAGIC,
        f"{MAX_TAG}{image.max_value:.0f}",
        f"# {final_file_name(path)}",
        f"{image.width} {image.height}",
        f"{image.resolution:.0f}",
    ]
    for start in range(0, len(image.values), row_length):
        row = image.values[start:start + row_length]
        lines.append(
            "".join(
                f"{r * scale:.0f} {g * scale:.0f} {b * scale:.0f}     "
                for r, g, b in zip(row[0::3], row[1::3], row[2::3])
            )
        )

    destination = output_path(path, function_name)
    Path(destination).write_text("\n".join(lines) + "\n", encoding="utf-8")
    return destination


def max_rgb_value(pixels: Iterable[Iterable[Sequence[float]]]) -> float:
    """The largest component of any pixel, and never less than zero."""
    return max((max(pixel) for row in pixels for pixel in row), default=0.0)


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def paint_scene_ppm(path: str | os.PathLike, pixels: Sequence[Sequence[Sequence[float]]]) -> None:
    """Write rows of (r, g, b) pixels as a P3 image with a resolution of one million."""
    height = len(pixels)
    width = len(pixels[0]) if height else 0
    max_value = max(0.0, max_rgb_value(pixels))

    lines = [MAGIC, f"{MAX_TAG}{max_value:g}", f"{width} {height}", str(SCENE_RESOLUTION)]
    for row in pixels:
        if max_value != 0:
            cells = (
                " ".join(str(_round_half_away(c * SCENE_RESOLUTION / max_value)) for c in pixel[:3])
                for pixel in row[:width]
            )
            lines.append("".join(cell + "  " for cell in cells))
        else:
            lines.append("0 0 0  " * len(row[:width]))

    Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")