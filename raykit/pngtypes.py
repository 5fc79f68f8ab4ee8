"""PNG colour, pixel and chunk types, with the errors raised around them."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import ClassVar, Union


class ColorType(enum.IntEnum):
    """PNG colour type as stored in the IHDR chunk."""

    NONE = -1
    GRAY = 0
    RGB = 2
    PALETTE = 3
    GRAY_ALPHA = 4
    RGB_ALPHA = 6
    RGBA = 6
    GA = 4


class ColorMask(enum.IntFlag):
    """Bits that make up a PNG colour type."""

    PALETTE = 1
    COLOR = 2
    RGB = 2
    ALPHA = 4


class FillerType(enum.IntEnum):
    """Where a filler byte is placed relative to the colour channels."""

    BEFORE = 0
    AFTER = 1


class RgbToGrayErrorAction(enum.IntEnum):
    """What to do when a non-gray pixel is met in an RGB to gray conversion."""

    SILENT = 1
    WARNING = 2
    ERROR = 3


class InterlaceType(enum.IntEnum):
    """PNG interlace method."""

    NONE = 0
    ADAM7 = 1


class CompressionType(enum.IntEnum):
    """PNG compression method."""

    BASE = 0
    DEFAULT = 0


class FilterType(enum.IntEnum):
    """PNG filter method."""

    BASE = 0
    INTRAPIXEL_DIFFERENCING = 64
    DEFAULT = 0


class Chunk(enum.IntFlag):
    """Flags telling which ancillary chunks an image carries."""

    gAMA = 0x0001
    sBIT = 0x0002
    cHRM = 0x0004
    PLTE = 0x0008
    tRNS = 0x0010
    bKGD = 0x0020
    hIST = 0x0040
    pHYs = 0x0080
    oFFs = 0x0100
    tIME = 0x0200
    pCAL = 0x0400
    sRGB = 0x0800
    iCCP = 0x1000
    sPLT = 0x2000
    sCAL = 0x4000
    IDAT = 0x8000


class PngError(RuntimeError):
    """A runtime error in PNG handling."""


class StdError(RuntimeError):
    """An error from the operating system, usually during I/O.

    The message is followed by ``": "`` and the description of the error number.
    """

    def __init__(self, message: str, error: int = 0) -> None:
        super().__init__(f"{message}: {os.strerror(error)}")
        self.errno = error


def _check_range(name: str, value: int, bit_depth: int) -> None:
    limit = (1 << bit_depth) - 1
    if not 0 <= value <= limit:
        raise ValueError(f"{name} must be in 0..{limit}, got {value}")


@dataclass(frozen=True)
class Color:
    """An 8-bit RGB palette entry."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            _check_range(name, getattr(self, name), 8)


@dataclass(frozen=True)
class PixelTraits:
    """Colour type, channel count and bit depth of a pixel type."""

    color_type: ColorType
    channels: int
    bit_depth: int


@dataclass(frozen=True)
class RgbPixel:
    """An RGB pixel with 8-bit components."""

    BIT_DEPTH: ClassVar[int] = 8

    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            _check_range(name, getattr(self, name), self.BIT_DEPTH)


@dataclass(frozen=True)
class Rgb16Pixel(RgbPixel):
    """An RGB pixel with 16-bit components."""

    BIT_DEPTH: ClassVar[int] = 16


@dataclass(frozen=True)
class IndexPixel:
    """An 8-bit index into a palette."""

    index: int = 0

    def __post_init__(self) -> None:
        _check_range("index", self.index, 8)

    def __int__(self) -> int:
        return self.index

    def __index__(self) -> int:
        return self.index


@dataclass(frozen=True)
class PackedIndexPixel:
    """A palette index packed into 1, 2 or 4 bits."""

    SUPPORTED_BITS: ClassVar[tuple[int, ...]] = (1, 2, 4)

    bits: int
    value: int = 0

    def __post_init__(self) -> None:
        if self.bits not in self.SUPPORTED_BITS:
            raise ValueError(f"packed index pixels take 1, 2 or 4 bits, got {self.bits}")
        _check_range("value", self.value, self.bits)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value


_TRAITS: dict[type, PixelTraits] = {
    Rgb16Pixel: PixelTraits(ColorType.RGB, 3, 16),
    RgbPixel: PixelTraits(ColorType.RGB, 3, 8),
    IndexPixel: PixelTraits(ColorType.PALETTE, 1, 8),
}

PixelLike = Union[type, RgbPixel, IndexPixel, PackedIndexPixel]


def pixel_traits(pixel_type: PixelLike) -> PixelTraits:
    """Return the traits of a pixel class or pixel instance.

    A packed index pixel must be given as an instance, since its bit depth
    belongs to the value rather than the class.
    """
    if isinstance(pixel_type, PackedIndexPixel):
        return PixelTraits(ColorType.PALETTE, 1, pixel_type.bits)
    cls = pixel_type if isinstance(pixel_type, type) else type(pixel_type)
    try:
        return _TRAITS[cls]
    except KeyError:
        raise TypeError(f"no pixel traits for {cls.__name__}") from None


def alpha_filler(bit_depth: int) -> int:
    """Return the alpha value meaning full opacity for a component bit depth."""
    if bit_depth not in (8, 16):
        raise ValueError(f"alpha components are 8 or 16 bits, got {bit_depth}")
    return (1 << bit_depth) - 1