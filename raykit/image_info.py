"""Header information describing a PNG image."""

from __future__ import annotations

from dataclasses import dataclass, field

from raykit.pngtypes import (
    Color,
    ColorType,
    CompressionType,
    FilterType,
    InterlaceType,
    PixelLike,
    pixel_traits,
)


@dataclass
class ImageInfo:
    """Size, colour layout, palette and transparency of a PNG image."""

    width: int = 0
    height: int = 0
    bit_depth: int = 0
    color_type: ColorType = ColorType.NONE
    interlace_type: InterlaceType = InterlaceType.NONE
    compression_type: CompressionType = CompressionType.DEFAULT
    filter_type: FilterType = FilterType.DEFAULT
    palette: list[Color] = field(default_factory=list)
    trns: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFFFFFFFF:
                raise ValueError(f"{name} must fit in 32 unsigned bits, got {value}")

    def drop_palette(self) -> None:
        """Remove all entries from the palette."""
        self.palette.clear()


def make_image_info(pixel_type: PixelLike) -> ImageInfo:
    """Return an ImageInfo whose colour type and bit depth suit the pixel type."""
    traits = pixel_traits(pixel_type)
    return ImageInfo(color_type=traits.color_type, bit_depth=traits.bit_depth)