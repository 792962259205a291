"""RGBA images, sub-images and a named image registry."""

from __future__ import annotations

from pathlib import Path

from PIL import Image as _PILImage
from PIL import ImageOps as _PILImageOps

_CHANNELS = 4


class Image:
    """An image held as RGBA bytes, four per pixel, row by row."""

    def __init__(self, width: int = 0, height: int = 0, data: bytes | None = None) -> None:
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        self.width = width
        self.height = height
        size = _CHANNELS * width * height
        if data is None:
            self.pixel_data = bytearray(size)
        else:
            if len(data) != size:
                raise ValueError(f"expected {size} bytes of pixel data, got {len(data)}")
            self.pixel_data = bytearray(data)

    @property
    def num_pixels(self) -> int:
        return self.width * self.height

    @classmethod
    def from_file(cls, width: int, height: int, path: str | Path) -> Image:
        """Load ``width`` x ``height`` pixels from an image file.

        The picture is mirrored left to right, as the renderer expects. Pixels
        are taken in order from the file; if it holds fewer, the rest stay zero.
        """
        image = cls(width, height)
        with _PILImage.open(path) as picture:
            rgba = _PILImageOps.mirror(picture.convert("RGBA"))
            raw = rgba.tobytes()
        count = min(len(raw), len(image.pixel_data))
        image.pixel_data[:count] = raw[:count]
        return image

    @classmethod
    def from_region(cls, source: Image, x: int, y: int, width: int, height: int) -> Image:
        """Copy the ``width`` x ``height`` block of ``source`` whose top left is (x, y)."""
        if x < 0 or y < 0 or x + width > source.width or y + height > source.height:
            raise ValueError("region lies outside the source image")
        row_bytes = _CHANNELS * width
        rows = bytearray()
        for row in range(y, y + height):
            start = _CHANNELS * (x + row * source.width)
            rows += source.pixel_data[start:start + row_bytes]
        return cls(width, height, bytes(rows))

    def set_transparent_colour(self, r: int, g: int, b: int) -> None:
        """Make pixels of colour (r, g, b) transparent and every other pixel opaque."""
        key = bytes((r, g, b))
        data = self.pixel_data
        for offset in range(0, len(data), _CHANNELS):
            data[offset + 3] = 0 if data[offset:offset + 3] == key else 255

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """The (r, g, b, a) value at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        start = _CHANNELS * (x + y * self.width)
        r, g, b, a = self.pixel_data[start:start + _CHANNELS]
        return r, g, b, a


class ImageManager:
    """Keeps images by name; the first image registered under a name is kept."""

    def __init__(self) -> None:
        self._images: dict[str, Image] = {}

    def create_image_from_file(self, name: str, width: int, height: int, path: str | Path) -> Image:
        """Load an image from ``path`` and register it as ``name``."""
        image = Image.from_file(width, height, path)
        self._images.setdefault(name, image)
        return image

    def create_image_from_image(
        self, name: str, image: Image, x: int, y: int, width: int, height: int
    ) -> Image:
        """Cut a region out of ``image`` and register it as ``name``."""
        region = Image.from_region(image, x, y, width, height)
        self._images.setdefault(name, region)
        return region

    def get_image(self, name: str) -> Image | None:
        """The image registered as ``name``, or None."""
        return self._images.get(name)