"""In-memory pixel images with a fixed row stride and byte order."""

from __future__ import annotations


class Image:
    """A width x height pixel buffer.

    Rows are ``size_line`` bytes long, padded to 32 bits. Each pixel takes
    ``bpp // 8`` bytes, stored most significant byte first when
    ``big_endian`` is true and least significant byte first otherwise.
    """

    def __init__(self, width: int, height: int, bpp: int = 32, big_endian: bool = False):
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if bpp <= 0 or bpp % 8:
            raise ValueError(f"bits per pixel must be a positive multiple of 8, got {bpp}")
        self.width = width
        self.height = height
        self.bpp = bpp
        self.big_endian = bool(big_endian)
        self.bytes_per_pixel = bpp // 8
        self.size_line = ((width * bpp + 31) // 32) * 4
        self.data = bytearray(self.size_line * height)

    @property
    def endian(self) -> int:
        """1 for big-endian pixel storage, 0 for little-endian."""
        return int(self.big_endian)

    @property
    def _byteorder(self) -> str:
        return "big" if self.big_endian else "little"

    def _encode(self, color: int) -> bytes:
        mask = (1 << self.bpp) - 1
        return (color & mask).to_bytes(self.bytes_per_pixel, self._byteorder)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store a colour at (x, y), keeping only the bits that fit a pixel."""
        start = self._offset(x, y)
        self.data[start:start + self.bytes_per_pixel] = self._encode(color)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned pixel value stored at (x, y)."""
        start = self._offset(x, y)
        return int.from_bytes(self.data[start:start + self.bytes_per_pixel], self._byteorder)

    def fill(self, color: int) -> None:
        """Set every pixel of the image to one colour."""
        row = self._encode(color) * self.width
        for y in range(self.height):
            start = y * self.size_line
            self.data[start:start + len(row)] = row