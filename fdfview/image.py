"""Off-screen images and the window surface they are drawn onto."""

from __future__ import annotations

from array import array

_PAD_BITS = 32


class Image:
    """A block of pixel memory laid out in rows of ``size_line`` bytes.

    Each pixel takes ``bpp // 8`` bytes, stored most significant byte
    first when ``big_endian`` is set and least significant first otherwise.
    Rows are padded to a multiple of 32 bits.  Pixels may be marked
    transparent, in which case they are not copied onto a canvas.
    """

    def __init__(self, width: int, height: int, bpp: int = 32, big_endian: bool = False):
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if bpp <= 0 or bpp % 8:
            raise ValueError(f"bits per pixel must be a positive multiple of 8, got {bpp}")
        self.width = width
        self.height = height
        self.bpp = bpp
        self.big_endian = big_endian
        self.size_line = (width * bpp + _PAD_BITS - 1) // _PAD_BITS * (_PAD_BITS // 8)
        self.data = bytearray(self.size_line * height)
        self._transparent: set[tuple[int, int]] = set()

    @property
    def endian(self) -> int:
        """1 for big-endian pixel storage, 0 for little-endian."""
        return int(self.big_endian)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bpp // 8

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store a pixel value at (x, y), keeping as many low bytes as fit."""
        start = self._offset(x, y)
        opp = self.bytes_per_pixel
        value = color & ((1 << (8 * opp)) - 1)
        order = "big" if self.big_endian else "little"
        self.data[start:start + opp] = value.to_bytes(opp, order)
        self._transparent.discard((x, y))

    def get_pixel(self, x: int, y: int) -> int:
        """Read back the pixel value stored at (x, y)."""
        start = self._offset(x, y)
        order = "big" if self.big_endian else "little"
        return int.from_bytes(self.data[start:start + self.bytes_per_pixel], order)

    def set_transparent(self, x: int, y: int) -> None:
        """Mark (x, y) so that it is left out when the image is drawn."""
        self._offset(x, y)
        self._transparent.add((x, y))

    def clear(self) -> None:
        """Set every byte to zero and drop all transparency marks."""
        self.data[:] = bytes(len(self.data))
        self._transparent.clear()


class Canvas:
    """A window surface holding one 0xRRGGBB colour per pixel.

    Drawing outside the surface is silently clipped, as a window does.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = array("I", bytes(4 * width * height))

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel_put(self, x: int, y: int, color: int) -> None:
        """Paint one pixel; points off the surface are ignored."""
        if self._inside(x, y):
            self._pixels[y * self.width + x] = color & 0xFFFFFF

    def put_image(self, image: Image, x: int, y: int) -> None:
        """Copy an image with its top-left corner at (x, y)."""
        for row in range(max(0, -y), min(image.height, self.height - y)):
            for col in range(max(0, -x), min(image.width, self.width - x)):
                if (col, row) in image._transparent:
                    continue
                self._pixels[(y + row) * self.width + x + col] = (
                    image.get_pixel(col, row) & 0xFFFFFF
                )

    def get_pixel(self, x: int, y: int) -> int:
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        return self._pixels[y * self.width + x]

    def clear(self) -> None:
        """Reset every pixel to the black background."""
        self._pixels = array("I", bytes(4 * self.width * self.height))