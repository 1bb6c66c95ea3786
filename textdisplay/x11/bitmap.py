"""Decoding of single-plane X images read back from depth-1 pixmaps"""

from __future__ import annotations

from dataclasses import dataclass

from Xlib import X


@dataclass(frozen=True)
class BitmapFormat:
    """Server bitmap layout from the connection setup block"""
    bit_order: int  # X.LSBFirst or X.MSBFirst
    byte_order: int  # X.LSBFirst or X.MSBFirst
    scanline_unit: int  # bits: 8, 16 or 32
    scanline_pad: int  # bits: 8, 16 or 32

    @classmethod
    def fromDisplay_get(cls, display) -> "BitmapFormat":
        """
        Read bitmap format from a python-xlib Display

        Args:
            display: Connected Xlib.display.Display

        Returns:
            Bitmap format of the server
        """
        info = display.display.info
        return cls(
            bit_order=info.bitmap_format_bit_order,
            byte_order=info.image_byte_order,
            scanline_unit=info.bitmap_format_scanline_unit,
            scanline_pad=info.bitmap_format_scanline_pad,
        )

    def stride_get(self, width: int) -> int:
        """Bytes per scanline for an image of the given width"""
        pad = self.scanline_pad
        return ((width + pad - 1) // pad) * pad // 8


def bitmapRows_decode(data: bytes, width: int, height: int, fmt: BitmapFormat) -> list[list[bool]]:
    """
    Decode a 1-bit image into rows of booleans

    Args:
        data: Raw image bytes from GetImage (XYPixmap, one plane)
        width: Image width in pixels
        height: Image height in pixels
        fmt: Server bitmap format

    Returns:
        height rows of width booleans, True where the bit is set

    Raises:
        ValueError: If data is shorter than the format requires
    """
    stride = fmt.stride_get(width)
    if len(data) < stride * height:
        raise ValueError(f"Bitmap data too short: {len(data)} bytes for {height} rows of {stride}")

    unit_bytes = max(1, fmt.scanline_unit // 8)
    swap_units = unit_bytes > 1 and fmt.byte_order != fmt.bit_order
    lsb_first = fmt.bit_order == X.LSBFirst

    rows: list[list[bool]] = []
    for y in range(height):
        line = bytearray(data[y * stride:(y + 1) * stride])
        if swap_units:
            for start in range(0, len(line) - unit_bytes + 1, unit_bytes):
                line[start:start + unit_bytes] = line[start:start + unit_bytes][::-1]
        row: list[bool] = []
        for x in range(width):
            bit = x % 8 if lsb_first else 7 - (x % 8)
            row.append(bool(line[x // 8] >> bit & 1))
        rows.append(row)
    return rows
