"""Reading and writing pixel grids with Pillow."""

import io
import sys

import numpy as np
from PIL import Image


def load_grid(path=None, stream=None):
    """
    Decode an image into a writable (height, width, 4) uint8 RGBA array.

    Args:
        path: Path to input image, or None to read from stream
        stream: Binary stream to read when no path is given (default: stdin)
    """
    if path is None:
        if stream is None:
            stream = sys.stdin.buffer
        path = io.BytesIO(stream.read())

    with Image.open(path) as img:
        img = img.convert("RGBA")
    return np.array(img)


def save_grid(grid, path=None, stream=None):
    """
    Encode a grid as an image.

    Args:
        grid: (height, width, 3 or 4) uint8 array
        path: Output path, format taken from its extension
        stream: Binary stream for PNG output when no path is given (default: stdout)
    """
    result_img = Image.fromarray(np.ascontiguousarray(grid, dtype=np.uint8))

    if path is not None:
        # JPEG has no alpha channel
        if str(path).lower().endswith((".jpg", ".jpeg")) and result_img.mode == "RGBA":
            result_img = result_img.convert("RGB")
        result_img.save(path)
        return path

    if stream is None:
        stream = sys.stdout.buffer
    result_img.save(stream, format="PNG")
    stream.flush()
    return None
