"""Sort keys for pixel sorting: modes, directions and brightness."""

from enum import Enum

import numpy as np


class SortError(ValueError):
    """Base class for pixel sorting errors."""


class InvalidMode(SortError):
    pass


class InvalidDirection(SortError):
    pass


class Mode(Enum):
    WHITE = "white"
    BLACK = "black"
    BRIGHT = "bright"
    DARK = "dark"


class Direction(Enum):
    H = "h"  # columns first, then rows
    V = "v"  # rows first, then columns


class SortOrder(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


def check_mode(mode):
    if not isinstance(mode, Mode):
        raise InvalidMode(f"Invalid mode {mode!r}. Must be one of: white, black, bright, dark")
    return mode


def check_direction(direction):
    if not isinstance(direction, Direction):
        raise InvalidDirection(f"Invalid direction {direction!r}. Must be one of: h, v")
    return direction


def max_brightness(dtype):
    """Largest channel value for an integer dtype (255 for uint8)."""
    return int(np.iinfo(dtype).max)


def brightness(pixels):
    """
    Average of the R, G and B channels.

    Args:
        pixels: A single pixel or any array whose last axis holds the channels

    Returns:
        Integer brightness in 0..max_brightness, a scalar for a single pixel
    """
    pixels = np.asarray(pixels)
    rgb = pixels[..., :3].astype(np.int64)
    return rgb.sum(axis=-1) // 3


def sort_order(mode):
    if mode is Mode.WHITE:
        return SortOrder.ASCENDING
    elif mode is Mode.BLACK:
        return SortOrder.DESCENDING
    elif mode is Mode.BRIGHT:
        # Same ordering as BLACK; kept as its own mode.
        return SortOrder.DESCENDING
    elif mode is Mode.DARK:
        return SortOrder.ASCENDING
    raise InvalidMode(f"Invalid mode {mode!r}. Must be one of: white, black, bright, dark")


def sort_keys(pixels, mode):
    """
    Per-pixel sort key for a mode.

    WHITE, BLACK and BRIGHT sort on brightness. DARK sorts on darkness,
    i.e. the maximum brightness minus the pixel's brightness.
    """
    check_mode(mode)
    pixels = np.asarray(pixels)
    b = brightness(pixels)
    if mode is Mode.DARK:
        return max_brightness(pixels.dtype) - b
    return b


def pixel_key(pixel, mode):
    """Return (key, order) for a single pixel."""
    return int(sort_keys(pixel, mode)), sort_order(mode)


def comparison_keys(pixels, mode):
    """
    Keys that sort ascending into the mode's order.

    Descending modes negate the key instead of reversing the result so a
    stable sort keeps equal pixels in place.
    """
    keys = sort_keys(pixels, mode)
    if sort_order(mode) is SortOrder.DESCENDING:
        return -keys
    return keys
