import numpy as np

from sort_keys import check_direction, check_mode, comparison_keys, Direction

ROW_AXIS = 1  # a row runs along the width
COLUMN_AXIS = 0  # a column runs along the height


def check_grid(grid):
    """Reject arrays that are not (height, width, channels) integer images."""
    if not isinstance(grid, np.ndarray):
        raise ValueError(f"Expected a numpy array, got {type(grid).__name__}")
    if grid.ndim != 3 or grid.shape[2] < 3:
        raise ValueError(f"Expected shape (height, width, >=3 channels), got {grid.shape}")
    if not np.issubdtype(grid.dtype, np.integer):
        raise ValueError(f"Expected integer channels, got {grid.dtype}")
    return grid


def sort_line(line, mode):
    """
    Stably sort one row or column of pixels in place.

    Args:
        line: (N, channels) array, usually a view into a grid
        mode: Mode selecting the key and the order

    Returns:
        The same array, reordered
    """
    check_mode(mode)
    if len(line) <= 1:
        return line

    order = np.argsort(comparison_keys(line, mode), kind="stable")
    line[:] = line[order]
    return line


def sort_axis(grid, mode, axis):
    """
    Sort every line along one axis of the grid in place.

    Args:
        grid: (height, width, channels) array
        mode: Mode selecting the key and the order
        axis: ROW_AXIS to sort each row, COLUMN_AXIS to sort each column
    """
    if grid.shape[axis] <= 1:
        return grid

    keys = comparison_keys(grid, mode)
    order = np.argsort(keys, axis=axis, kind="stable")
    grid[...] = np.take_along_axis(grid, order[:, :, np.newaxis], axis=axis)
    return grid


def sort_rows(grid, mode):
    """Sort each row left to right."""
    return sort_axis(grid, mode, ROW_AXIS)


def sort_columns(grid, mode):
    """Sort each column top to bottom."""
    return sort_axis(grid, mode, COLUMN_AXIS)


def pass_plan(direction):
    """The two axes to sort, in the order the direction asks for."""
    check_direction(direction)
    if direction is Direction.H:
        return (COLUMN_AXIS, ROW_AXIS)
    elif direction is Direction.V:
        return (ROW_AXIS, COLUMN_AXIS)


def sort(grid, mode, direction):
    """
    Sort the pixels of every row and every column by brightness.

    Mode and direction are checked before the grid is touched. The second
    pass runs on the output of the first.

    Args:
        grid: (height, width, channels) integer array, modified in place
        mode: Mode selecting the key and the order
        direction: Direction.H sorts columns first, Direction.V rows first

    Returns:
        The same grid
    """
    check_mode(mode)
    axes = pass_plan(direction)
    check_grid(grid)

    height, width = grid.shape[:2]
    if height == 0 or width == 0:
        return grid

    for axis in axes:
        sort_axis(grid, mode, axis)

    return grid
