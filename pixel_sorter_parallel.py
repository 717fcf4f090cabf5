import multiprocessing
from concurrent.futures import ThreadPoolExecutor

from pixel_sorter import check_grid, COLUMN_AXIS, pass_plan, sort_line
from sort_keys import check_mode


def line_views(grid, axis):
    """Views of every row (axis 1) or every column (axis 0) of the grid."""
    if axis == COLUMN_AXIS:
        return [grid[:, x] for x in range(grid.shape[1])]
    return [grid[y] for y in range(grid.shape[0])]


def sort_pixels_parallel(grid, mode, direction, num_threads=None):
    """
    Threaded version of pixel_sorter.sort, same result.

    Each line of a pass is sorted on the pool; the pass finishes before the
    next one starts.

    Args:
        grid: (height, width, channels) integer array, modified in place
        mode: Mode selecting the key and the order
        direction: Direction.H sorts columns first, Direction.V rows first
        num_threads: Number of threads (None = auto-detect CPU cores)
    """
    check_mode(mode)
    axes = pass_plan(direction)
    check_grid(grid)

    height, width = grid.shape[:2]
    if height == 0 or width == 0:
        return grid

    # Auto-detect CPU cores
    if num_threads is None:
        num_threads = max(1, multiprocessing.cpu_count() - 1)  # Leave one core free

    with ThreadPoolExecutor(max_workers=num_threads) as executor:
        for axis in axes:
            lines = line_views(grid, axis)
            # list() drains the pass and re-raises worker errors
            list(executor.map(lambda line: sort_line(line, mode), lines))

    return grid
