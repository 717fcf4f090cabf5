import argparse
import sys

from image_io import load_grid, save_grid
from pixel_sorter import sort
from pixel_sorter_parallel import sort_pixels_parallel
from sort_keys import Direction, InvalidDirection, InvalidMode, Mode


def parse_mode(text):
    try:
        return Mode(text.lower())
    except ValueError:
        raise InvalidMode(
            f"Invalid mode {text!r}. Must be one of: white, black, bright, dark"
        ) from None


def parse_direction(text):
    try:
        return Direction(text.lower())
    except ValueError:
        raise InvalidDirection(
            f"Invalid direction {text!r}. Must be one of: h, v"
        ) from None


def positive_int(text):
    value = int(text)
    if value < 1:
        raise ValueError(f"must be at least 1, got {value}")
    return value


def _argparse_type(parse, name):
    # argparse only turns ArgumentTypeError, TypeError and ValueError into usage errors
    def convert(text):
        try:
            return parse(text)
        except ValueError as e:
            raise argparse.ArgumentTypeError(str(e))

    convert.__name__ = name
    return convert


def build_parser():
    parser = argparse.ArgumentParser(
        description="Pixel Sorter - Sort every row and column of an image by brightness"
    )
    parser.add_argument(
        "-i",
        "--input",
        help="Input image path (default: read from stdin)",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Output image path (default: write PNG to stdout)",
    )
    parser.add_argument(
        "-d",
        "--direction",
        type=_argparse_type(parse_direction, "direction"),
        required=True,
        help="Processing direction: 'h' for columns first, 'v' for rows first",
    )
    parser.add_argument(
        "-m",
        "--mode",
        type=_argparse_type(parse_mode, "mode"),
        required=True,
        help="Sorting mode: white, black, bright or dark",
    )
    parser.add_argument(
        "-t",
        "--threads",
        type=_argparse_type(positive_int, "threads"),
        default=None,
        help="Sort the lines of each pass on this many threads",
    )
    return parser


def log(message):
    # stdout may be carrying the image
    print(message, file=sys.stderr)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    log(f"Processing {args.input or '<stdin>'}...")

    try:
        grid = load_grid(args.input)
    except OSError as e:
        log(f"Error reading image: {e}")
        return 1

    if args.threads is None:
        sort(grid, args.mode, args.direction)
    else:
        sort_pixels_parallel(grid, args.mode, args.direction, num_threads=args.threads)

    try:
        save_grid(grid, args.output)
    except (OSError, ValueError) as e:
        log(f"Error saving image: {e}")
        return 1

    if args.output:
        log(f"Sorted image saved to {args.output}")
    log("Done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
