import argparse
import logging
from typing import Optional

from kodak import Colour, Dim, Image, KodakError, Loc, Region
from kodak.version import __version__

logger = logging.getLogger(__name__)


def _ints(value: str, count: tuple[int, ...]) -> list[int]:
    try:
        values = [int(x) for x in value.split(",")]
    except ValueError:
        raise argparse.ArgumentTypeError("expected integers, got %r" % value)
    if len(values) not in count:
        raise argparse.ArgumentTypeError(
            "expected %s comma-separated integers, got %r"
            % (" or ".join(str(c) for c in count), value)
        )
    return values


def parse_colour(value: str) -> Colour:
    """``R,G,B`` or ``R,G,B,A``."""
    try:
        return Colour.from_vec(_ints(value, (3, 4)))
    except KodakError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_loc(value: str) -> Loc:
    """``X,Y``; negative values are allowed."""
    return Loc(*_ints(value, (2,)))


def parse_dim(value: str) -> Dim:
    """``W,H``."""
    try:
        return Dim(*_ints(value, (2,)))
    except KodakError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_region(value: str) -> Region:
    """``X,Y,W,H``."""
    x, y, w, h = _ints(value, (4,))
    try:
        return Region(Loc(x, y), Dim(w, h))
    except KodakError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="kodak command line utility.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Be more verbose.")
    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", required=True)

    border_parser = subparsers.add_parser(
        "border", help="Add a uniform border around an image"
    )
    border_parser.add_argument("input_file", help="Input image file")
    border_parser.add_argument("output_file", help="Output image file")
    border_parser.add_argument(
        "--width", type=int, default=16, help="Border width in pixels (default: 16)"
    )
    border_parser.add_argument(
        "--colour",
        type=parse_colour,
        default=Colour.WHITE,
        help="Border colour as R,G,B[,A] (default: white)",
    )

    overlay_parser = subparsers.add_parser(
        "overlay", help="Blend one image on top of another"
    )
    overlay_parser.add_argument("base_file", help="Bottom image file")
    overlay_parser.add_argument("source_file", help="Top image file")
    overlay_parser.add_argument("output_file", help="Output image file")
    overlay_parser.add_argument(
        "--offset",
        type=parse_loc,
        default=Loc(0, 0),
        help="Position of the top image as X,Y (default: 0,0)",
    )

    crop_parser = subparsers.add_parser("crop", help="Crop a region out of an image")
    crop_parser.add_argument("input_file", help="Input image file")
    crop_parser.add_argument("output_file", help="Output image file")
    crop_parser.add_argument(
        "--region", type=parse_region, required=True, help="Region as X,Y,W,H"
    )

    blank_parser = subparsers.add_parser("blank", help="Write a single-colour canvas")
    blank_parser.add_argument("output_file", help="Output image file")
    blank_parser.add_argument(
        "--size", type=parse_dim, required=True, help="Canvas size as W,H"
    )
    blank_parser.add_argument(
        "--colour",
        type=parse_colour,
        default=Colour.BLACK,
        help="Canvas colour as R,G,B[,A] (default: black)",
    )

    show_parser = subparsers.add_parser("show", help="Show the image dimensions")
    show_parser.add_argument("input_file", help="Input image file")

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> Optional[int]:
    args = parse_args(argv)

    logging.basicConfig(level=logging.WARNING)
    if args.verbose:
        logging.getLogger("kodak").setLevel(logging.DEBUG)
    else:
        logging.getLogger("kodak").setLevel(logging.INFO)

    try:
        if args.command == "border":
            image = Image.open(args.input_file).add_border(args.width, args.colour)
            image.save(args.output_file)

        elif args.command == "overlay":
            base = Image.open(args.base_file)
            source = Image.open(args.source_file)
            base.overlay(source, args.offset).save(args.output_file)

        elif args.command == "crop":
            image = Image.open(args.input_file).crop(args.region)
            image.save(args.output_file)

        elif args.command == "blank":
            Image.blank_with_colour(args.size, args.colour).save(args.output_file)

        elif args.command == "show":
            image = Image.open(args.input_file)
            print("%s: %dx%d" % (args.input_file, image.width, image.height))

    except (KodakError, OSError) as e:
        logger.error(str(e))
        return 1

    return None


if __name__ == "__main__":
    main()
