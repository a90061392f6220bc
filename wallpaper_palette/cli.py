import argparse
import logging
import sys

from .errors import PaletteError
from .export import FORMATS, export_scheme, format_scheme
from .extractor import ColorExtractor
from .options import ExtractionOptions
from .palette import load_scheme_from_json


def build_parser():
    parser = argparse.ArgumentParser(
        prog="wallpaper-palette",
        description="Generate a 16-color terminal scheme from an image or a saved scheme",
    )
    parser.add_argument(
        "image_path",
        nargs="?",
        default=None,
        help="Path to the source image",
    )
    parser.add_argument(
        "--from-scheme",
        metavar="JSON",
        help="Load a previously saved scheme instead of extracting one from an image",
    )
    parser.add_argument(
        "--format", "-f",
        choices=FORMATS,
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="FILE",
        default=None,
        help="Write the scheme to FILE instead of stdout",
    )
    parser.add_argument(
        "--colors",
        type=int,
        default=16,
        help="Number of colors to cluster (default: 16)",
    )
    theme = parser.add_mutually_exclusive_group()
    theme.add_argument(
        "--dark",
        dest="prefers_dark",
        action="store_const",
        const=True,
        help="Force a dark scheme",
    )
    theme.add_argument(
        "--light",
        dest="prefers_dark",
        action="store_const",
        const=False,
        help="Force a light scheme",
    )
    parser.add_argument(
        "--contrast",
        type=float,
        default=3.0,
        help="Accent contrast strength, 1.5 (low) to 4.5 (high). Default: 3.0",
    )
    parser.add_argument(
        "--background",
        type=float,
        default=0.6,
        help="Background intensity, 0.3 (subtle) to 0.9 (intense). Default: 0.6",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible clustering",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.from_scheme and args.image_path:
        parser.error("Cannot use both image_path and --from-scheme")
    if not args.from_scheme and not args.image_path:
        parser.error("Either image_path or --from-scheme is required")

    try:
        if args.from_scheme:
            scheme = load_scheme_from_json(args.from_scheme)
        else:
            scheme = _run_from_image(args, parser)

        if args.output:
            export_scheme(scheme, args.output, args.format)
            print(f"Exported {args.format} scheme to {args.output}", file=sys.stderr)
        else:
            print(format_scheme(scheme, args.format))
    except PaletteError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def _run_from_image(args, parser):
    """Extract a scheme from the image named on the command line."""
    try:
        options = ExtractionOptions(
            color_count=args.colors,
            prefers_dark=args.prefers_dark,
            contrast_ratio=args.contrast,
            background_intensity=args.background,
        )
    except ValueError as exc:
        parser.error(str(exc))

    print(f"Analyzing: {args.image_path}", file=sys.stderr)
    extractor = ColorExtractor(random_state=args.seed)
    return extractor.extract(args.image_path, options)


if __name__ == "__main__":
    sys.exit(main())
