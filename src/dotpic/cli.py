import argparse
import logging
import sys
from pathlib import Path

from dotpic.converter import image_to_glyphs, select_presets

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dotpic", description="Render an image as braille or block characters")
    parser.add_argument("image", nargs="?", default=None, help="Path to input image")
    parser.add_argument(
        "-b", "--braille", action="store_true", default=False, help="Output braille, include with -r for both"
    )
    parser.add_argument(
        "-r", "--rect", action="store_true", default=False, help="Output rectangles, will output alone if ran without -b"
    )
    parser.add_argument(
        "--no-dither",
        dest="dither",
        action="store_false",
        default=True,
        help="Threshold at mid-grey instead of Floyd-Steinberg dithering",
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log progress to stderr")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        format="%(levelname)s: %(message)s",
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    if args.image is None:
        parser.print_help()
        return

    image_path = Path(args.image)
    presets = select_presets(braille=args.braille, rect=args.rect)
    logger.debug("Selected presets: %s", ", ".join(p.name for p in presets))

    try:
        outputs = image_to_glyphs(image_path, presets, dither=args.dither)
    except OSError as exc:
        logger.debug("Failed to load %s: %s", image_path, exc)
        print(f"Error occurred while trying to get '{image_path}'. It may not exist", file=sys.stderr)
        sys.exit(1)

    for text in outputs:
        print(text)
