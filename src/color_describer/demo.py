# src/color_describer/demo.py
import argparse
import json
import logging
import sys


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="color-describer",
        description="Turn color descriptions into colors and colors into descriptions.",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    sub = parser.add_subparsers(dest="command", required=True)

    p_parse = sub.add_parser("parse", help="Color of a description (e.g. light rich red)")
    p_parse.add_argument("text", nargs="+", help="Description words")

    p_match = sub.add_parser("match", help="Best description for a color")
    p_match.add_argument("target", nargs="+", help="Hex code, color name or description")
    p_match.add_argument(
        "--mix",
        type=int,
        default=None,
        dest="mix_count",
        help="Palette names mixed per candidate (default: $COLOR_DESCRIBER_MIX_COUNT or 1)",
    )

    p_grad = sub.add_parser("gradient", help="Gradient between two or more colors")
    p_grad.add_argument("start", help="Start color (hex, name or quoted description)")
    p_grad.add_argument(
        "stops", nargs="+", help="Further colors; the last one ends the gradient"
    )
    p_grad.add_argument("--steps", type=int, default=8, help="Number of colors")

    p_pal = sub.add_parser("palette", help="List the palette")
    p_pal.add_argument(
        "--order",
        choices=("alpha", "hue", "lightness"),
        default="alpha",
        help="Listing order",
    )
    return parser


def main(argv=None):
    """CLI demo: parse descriptions, match colors, build gradients, list the palette."""
    from .description.orchestrator import (
        describe,
        gradient,
        gradient_chain,
        match,
        palette_listing,
    )

    args = _build_parser().parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "parse":
            result = describe(" ".join(args.text), debug=args.debug)
        elif args.command == "match":
            result = match(" ".join(args.target), args.mix_count, debug=args.debug)
        elif args.command == "gradient":
            if len(args.stops) == 1:
                result = gradient(args.start, args.stops[0], args.steps, debug=args.debug)
            else:
                result = gradient_chain([args.start, *args.stops], args.steps, debug=args.debug)
        else:
            result = palette_listing(args.order)
        print(json.dumps(result, indent=2, ensure_ascii=False))
    except (ValueError, OSError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
