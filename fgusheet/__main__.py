"""
Command line entry point.

    python -m fgusheet serve [--host HOST] [--port PORT] [--debug]
    python -m fgusheet convert character.xml [-o sheet.html]
"""

import argparse
import logging
import os
import sys

from fgusheet import config
from fgusheet.convert import SheetError, generate_sheet
from fgusheet.log import setup_logging

logger = logging.getLogger("fgusheet.cli")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="fgusheet",
        description="Convert Fantasy Grounds Unity XML characters to HTML sheets.",
    )
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="logging level (default: %(default)s)")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="run the upload web application")
    serve.add_argument("--host", default=config.HOST)
    serve.add_argument("--port", type=int, default=config.PORT)
    serve.add_argument("--debug", action="store_true", default=config.DEBUG)

    convert = sub.add_parser("convert", help="convert one XML export to HTML")
    convert.add_argument("input", help="FGU character XML file")
    convert.add_argument("-o", "--output", help="output path (default: derived from the character name)")
    return parser


def run_convert(input_path, output_path=None):
    with open(input_path, "rb") as f:
        sheet = generate_sheet(f.read())

    if output_path is None:
        output_path = os.path.join(os.path.dirname(os.path.abspath(input_path)), sheet.filename)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(sheet.html)
    return output_path


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    if args.command == "serve":
        from fgusheet.web import app

        # Local development
        app.run(debug=args.debug, host=args.host, port=args.port)
        return 0

    try:
        output_path = run_convert(args.input, args.output)
    except (OSError, SheetError) as e:
        logger.error("Could not convert %s: %s", args.input, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
