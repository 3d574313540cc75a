"""
Main entry point for the command line

Runs the whole brand kit pipeline for one intake file, the same way the
webhook does for one HTTP request:
1. Read the intake JSON (a file, or "-" for stdin)
2. Generate the brand kit (AI if GEMINI_API_KEY is set, otherwise fallback)
3. Render the HTML document and save it
4. Email it (only when SMTP is configured, or forced with --send)

Usage:
    python main.py intake.json --output brand_kit.html --json brand_kit.json
"""
import argparse
import json
import os
import sys

from brand_kit_pipeline import BrandKitPipeline
from utils.logger import get_logger

logger = get_logger(__name__)


def load_intake(path: str):
    """Read the raw intake from a file path or stdin ("-")"""
    if path == "-":
        return json.load(sys.stdin)
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def write_text(path: str, content: str):
    """Write content, creating parent folders as needed"""
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a brand kit from an intake JSON file")
    parser.add_argument("intake", help="Path to the intake JSON file, or - for stdin")
    parser.add_argument("--output", "-o", default="brand_kit.html", help="Where to save the HTML (default: brand_kit.html)")
    parser.add_argument("--json", dest="json_path", default=None, help="Also save the brand kit data as JSON")
    send_group = parser.add_mutually_exclusive_group()
    send_group.add_argument("--send", dest="send", action="store_true", default=None,
                            help="Email the kit even if it would not be sent by default")
    send_group.add_argument("--no-send", dest="send", action="store_false",
                            help="Never email the kit")
    parser.set_defaults(send=None)
    return parser


def main(argv=None):
    """
    Main entry point - generate one brand kit

    Returns:
        0 on success, 1 on error
    """
    args = build_parser().parse_args(argv)

    try:
        logger.info("=" * 60)
        logger.info("Brand Kit Generator - Starting")
        logger.info("=" * 60)

        raw_intake = load_intake(args.intake)

        pipeline = BrandKitPipeline()
        result = pipeline.run(raw_intake, send_email=args.send)

        write_text(args.output, result["html"])
        logger.info(f"✅ Saved brand kit HTML to {args.output}")

        if args.json_path:
            write_text(args.json_path, json.dumps(result["result"], indent=2, ensure_ascii=False))
            logger.info(f"✅ Saved brand kit data to {args.json_path}")

        logger.info(f"Emailed: {result['emailed']}")
        return 0

    except Exception as e:
        logger.error(f"Error generating brand kit: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
