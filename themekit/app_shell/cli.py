import argparse
import logging
import sys
from pathlib import Path

from themekit.components.blocks import BlockInstancesInput
from themekit.components.blocks import run as run_blocks
from themekit.components.fonts import FontFallbackInput
from themekit.components.fonts import run as run_fonts
from themekit.components.icons import GetIconInput
from themekit.components.icons import run as run_icon
from themekit.core.entities import SURFACE_TYPES
from themekit.rules.loader import load_rules
from themekit.rules.models import ThemeRules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"


def get_rules(path: str | None) -> ThemeRules:
    if path is None:
        # The default rules file is optional
        if not Path(RULES_PATH).exists():
            return ThemeRules()
        path = RULES_PATH

    try:
        return load_rules(Path(path))
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)


def handle_font_css(rules: ThemeRules, args: argparse.Namespace) -> int:
    out = run_fonts(FontFallbackInput(locale=args.locale, surface=args.surface), rules=rules.fonts)
    for warning in out.warnings:
        logger.info(warning)
    if out.css:
        print(out.css)
    return 0


def handle_icon(rules: ThemeRules, args: argparse.Namespace) -> int:
    size = args.size if args.size is not None else rules.icons.default_size
    out = run_icon(GetIconInput(icon=args.name, size=size, group=args.group))
    if not out.found:
        for warning in out.warnings:
            logger.error(warning)
        return 1
    print(out.svg)
    return 0


def handle_first_block(rules: ThemeRules, args: argparse.Namespace) -> int:
    try:
        content = Path(args.file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read {args.file}: {e}")
        sys.exit(1)
    out = run_blocks(
        BlockInstancesInput(block_name=args.name, content=content, instances=args.instances)
    )
    if not out.found:
        for warning in out.warnings:
            logger.info(warning)
        return 1
    print(out.html)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="themekit CLI")
    parser.add_argument("--rules", help=f"Path to theme rules (default: {RULES_PATH} if present)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # font-css
    font_parser = subparsers.add_parser("font-css", help="Print fallback font CSS for a locale")
    font_parser.add_argument("--locale", required=True, help="Site language, e.g. ja or zh-CN")
    font_parser.add_argument("--surface", default="front-end", choices=SURFACE_TYPES)

    # icon
    icon_parser = subparsers.add_parser("icon", help="Print an SVG icon")
    icon_parser.add_argument("name", help="Icon name, e.g. arrow_left")
    icon_parser.add_argument("--size", type=int, help="Size in pixels")
    icon_parser.add_argument("--group", default="ui", help="Icon group (ui, social)")

    # first-block
    block_parser = subparsers.add_parser(
        "first-block", help="Print the first instances of a block in a document"
    )
    block_parser.add_argument("name", help="Block name, e.g. core/image")
    block_parser.add_argument("file", help="Path to the content document")
    block_parser.add_argument("--instances", type=int, default=1)

    args = parser.parse_args(argv)
    rules = get_rules(args.rules)

    if args.command == "font-css":
        return handle_font_css(rules, args)
    elif args.command == "icon":
        return handle_icon(rules, args)
    elif args.command == "first-block":
        return handle_first_block(rules, args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
