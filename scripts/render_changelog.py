"""Render a sample changelog with every element the library supports.

Useful as a quick visual check of configuration changes: the facade defaults
can be tweaked from the command line and the resulting Markdown is printed or
written to a file.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

CURRENT_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = CURRENT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from totale_markdown import TotaleMarkdown


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a sample Markdown changelog")
    parser.add_argument(
        "--version",
        type=str,
        default="1.2.0",
        help="Release version used in the changelog heading.",
    )
    parser.add_argument(
        "--indent-increment",
        type=int,
        default=None,
        help="Spaces added per nested list level (default from configuration).",
    )
    parser.add_argument(
        "--no-pad",
        action="store_true",
        help="Render tables without column padding.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Optional path to write the Markdown to (prints to stdout otherwise).",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings and errors.",
    )
    return parser.parse_args()


def build_changelog(md: TotaleMarkdown, version: str) -> str:
    sections = [
        md.heading({"text": "Changelog", "level": 1}),
        md.heading({"text": version, "level": 2}),
        md.github_alert({"type": "important", "text": "This release drops Python 3.9 support."}),
        md.heading({"text": "Highlights", "level": 3}),
        md.ul(
            {
                "items": [
                    "New table padding options",
                    ["Per-column alignment", "Configurable defaults"],
                    "Lint-ignore helpers for "
                    + md.link({"text": "markdownlint", "url": "https://github.com/DavidAnson/markdownlint"}),
                ]
            }
        ),
        md.heading({"text": "Compatibility", "level": 3}),
        md.table(
            {
                "headers": ["Python", "Status"],
                "rows": [["3.10", "supported"], ["3.11", "supported"], ["3.9", "dropped"]],
                "alignment": ["left", "center"],
            }
        ),
        md.details(
            {
                "summary": "Raw release data",
                "text": md.markdownlint_ignore({"text": "commit range: v1.1.0...v" + version, "rules": ["MD034"]}),
            }
        ),
        md.prettier_ignore({"text": md.font({"text": "Thanks to every contributor!", "color": "green"})}),
    ]
    return "\n".join(section.rstrip("\n") for section in sections) + "\n"


def main() -> None:
    args = parse_args()

    logging.basicConfig(
        level=logging.INFO if not args.quiet else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )
    logger = logging.getLogger("render_changelog")

    config = {
        "elements": {
            "ul": {"indent_increment": args.indent_increment},
            "table": {"pad_columns": not args.no_pad},
        }
    }
    md = TotaleMarkdown(config)
    logger.debug("Using configuration %s", md.config.model_dump())

    output = build_changelog(md, args.version)
    logger.info("Rendered %d lines for version %s", output.count("\n"), args.version)

    if args.output:
        args.output.write_text(output, encoding="utf-8")
        logger.info("Wrote changelog to %s", args.output)
    else:
        print(output, end="")


if __name__ == "__main__":
    main()
