#!/usr/bin/env python3
"""
Template Helpers
================
Render template helpers from the command line.

Usage:
    python main.py --ordinalize 21              # 21st
    python main.py --user-link octocat          # [@octocat](https://github.com/octocat)
    printf 'one\\ntwo' | python main.py --beautify -  # one, two
    cat notes.txt | python main.py --beautify - --truncate
    python main.py --demo                       # Show every helper on sample input
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from template_helpers import (
    InvalidArgumentError,
    beautify_desc,
    ordinalize,
    truncate_desc,
    user_link,
)
from template_helpers.config import config

# Results go to stdout, everything else to stderr
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger("template_helpers.cli")

DEMO_ORDINALS = [1, 2, 3, 4, 11, 12, 13, 21, 111]
DEMO_USERS = ["octocat"]
DEMO_DESCRIPTIONS = ["line one\nline two", "a\n\nb", "no newlines here"]


def setup_logging():
    """Configure logging with rich handler."""
    logging.basicConfig(
        level=config.effective_log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, console=err_console)],
    )


def validate_config() -> bool:
    """Validate configuration and show errors."""
    errors = config.validate()

    if errors:
        err_console.print(Panel(
            "\n".join([f"[red]✗[/red] {e}" for e in errors]),
            title="[red]Configuration Errors[/red]",
            border_style="red",
        ))
        err_console.print("\n[yellow]Please check your environment or .env file.[/yellow]\n")
        return False

    logger.debug("Configuration OK")
    return True


def emit(result: str):
    """Print a helper result exactly as returned."""
    console.file.write(result + "\n")


def read_text(value: str) -> str:
    """Return the text argument, reading stdin when it is '-'."""
    if value == "-":
        text = sys.stdin.read()
        # Drop only the newline that ends the last line
        return text[:-1] if text.endswith("\n") else text
    return value


def add_sample(table: Table, helper: str, given: str, result: str):
    """Add a row of literal text; samples contain square brackets."""
    table.add_row(Text(helper), Text(given), Text(result))


def run_demo():
    """Show every helper applied to sample input."""
    console.print(Panel(
        "[bold cyan]Template Helpers[/bold cyan]\n"
        "[dim]String formatting helpers for template rendering[/dim]",
        border_style="cyan",
    ))

    table = Table(title="Helper Samples")
    table.add_column("Helper", style="cyan")
    table.add_column("Input")
    table.add_column("Output", style="green")

    for number in DEMO_ORDINALS:
        add_sample(table, "ordinalize", str(number), ordinalize(number))
    for username in DEMO_USERS:
        add_sample(table, "user_link", username, user_link(username))
    for desc in DEMO_DESCRIPTIONS:
        add_sample(table, "beautify_desc", repr(desc), repr(beautify_desc(desc)))

    long_desc = "word " * 30
    add_sample(
        table,
        "truncate_desc",
        f"{len(long_desc)} chars",
        repr(truncate_desc(long_desc, config.desc_truncate_max)),
    )

    console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Template Helpers - string formatting for templates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --ordinalize 21          Print 21st
  python main.py --user-link octocat      Print a GitHub user link
  python main.py --beautify - < notes.txt  Replace newlines with ", "
  python main.py --beautify - --truncate  Beautify stdin and truncate it
  python main.py --demo                   Show sample output of every helper
        """
    )

    parser.add_argument("--ordinalize", type=int, metavar="N", help="Format N as an ordinal")
    parser.add_argument("--user-link", metavar="NAME", help="Build a GitHub user link")
    parser.add_argument("--beautify", metavar="TEXT", help="Flatten TEXT onto one line ('-' reads stdin)")
    parser.add_argument("--truncate", action="store_true", help="Truncate --beautify output to DESC_TRUNCATE_MAX")
    parser.add_argument("--demo", action="store_true", help="Show sample output")
    parser.add_argument("--skip-validation", action="store_true", help="Skip config validation")

    args = parser.parse_args(argv)

    if args.truncate and args.beautify is None:
        parser.error("--truncate requires --beautify")

    # Setup
    setup_logging()

    # Validate config (unless skipped)
    if not args.skip_validation:
        if not validate_config():
            return 1

    try:
        if args.ordinalize is not None:
            emit(ordinalize(args.ordinalize))
        if args.user_link is not None:
            emit(user_link(args.user_link))
        if args.beautify is not None:
            result = beautify_desc(read_text(args.beautify))
            if args.truncate:
                result = truncate_desc(result, config.desc_truncate_max)
            emit(result)
        if args.demo or (args.ordinalize is None and args.user_link is None and args.beautify is None):
            run_demo()
    except InvalidArgumentError as e:
        logger.error(f"Invalid argument: {e}")
        err_console.print(f"[red]✗ {e}[/red]")
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
