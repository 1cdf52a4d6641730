#!/usr/bin/env python3
"""
WordKit CLI
===========
Command-line interface for sample-based word generation.

Usage:
    wordkit generate -n 10 --samples "Bob,Bobby,Steve" --depth 2
    wordkit generate -n 20 --file names.txt --min 4 --max 8 --capitalize
    wordkit generate -n 5 --config profile.yaml --json
    wordkit strategies
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from wordkit import __version__
from wordkit.errors import WordKitError
from wordkit.generators import EndingPickMode
from wordkit.settings import get_setting

# =============================================================================
# Constants
# =============================================================================

ENDING_MODES = [mode.value for mode in EndingPickMode]

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.console = Console()
        self.err_console = Console(stderr=True)

    def print(self, *args, **kwargs):
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def error(self, msg: str):
        self.err_console.print(f"Error: {msg}", markup=False, highlight=False, soft_wrap=True)

    def raw(self, text: str):
        """Print text regardless of quiet mode (machine-readable output)."""
        print(text)

    def table(self, headers: list, rows: list):
        """Print a formatted table."""
        if self.quiet:
            return
        table = Table(show_header=True, header_style="bold")
        for header in headers:
            table.add_column(str(header))
        for row in rows:
            table.add_row(*[str(c) for c in row])
        self.console.print(table)


def configure_logging(verbose: bool = False):
    level_name = 'DEBUG' if verbose else str(get_setting('logging.level', 'WARNING')).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format=get_setting('logging.format', '%(levelname)s %(name)s: %(message)s'),
    )


def parameter_kwargs(args) -> dict:
    """Collect GenerationParameters overrides given on the command line."""
    mapping = {
        'target_length_min': args.min,
        'target_length_max': args.max,
        'seed': args.seed,
        'entropy': args.entropy,
        'entropy_start': args.entropy_start,
        'entropy_middle': args.entropy_middle,
        'entropy_end': args.entropy_end,
        'ending_pick_mode': args.ending_mode,
    }
    return {k: v for k, v in mapping.items() if v is not None}


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate words."""
    from wordkit import WordKit

    kit = WordKit()

    if args.config:
        if args.samples or args.file:
            out.error("--config cannot be combined with --samples/--file")
            return 1
        generator = kit.generator_from_profile(args.config)
    else:
        if not args.samples and not args.file:
            out.error("Provide samples with --samples or --file (or a profile with --config)")
            return 1
        generator = kit.build_generator(
            samples=args.samples,
            file=args.file,
            separator=args.separator,
            depth=args.depth,
            delimiter=args.delimiter,
            preserve_case=True if args.preserve_case else None,
            capitalize=True if args.capitalize else None,
            **parameter_kwargs(args),
        )

    count = args.count if args.count is not None else get_setting('cli.default_count', 10)
    if not args.json:
        out.print(f"Generating {count} words...")
    words = generator.generate(count)

    if args.json:
        out.raw(json.dumps(words, ensure_ascii=False, indent=2))
        return 0

    if not words:
        out.print("No words generated.")
        return 0

    out.table(['#', 'Word'], [[i, word] for i, word in enumerate(words, 1)])
    if out.quiet:
        for word in words:
            out.raw(word)
    return 0


def cmd_strategies(args, out: Output):
    """List available strategies."""
    from wordkit import default_registry

    registry = default_registry()
    rows = [[d.kind, d.id, d.description] for d in registry.definitions()]
    out.table(['Kind', 'Id', 'Description'], rows)
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='wordkit',
        description='WordKit - Sample-Based Word Generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate -n 10 --samples "Bob,Bobby,Steve" --depth 2
  %(prog)s generate -n 20 --file names.txt --min 4 --max 8 --capitalize
  %(prog)s generate -n 5 --samples "ka-ri-na,to-mo" --delimiter - --ending-mode follow_branch
  %(prog)s generate -n 5 --config profile.yaml --json
  %(prog)s strategies
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate words')
    p.add_argument('-n', '--count', type=int, help='Number of words (default: 10)')
    p.add_argument('--samples', '-s', help='Separator-delimited sample words')
    p.add_argument('--file', '-f', help='Text file with samples, one per line')
    p.add_argument('--separator', help='Sample separator (default: "," for --samples, newline for --file)')
    p.add_argument('--depth', '-d', type=int, help='Chunk width in characters (default: 1)')
    p.add_argument('--delimiter', help='Split samples on this delimiter instead of by width')
    p.add_argument('--preserve-case', action='store_true', help='Keep the letter case of samples')
    p.add_argument('--min', type=int, help='Target minimum word length (default: 3)')
    p.add_argument('--max', type=int, help='Target maximum word length (default: 10)')
    p.add_argument('--seed', help='Randomization seed (default: random)')
    p.add_argument('--entropy', type=float, help='Chance (0-1) of any chunk being picked at random')
    p.add_argument('--entropy-start', type=float, help='Chance (0-1) of a random starting chunk')
    p.add_argument('--entropy-middle', type=float, help='Chance (0-1) of a random middle chunk')
    p.add_argument('--entropy-end', type=float, help='Chance (0-1) of a random ending chunk')
    p.add_argument('--ending-mode', choices=ENDING_MODES, help='How word endings are picked (default: random)')
    p.add_argument('--capitalize', '-c', action='store_true', help='Capitalize the first letter')
    p.add_argument('--config', help='YAML generator profile')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- strategies ---
    subparsers.add_parser('strategies', help='List available strategies')

    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    configure_logging(args.verbose)

    # Handle aliases
    cmd_map = {
        'gen': 'generate', 'g': 'generate',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    commands = {
        'generate': cmd_generate,
        'strategies': cmd_strategies,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except (WordKitError, OSError) as e:
            out.error(str(e))
            if args.verbose:
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
