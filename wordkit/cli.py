#!/usr/bin/env python3
"""
wordkit CLI
===========
Command-line interface for Markov word generation.

Usage:
    wordkit generate -n 10
    wordkit generate --corpus names.txt --order 2 --prior 0.01 --seed 7
    wordkit alphabet --corpus names.txt
    wordkit stats
"""

import argparse
import json
import logging
import sys

from rich.table import Table

from wordkit import __version__
from wordkit.settings import get_setting
from wordkit.ui import make_console, words_table, model_panel


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.console = make_console(quiet=quiet)
        self.err_console = make_console(stderr=True)

    def print(self, *args, **kwargs):
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def raw(self, text: str):
        """Print plain text, even in quiet mode (for piping)."""
        print(text)

    def error(self, msg: str):
        self.err_console.print(f"Error: {msg}", markup=False, style="red")


def setup_logging(verbose: bool = False):
    level = "DEBUG" if verbose else str(get_setting("logging.level", "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=get_setting("logging.format", "%(levelname)s %(name)s: %(message)s"),
        stream=sys.stderr,
    )


def build_kit(args):
    """WordKit from the shared --corpus/--order/--prior/--seed options."""
    from wordkit import WordKit
    from wordkit.corpus import load_corpus

    corpus = None
    if getattr(args, 'corpus', None):
        corpus = load_corpus(args.corpus, lowercase=getattr(args, 'lowercase', False))
        if not corpus:
            raise ValueError(f"Corpus file is empty: {args.corpus}")

    return WordKit(
        corpus=corpus,
        order=getattr(args, 'order', None),
        prior=getattr(args, 'prior', None),
        seed=getattr(args, 'seed', None),
    )


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate words."""
    kit = build_kit(args)

    words = kit.generate(
        count=args.count,
        min_length=args.min_length,
        max_length=args.max_length,
        allow_duplicates=args.allow_duplicates or None,
        novel_only=args.novel,
        max_attempts=args.max_attempts,
    )

    if args.json:
        out.raw(json.dumps(words, indent=2))
        return 0

    if args.plain:
        for word in words:
            out.raw(word)
        return 0

    if not words:
        out.print("No words generated.")
        return 0

    out.print(words_table(
        words,
        corpus=kit.corpus if args.verbose else None,
        title=f"{len(words)} words (order {kit.order})",
    ))

    if args.verbose:
        out.print(model_panel(kit.model))

    return 0


def cmd_alphabet(args, out: Output):
    """Show the alphabet of a corpus."""
    from wordkit.generators import build_alphabet

    kit = build_kit(args)
    alphabet = build_alphabet(kit.corpus)

    if args.json:
        out.raw(json.dumps(list(alphabet)))
    else:
        out.raw(''.join(alphabet))
    return 0


def cmd_stats(args, out: Output):
    """Show chain table statistics."""
    kit = build_kit(args)
    model = kit.model

    if args.json:
        out.raw(json.dumps({
            'order': model.order,
            'prior': model.prior,
            'corpus_size': len(kit.corpus),
            'alphabet': list(model.alphabet),
            'contexts': model.table_sizes(),
        }, indent=2))
        return 0

    table = Table(title="Corpus", show_header=False)
    table.add_row("Words", str(len(kit.corpus)))
    table.add_row("Distinct words", str(len(set(kit.corpus))))
    out.print(table)
    out.print(model_panel(model))
    return 0


# =============================================================================
# Main
# =============================================================================

def add_model_options(p):
    p.add_argument('--corpus', '-c', help='Word list file, one word per line (default: built-in corpus)')
    p.add_argument('--lowercase', action='store_true', help='Lowercase corpus words')
    p.add_argument('--order', '-o', type=int, help='Markov order (default: markov.order)')
    p.add_argument('--prior', '-p', type=float, help='Smoothing prior (default: markov.prior)')
    p.add_argument('--seed', type=int, help='Random seed for reproducible output')


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='wordkit',
        description='wordkit - Markov Word Generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate -n 10
  %(prog)s generate -n 20 --min-length 4 --max-length 9 --novel
  %(prog)s generate --corpus names.txt --order 2 --prior 0.01 --seed 7
  %(prog)s alphabet --corpus names.txt
  %(prog)s stats --json
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate words')
    p.add_argument('-n', '--count', type=int, help='Number of words (default: generation.count)')
    p.add_argument('--min-length', type=int, help='Minimum word length (default: generation.min_length)')
    p.add_argument('--max-length', type=int, help='Maximum word length (default: generation.max_length)')
    p.add_argument('--allow-duplicates', '-d', action='store_true', help='Allow repeated words')
    p.add_argument('--novel', action='store_true', help='Skip words that appear in the corpus')
    p.add_argument('--max-attempts', type=int,
                   help='Give up after this many words tried (0 = no limit)')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')
    p.add_argument('--plain', action='store_true', help='One word per line')
    p.add_argument('--verbose', '-v', action='store_true', help='Show model details and debug logs')
    add_model_options(p)

    # --- alphabet ---
    p = subparsers.add_parser('alphabet', help='Show the alphabet of a corpus')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')
    add_model_options(p)

    # --- stats ---
    p = subparsers.add_parser('stats', help='Show model statistics')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')
    p.add_argument('--verbose', '-v', action='store_true', help='Debug logs')
    add_model_options(p)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    # Handle aliases
    cmd_map = {
        'gen': 'generate', 'g': 'generate',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=getattr(args, 'quiet', False))
    setup_logging(verbose=getattr(args, 'verbose', False))

    commands = {
        'generate': cmd_generate,
        'alphabet': cmd_alphabet,
        'stats': cmd_stats,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except Exception as e:
            out.error(str(e))
            if getattr(args, 'verbose', False):
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
