"""Command-line interface for sentence splitting."""

import argparse
import sys
from pathlib import Path

from sentencesplit.core.errors import SentenceSplitterError
from sentencesplit.core.types import PrefixKind
from sentencesplit.config.loader import load_config
from sentencesplit.prefixes.loader import available_languages, load_prefix_table
from sentencesplit.segmenters.sentence import SentenceSplitter


class ConsoleLogger:
    """Simple console logger writing to stderr, so stdout stays clean."""

    def _emit(self, level: str, msg: str, kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"{level}: {msg} {details}" if details else f"{level}: {msg}", file=sys.stderr)

    def info(self, msg: str, **kv):
        self._emit("INFO", msg, kv)

    def warn(self, msg: str, **kv):
        self._emit("WARN", msg, kv)

    def error(self, msg: str, **kv):
        self._emit("ERROR", msg, kv)


def _read_input(source):
    if source is None or source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def split_command(args):
    """Split a text file (or stdin) into one sentence per line."""
    logger = ConsoleLogger() if args.verbose else None
    try:
        if args.config:
            config = load_config(args.config)
            splitter = SentenceSplitter.from_config(config, logger=logger)
        else:
            splitter = SentenceSplitter(args.lang, args.prefix_file, logger=logger)

        try:
            text = _read_input(args.input)
        except (OSError, UnicodeDecodeError) as e:
            print(f"❌ Cannot read input: {e}", file=sys.stderr)
            return 1

        for sentence in splitter.split(text):
            print(sentence)
        return 0

    except SentenceSplitterError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1


def prefixes_command(args):
    """Show the non-breaking prefix table for a language."""
    try:
        table = load_prefix_table(args.lang, args.prefix_file)
    except SentenceSplitterError as e:
        print(f"❌ {e}")
        return 1

    print(f"Language: {args.lang}")
    print(f"   Source: {table.source}" + (f" ({table.path})" if table.path else ""))
    print(f"   Entries: {len(table)}")
    print(f"   Default: {table.count(PrefixKind.DEFAULT)}")
    print(f"   Numeric only: {table.count(PrefixKind.NUMERIC_ONLY)}")

    if args.verbose:
        print("\nPrefixes:")
        for entry in sorted(table, key=lambda e: e.text):
            marker = " #NUMERIC_ONLY#" if entry.kind is PrefixKind.NUMERIC_ONLY else ""
            print(f"   {entry.text}{marker}")

    return 0


def validate_config_command(args):
    """Validate a splitter config file."""
    config_path = Path(args.config_file)
    print(f"Validating config: {config_path}")
    try:
        config = load_config(config_path)
        table = load_prefix_table(config.language, config.prefix_file)
    except SentenceSplitterError as e:
        print(f"❌ Config validation failed: {e}")
        return 1

    print("✅ Config validation successful!")
    print(f"   Language: {config.language}")
    print(f"   Prefix file: {config.prefix_file or 'bundled'}")

    if args.verbose:
        print(f"   Prefix entries: {len(table)} ({table.source})")

    return 0


def info_command(args):
    """Display version and system information."""
    print("sentencesplit CLI")
    print("=" * 50)

    try:
        import importlib.metadata
        version = importlib.metadata.version("sentencesplit")
        print(f"Version: {version}")
    except importlib.metadata.PackageNotFoundError:
        print("Version: development")

    print(f"Python: {sys.version.split()[0]}")
    print(f"Bundled languages: {', '.join(available_languages())}")

    print("\nOptional dependencies:")
    try:
        import langchain_core
        print(f"   ✅ langchain-core: {langchain_core.__version__}")
    except ImportError:
        print("   ❌ langchain-core: not installed")

    return 0


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sentencesplit",
        description="Rule-based multilingual sentence splitter"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Split command
    split_parser = subparsers.add_parser(
        "split",
        help="Split text into one sentence per line"
    )
    split_parser.add_argument(
        "input",
        nargs="?",
        help="Input text file (default: stdin)"
    )
    split_parser.add_argument(
        "-l", "--lang",
        default="en",
        help="Two-letter language code (default: en)"
    )
    split_parser.add_argument(
        "-p", "--prefix-file",
        help="Custom non-breaking prefix file"
    )
    split_parser.add_argument(
        "-c", "--config",
        help="YAML config file (overrides --lang and --prefix-file)"
    )
    split_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log prefix table details to stderr"
    )

    # Prefixes command
    prefixes_parser = subparsers.add_parser(
        "prefixes",
        help="Show the non-breaking prefix table for a language"
    )
    prefixes_parser.add_argument(
        "-l", "--lang",
        default="en",
        help="Two-letter language code (default: en)"
    )
    prefixes_parser.add_argument(
        "-p", "--prefix-file",
        help="Custom non-breaking prefix file"
    )
    prefixes_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="List every prefix"
    )

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a splitter config file"
    )
    validate_parser.add_argument(
        "config_file",
        help="Path to the config YAML file"
    )
    validate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show detailed validation results"
    )

    # Info command
    subparsers.add_parser(
        "info",
        help="Display version and system information"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "split":
        return split_command(args)
    elif args.command == "prefixes":
        return prefixes_command(args)
    elif args.command == "validate":
        return validate_config_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
