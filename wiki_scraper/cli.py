"""Command-line interface for the wiki-scraper pipeline."""

import os
import sys
import argparse

from .config import DEFAULT_MAX_SENTENCES, DEFAULT_MAX_FREQUENCY, DEFAULT_REPORT_LIMIT
from .errors import ConfigError
from .stages import run_stage_extract, run_stage_blacklist, analyze_rejections


def _add_extract_options(p: argparse.ArgumentParser):
    p.add_argument("-l", "--language", required=True,
                   help="Language identifier; selects <rules_dir>/<language>.toml")
    p.add_argument("--no_check", action="store_true",
                   help="Skip validation and emit every candidate (for word-frequency harvesting)")
    p.add_argument("--max_sentences", type=int, default=DEFAULT_MAX_SENTENCES,
                   help="Maximum sentences per article; 0 means unlimited")
    p.add_argument("--rules_dir", default=None,
                   help="Directory with <language>.toml rule documents (default: bundled rules)")
    p.add_argument("-w", "--words_file", default=None,
                   help="Extra disallowed words, one per line")
    p.add_argument("--log_dir", default=None,
                   help="Write rejection log and run summary to this directory")
    p.add_argument("-o", "--output", default=None,
                   help="Append sentences to this file instead of stdout")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    ap = argparse.ArgumentParser(
        prog="wiki-scraper",
        description="Extract short, speakable sentences from WikiExtractor output.",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    extract = sub.add_parser("extract", help="Extract sentences from WikiExtractor --json output")
    extract.add_argument("-d", "--dir", dest="input", required=True,
                         help="WikiExtractor output directory (or a single file)")
    _add_extract_options(extract)
    extract.set_defaults(plain_text=False)

    extract_file = sub.add_parser("extract-file", help="Extract sentences from plain text, one article per line")
    extract_file.add_argument("-f", "--file", dest="input", required=True,
                              help="Text file (or directory of text files)")
    _add_extract_options(extract_file)
    extract_file.set_defaults(plain_text=True)

    blacklist = sub.add_parser("blacklist", help="Build a rare-word blacklist from a --no_check harvest")
    blacklist.add_argument("-i", "--input", required=True,
                           help="Sentence file produced by 'extract --no_check'")
    blacklist.add_argument("--max_frequency", type=int, default=DEFAULT_MAX_FREQUENCY,
                           help="Blacklist words occurring at most this many times")
    blacklist.add_argument("-o", "--output", default=None,
                           help="Write the word list here instead of stdout")

    report = sub.add_parser("report", help="Summarize rejections logged by an extract run")
    report.add_argument("--log_dir", default="logs",
                        help="Directory passed to 'extract --log_dir'")
    report.add_argument("--reason", default=None,
                        help="Only show samples rejected for this reason")
    report.add_argument("--limit", type=int, default=DEFAULT_REPORT_LIMIT,
                        help="Number of sample sentences to show")

    return ap


def process_arguments(args):
    """Process and validate command-line arguments.

    Args:
        args: Parsed argument namespace
    """
    # Convert paths to absolute
    for name in ("input", "rules_dir", "words_file", "log_dir", "output"):
        value = getattr(args, name, None)
        if value:
            setattr(args, name, os.path.abspath(value))


def run_pipeline(args) -> int:
    """Run the requested command.

    Args:
        args: Parsed and processed argument namespace

    Returns:
        Process exit status
    """
    if args.command in ("extract", "extract-file"):
        try:
            run_stage_extract(args)
        except ConfigError as e:
            print(f"[extract][ERROR] Invalid rules: {e}", file=sys.stderr)
            return 2
    elif args.command == "blacklist":
        run_stage_blacklist(args)
    elif args.command == "report":
        analyze_rejections(args.log_dir, args.reason, args.limit)
    else:
        raise ValueError(f"Unknown command: {args.command}")
    return 0


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    process_arguments(args)
    try:
        return run_pipeline(args)
    except FileNotFoundError as e:
        print(f"[{args.command}][ERROR] {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print(f"[{args.command}] Interrupted; output written so far is complete.", file=sys.stderr)
        return 130
