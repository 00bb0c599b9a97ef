"""Command-line interface for bilingual_srt.

WHY: Most users run the tool over a folder of downloaded subtitle files
from a shell script. The CLI wires the pipeline to files and standard
streams behind a single command with one mode argument.

HOW: argparse takes the mode (swap, filter, reflow), the input path and
an optional output path, plus tuning options for reflow. Tuning is
resolved in order: explicit --threshold / --bracket-factor, then
--preset-file, then --preset, then the environment defaults from config.
Input is read line by line with newline translation disabled so the
reader sees the original CR/LF bytes.

RULES:
- INPUT may be "-" for stdin; without --output the result goes to stdout.
- The output file is only created once the first output line is ready,
  so a file without any cue leaves nothing behind.
- Status messages go to stderr, never stdout.
- Exit codes: 0 = success, 1 = error.
"""

from __future__ import annotations

import argparse
import io
import logging
import sys
from typing import Dict, List, Optional

from bilingual_srt import __version__
from bilingual_srt.config import OUTPUT_ENCODING
from bilingual_srt.core.pipeline import transform_stream
from bilingual_srt.errors import SubtitleError
from bilingual_srt.policies import POLICIES, build_policy
from bilingual_srt.presets import PRESETS, default_tuning, load_preset_file, resolve_preset, validate_tuning


def _status(msg: str) -> None:
    """Print a status message to stderr."""
    print(msg, file=sys.stderr, flush=True)


class _LazyFileSink:
    """Opens the output file on the first write."""

    def __init__(self, path: str, encoding: str) -> None:
        self._path = path
        self._encoding = encoding
        self._file = None

    def write(self, text: str) -> None:
        if self._file is None:
            self._file = open(self._path, "w", encoding=self._encoding, newline="")
        self._file.write(text)

    def close(self) -> None:
        if self._file is not None:
            self._file.close()


def resolve_tuning(args: argparse.Namespace) -> Dict:
    """Combine preset, preset file and explicit flags into one tuning dict."""
    if args.preset_file:
        tuning = load_preset_file(args.preset_file)
    elif args.preset:
        tuning = resolve_preset(args.preset)
    else:
        tuning = default_tuning()

    overrides = {}
    if args.threshold is not None:
        overrides["threshold"] = args.threshold
    if args.bracket_factor is not None:
        overrides["bracket_factor"] = args.bracket_factor
    if overrides:
        tuning.update(overrides)
        tuning = validate_tuning(tuning)
    return tuning


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="bilingual-srt",
        description="Reorder, filter or reflow the lines of bilingual SRT subtitles.",
    )

    parser.add_argument(
        "mode",
        choices=sorted(POLICIES),
        help="swap: reorder bilingual lines; filter: keep target-language lines "
             "only; reflow: split overlong single lines.",
    )

    parser.add_argument(
        "input_file",
        help="SRT file to read, or '-' for stdin.",
    )

    parser.add_argument(
        "-o", "--output",
        default=None,
        help="File to write (default: stdout).",
    )

    parser.add_argument(
        "--preset",
        default=None,
        help="Reflow tuning preset. Available: {}.".format(", ".join(PRESETS)),
    )

    parser.add_argument(
        "--preset-file",
        default=None,
        help="JSON file with 'threshold' and/or 'bracket_factor' (overrides --preset).",
    )

    parser.add_argument(
        "--threshold",
        type=int,
        default=None,
        help="Meaningful characters above which a line is split (reflow).",
    )

    parser.add_argument(
        "--bracket-factor",
        type=float,
        default=None,
        help="Brackets holding at most threshold x factor characters are never split (reflow).",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log more detail to stderr (-v info, -vv debug).",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def run(args: argparse.Namespace) -> int:
    """Execute one transformation; return the process exit code."""
    try:
        policy = build_policy(args.mode, resolve_tuning(args))
    except SubtitleError as e:
        print("Error: {}".format(e), file=sys.stderr)
        return 1

    if args.input_file == "-":
        source = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8", newline="\n")
    else:
        try:
            source = open(args.input_file, "r", encoding="utf-8", newline="\n")
        except OSError as e:
            print("Error: Cannot open {}: {}".format(args.input_file, e), file=sys.stderr)
            return 1

    sink = _LazyFileSink(args.output, OUTPUT_ENCODING) if args.output else sys.stdout
    try:
        with source:
            stats = transform_stream(source, policy, sink)
    except (SubtitleError, UnicodeDecodeError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        return 1
    finally:
        if args.output:
            sink.close()

    if args.output:
        _status("{}: {} cues read, {} written ({} changed, {} dropped) to {}".format(
            policy.name, stats.cues_read, stats.cues_written,
            stats.cues_changed, stats.cues_dropped, args.output,
        ))
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``python -m bilingual_srt`` and the console script.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
