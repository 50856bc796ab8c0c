"""Command-line entrypoint: load a dictionary, report, then answer commands."""

import argparse
import codecs
import sys
from dataclasses import asdict
from pathlib import Path
from typing import IO, Any, Dict, List, Optional

import yaml

from ..config import TableConfig, load_config
from ..io.loader import DEFAULT_ENCODING, load_dictionary
from ..metrics.occupancy import occupancy_summary
from ..report import format_interactive_summary, format_load_report, format_occupancy
from ..table.engine import HashEngine
from ..utils.logging import configure_logging, get_logger
from ..utils.timing import Timer
from .commands import CommandProcessor

logger = get_logger(__name__)

FILENAME_PROMPT = (
    "Enter the filename with the dictionary data (include the extension e.g. Spanish.txt):"
)
COMMAND_PROMPT = "\nEnter words to look-up. Enter q to stop."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="probedict",
        description="Load a word<TAB>translation dictionary into a double-hashing "
        "table, report probe statistics and answer s/i/d/q commands on stdin.",
    )
    parser.add_argument(
        "file", type=Path, nargs="?",
        help="Dictionary file (prompted for on stdin when omitted)",
    )
    parser.add_argument(
        "--config", type=Path, default=None,
        help="YAML config with 'table' and 'limits' sections",
    )
    parser.add_argument(
        "--capacity", type=int, default=None,
        help="Number of slots (prime); overrides the config",
    )
    parser.add_argument(
        "--policy", choices=["scan", "first_free"], default=None,
        help="Tombstone placement policy; overrides the config",
    )
    parser.add_argument(
        "--encoding", default=DEFAULT_ENCODING,
        help="Text encoding of the dictionary file; undecodable lines are rejected",
    )
    parser.add_argument(
        "--log-level", default=None,
        help="Log level for stderr diagnostics (default: WARNING)",
    )
    parser.add_argument(
        "--diagnostics", action="store_true",
        help="Print slot occupancy and clustering after loading",
    )
    parser.add_argument(
        "--figure", type=Path, default=None,
        help="Save the load-phase probe histogram to this file",
    )
    parser.add_argument(
        "--stats-json", type=Path, default=None,
        help="Write final statistics as JSON to this file",
    )
    return parser


def resolve_config(args: argparse.Namespace, raw: Dict[str, Any]) -> TableConfig:
    """Merge config file values and command-line overrides."""
    table = dict(raw.get("table") or {})
    if args.capacity is not None:
        table["capacity"] = args.capacity
    if args.policy is not None:
        table["tombstone_policy"] = args.policy
    return TableConfig.from_dict({**raw, "table": table})


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[IO[str]] = None,
    stdout: Optional[IO[str]] = None,
) -> int:
    """Main CLI entrypoint. Returns the process exit status."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        raw_config = load_config(args.config) if args.config is not None else {}
    except (OSError, ValueError, yaml.YAMLError) as e:
        parser.error(f"cannot load config {args.config}: {e}")
    try:
        codecs.lookup(args.encoding)
    except LookupError:
        parser.error(f"unknown encoding: {args.encoding}")
    log_level = args.log_level or (raw_config.get("logging") or {}).get("level", "WARNING")
    configure_logging(log_level)

    try:
        config = resolve_config(args, raw_config)
    except ValueError as e:
        parser.error(str(e))

    path = args.file
    if path is None:
        stdout.write(FILENAME_PROMPT + "\n")
        stdout.flush()
        path = Path(stdin.readline().strip())

    engine = HashEngine.from_config(config)
    try:
        with Timer(f"Loading {path}", logger=logger):
            load_dictionary(engine, path, encoding=args.encoding)
    except OSError as e:
        logger.error("Cannot read %s: %s", path, e)
        stdout.write("Failed to open file.\n")
        return 1

    snapshot = engine.stats.snapshot()
    stdout.write(format_load_report(snapshot))
    if args.diagnostics:
        stdout.write(format_occupancy(occupancy_summary(engine.slot_states())))
    if args.figure is not None:
        from ..plotting import save_histogram_figure

        save_histogram_figure(snapshot, args.figure)
        logger.info("Saved probe histogram to %s", args.figure)

    stdout.write(COMMAND_PROMPT + "\n")
    stdout.flush()
    CommandProcessor(engine, stdout).run(stdin)

    final = engine.stats.snapshot()
    stdout.write(format_interactive_summary(final))

    if args.stats_json is not None:
        from ..plotting import write_stats_json

        write_stats_json(args.stats_json, final, config=asdict(config))
        logger.info("Saved statistics to %s", args.stats_json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
