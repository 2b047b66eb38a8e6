"""
Command-line interface for ccmetrics.

Computes per-function cyclomatic complexity for C and C++ sources and
classifies LLVM IR instructions per function.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from ccmetrics import __version__
from ccmetrics.config import Config, create_default_config, find_config
from ccmetrics.core.engine import ComplexityAnalyzer
from ccmetrics.core.records import FunctionRecord
from ccmetrics.errors import CCMetricsError, ConfigError
from ccmetrics.ir import classify_module, format_instruction_table, load_module
from ccmetrics.reporting import ReportBuilder, get_formatter, write_report

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ccmetrics",
        description="Per-function complexity and instruction metrics for C and C++ code.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ccmetrics complexity main.c                     # Decision-point report appended to output.cy
  ccmetrics complexity main.c -s both -o main.cy  # Both strategies, custom output
  ccmetrics complexity main.c -f json -o -        # JSON on stdout
  ccmetrics instructions main.c                   # Instruction table in main.ic
  ccmetrics init                                  # Create config file
        """
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Complexity command
    complexity_parser = subparsers.add_parser("complexity", help="Compute cyclomatic complexity")
    complexity_parser.add_argument("source", help="C or C++ source file")
    complexity_parser.add_argument(
        "-o", "--output",
        help="Report file, '-' for stdout (default: output.cy)",
    )
    complexity_parser.add_argument(
        "-s", "--strategy",
        choices=["graph", "decision", "both"],
        help="Counting strategy (default: decision)",
    )
    complexity_parser.add_argument(
        "--operator-resolution",
        choices=["auto", "tokens", "structured"],
        help="How binary operators are resolved (default: auto)",
    )
    complexity_parser.add_argument(
        "-f", "--format",
        choices=["text", "json"],
        help="Output format (default: text)",
    )
    complexity_parser.add_argument(
        "-j", "--jobs",
        type=int,
        help="Number of parallel workers (default: 1)",
    )
    complexity_parser.add_argument(
        "--no-append",
        action="store_true",
        help="Overwrite the report instead of appending to it",
    )
    complexity_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on syntax errors instead of analyzing the recovered tree",
    )
    _add_common_arguments(complexity_parser)

    # Instructions command
    instructions_parser = subparsers.add_parser(
        "instructions",
        help="Classify LLVM IR instructions per function",
    )
    instructions_parser.add_argument("source", help="C/C++ source or .ll file")
    instructions_parser.add_argument(
        "-o", "--output",
        help="Output file, '-' for stdout (default: <source stem>.ic)",
    )
    _add_common_arguments(instructions_parser)

    # Init command
    init_parser = subparsers.add_parser("init", help="Create a configuration file")
    init_parser.add_argument(
        "-f", "--force",
        action="store_true",
        help="Overwrite existing config file",
    )

    return parser


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose logging",
    )


def _load_config(args: argparse.Namespace) -> Config:
    path = args.config or find_config(os.path.dirname(os.path.abspath(args.source)))
    return Config.load(path)


def _configure_logging(config: Config, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.log_level(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _emit(output: str, payload: str, append: bool) -> None:
    if output == "-":
        sys.stdout.write(payload)
    else:
        write_report(output, payload, append=append)


def cmd_complexity(args: argparse.Namespace) -> int:
    """Execute the complexity command."""
    config = _load_config(args)
    _configure_logging(config, args.verbose)

    # Apply command-line overrides
    overrides: Dict[str, Any] = {"analysis": {}, "reporting": {}, "frontend": {}}
    if args.strategy:
        overrides["analysis"]["strategy"] = args.strategy
    if args.operator_resolution:
        overrides["analysis"]["operator_resolution"] = args.operator_resolution
    if args.jobs:
        overrides["analysis"]["max_workers"] = args.jobs
    if args.format:
        overrides["reporting"]["format"] = args.format
    if args.output:
        overrides["reporting"]["output"] = args.output
    if args.no_append:
        overrides["reporting"]["append"] = False
    if args.strict:
        overrides["frontend"]["strict"] = True
    config = config.with_overrides(overrides)

    analyzer = ComplexityAnalyzer(config)
    records = analyzer.analyze_file(args.source)

    reporting = config.reporting()
    output = reporting.get("output") or "output.cy"
    fmt = reporting.get("format", "text")
    if fmt == "text" and output != "-":
        builder = ReportBuilder()
        builder.extend(records)
        builder.flush(output, append=bool(reporting.get("append", True)))
    else:
        payload = get_formatter(fmt)(records, args.source)
        _emit(output, payload, append=fmt == "text" and bool(reporting.get("append", True)))

    return _exit_code(records, reporting.get("fail_above"))


def _exit_code(records: List[FunctionRecord], fail_above: Optional[int]) -> int:
    if fail_above is None:
        return 0
    for record in records:
        if record.complexity > int(fail_above):
            logger.info("%s exceeds complexity threshold %s", record.name, fail_above)
            return 2
    return 0


def cmd_instructions(args: argparse.Namespace) -> int:
    """Execute the instructions command."""
    config = _load_config(args)
    _configure_logging(config, args.verbose)

    functions = load_module(args.source, clang=config.clang(), clang_args=config.clang_args())
    table = format_instruction_table(classify_module(functions))

    output = args.output or config.instructions().get("output")
    if not output:
        output = str(Path(args.source).with_suffix(".ic"))
    _emit(output, table, append=False)
    logger.info("Classified %d functions from %s", len(functions), args.source)
    return 0


def cmd_init(args: argparse.Namespace) -> int:
    """Execute the init command."""
    config_file = ".ccmetrics.yaml"

    if os.path.exists(config_file) and not args.force:
        print(f"Configuration file {config_file} already exists.")
        print("Use --force to overwrite.")
        return 1

    try:
        with open(config_file, "w", encoding="utf-8") as f:
            f.write(create_default_config())
    except OSError as exc:
        raise ConfigError(f"Cannot write {config_file}: {exc}") from exc

    print(f"Created configuration file: {config_file}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        if args.command == "complexity":
            return cmd_complexity(args)
        elif args.command == "instructions":
            return cmd_instructions(args)
        elif args.command == "init":
            return cmd_init(args)
        else:
            parser.print_help()
            return 0

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130
    except (CCMetricsError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        if os.environ.get("CCMETRICS_DEBUG"):
            raise
        return 1


if __name__ == "__main__":
    sys.exit(main())
