#!/usr/bin/env python3
"""
Command-line interface for wordgen.
"""

import argparse
import multiprocessing
import os
import sys
import time
from contextlib import contextmanager
from typing import List, Optional

from tqdm import tqdm

from wordgen.core.alphabet import build_alphabet
from wordgen.core.dispatcher import CombinationDispatcher
from wordgen.core.generator import PermutationGenerator
from wordgen.core.output import OutputSink
from wordgen.core.trtable import TranslationTable
from wordgen.utils.config import Config, verbosity_to_level
from wordgen.utils.logger import Logger
from wordgen.utils.exceptions import ConfigError, WordgenError


ALPHABET_FLAGS = ("no_upper", "no_lower", "no_numbers", "no_symbols")


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="wordgen",
        description="Generate every combination of N characters, or every "
                    "substitution of a term through a translation table",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Generation modes
    mode_group = parser.add_argument_group("Generation Modes")
    mode_group.add_argument(
        "-c",
        "--combos",
        metavar="N",
        help="Iterate through all printable combinations of N characters. "
             "A comma separated list is accepted, e.g. 1,2,4,5",
    )
    mode_group.add_argument(
        "-p",
        "--permute",
        metavar="TERM",
        help="Permute over a term with similar letters (requires --trtab)",
    )
    mode_group.add_argument(
        "-t",
        "--trtab",
        metavar="FILENAME",
        help="Translation table file in YAML format. Required with --permute",
    )

    # Alphabet options, specific to --combos
    alphabet_group = parser.add_argument_group("Alphabet Options")
    alphabet_group.add_argument(
        "--no-upper", action="store_true", default=None,
        help="Omit upper case letters from combinations",
    )
    alphabet_group.add_argument(
        "--no-lower", action="store_true", default=None,
        help="Omit lower case letters from combinations",
    )
    alphabet_group.add_argument(
        "--no-numbers", action="store_true", default=None,
        help="Omit numbers from combinations",
    )
    alphabet_group.add_argument(
        "--no-symbols", action="store_true", default=None,
        help="Omit symbols from combinations",
    )

    # Performance options
    performance_group = parser.add_argument_group("Performance Options")
    performance_group.add_argument(
        "-j",
        "--threads",
        type=int,
        metavar="NUM_THREADS",
        help="Number of worker threads for --combos (default: 1)",
    )

    # Output options
    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "-o", "--output-file", help="Write candidates to this file instead of stdout"
    )
    output_group.add_argument(
        "--progress", action="store_true", default=None,
        help="Show a progress bar on stderr",
    )
    output_group.add_argument(
        "-v",
        "--verbosity",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Logging verbosity level (default: warning)",
    )
    output_group.add_argument("--log-file", help="Save log output to this file")

    # Config management
    config_group = parser.add_argument_group("Configuration")
    config_group.add_argument("--config", help="Path to configuration file")
    config_group.add_argument(
        "--save-config",
        action="store_true",
        help="Save current settings as default configuration",
    )

    return parser


def resolve(args, config: Config, key: str):
    """Command-line value for key if given, else the configured one"""
    value = getattr(args, key, None)
    return value if value is not None else config.get(key)


def setup_logger(args, config: Config) -> Logger:
    """Set up logging based on command-line arguments and config"""
    return Logger(
        name="wordgen",
        log_file=resolve(args, config, "log_file"),
        level=verbosity_to_level(resolve(args, config, "verbosity") or "warning"),
    )


def print_system_info(logger) -> None:
    """Log system information useful for debugging"""
    import platform
    import yaml

    logger.debug("=== System Information ===")
    logger.debug(f"Python version: {platform.python_version()}")
    logger.debug(f"Platform: {platform.platform()}")
    logger.debug(f"CPU count: {multiprocessing.cpu_count()}")
    logger.debug(f"PyYAML version: {yaml.__version__}")
    logger.debug("=========================")


def save_config_from_args(args, config: Config) -> None:
    """Save configuration from command-line arguments"""
    for key in ("threads", "verbosity", "log_file", "progress") + ALPHABET_FLAGS:
        value = getattr(args, key, None)
        if value is not None:
            config.set(key, value)

    config.save()


def parse_lengths(text: str) -> List[int]:
    """Parse a comma separated list of combination lengths

    Raises:
        ConfigError: If any entry is not a non-negative integer
    """
    lengths = []
    for part in text.split(","):
        part = part.strip()
        if not (part.isascii() and part.isdigit()):
            raise ConfigError(
                f"Invalid length {part!r} in {text!r}: expected a non-negative integer"
            )
        lengths.append(int(part))
    return lengths


def check_mode(args) -> None:
    """Make sure exactly one generation mode is requested"""
    if args.combos is not None and args.permute is not None:
        raise ConfigError("--combos and --permute cannot be used together")
    if args.combos is None and args.permute is None:
        raise ConfigError("One of --combos or --permute is required")
    if args.permute is not None and not args.trtab:
        raise ConfigError("You must specify a table file (--trtab) with the permute option")


def check_threads(threads) -> int:
    if isinstance(threads, bool) or not isinstance(threads, int) or threads < 1:
        raise ConfigError(f"Thread count must be a positive integer, got {threads!r}")
    return threads


@contextmanager
def open_sink(output_file: Optional[str], total: int, progress: bool):
    """Open the output sink for a run, on stdout or on output_file"""
    stream = None
    if output_file:
        try:
            stream = open(output_file, "w", encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot open output file {output_file}: {e}") from e

    try:
        bar = tqdm(total=total, unit="word", file=sys.stderr) if progress else None
        sink = OutputSink(stream, bar)
        try:
            yield sink
        finally:
            sink.close()
    finally:
        if stream is not None:
            stream.close()


def discard_stdout(logger) -> None:
    """Point stdout at devnull once its reader has gone away (e.g. piped into head)

    Keeps the interpreter from failing again while flushing stdout at exit.
    """
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError) as e:
        logger.debug(f"Could not redirect stdout: {e}")


def run_permute(args, config: Config, logger) -> int:
    """Emit every permutation of the requested term, returning the count"""
    table = TranslationTable.load(args.trtab)
    logger.info(f"Loaded translation table {args.trtab} with {len(table)} entries")

    generator = PermutationGenerator(args.permute, table)
    total = generator.get_total_count()
    logger.info(f"Permuting {args.permute!r} into {total:,} candidates")

    with open_sink(args.output_file, total, resolve(args, config, "progress")) as sink:
        generator.generate(sink.emit)
    return sink.count


def run_combos(args, config: Config, logger) -> int:
    """Emit every combination for the requested lengths, returning the count"""
    lengths = parse_lengths(args.combos)
    threads = check_threads(resolve(args, config, "threads"))
    alphabet = build_alphabet(**{flag: bool(resolve(args, config, flag)) for flag in ALPHABET_FLAGS})
    logger.info(f"Alphabet has {len(alphabet)} characters, using {threads} thread(s)")

    total = sum(len(alphabet) ** length for length in lengths)
    with open_sink(args.output_file, total, resolve(args, config, "progress")) as sink:
        dispatcher = CombinationDispatcher(alphabet, sink, threads=threads, logger=logger)
        dispatcher.run(lengths)
    return sink.count


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the wordgen CLI

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config(args.config)
    except ConfigError as e:
        Logger().get_logger().error(f"Error: {e}")
        return 1

    logger = setup_logger(args, config).get_logger()

    try:
        print_system_info(logger)

        check_mode(args)

        if args.save_config:
            save_config_from_args(args, config)
            logger.info(f"Configuration saved to {config.config_path}")

        start_time = time.time()
        if args.permute is not None:
            count = run_permute(args, config, logger)
        else:
            count = run_combos(args, config, logger)

        logger.info(f"Generated {count:,} candidates in {time.time() - start_time:.2f} seconds")
        return 0

    except WordgenError as e:
        if isinstance(e.__cause__, BrokenPipeError):
            discard_stdout(logger)
        logger.error(f"Error: {e}")
        return 1
    except BrokenPipeError:
        discard_stdout(logger)
        logger.error("Error: output closed before generation finished")
        return 1
    except OSError as e:
        logger.error(f"Error writing output: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as e:
        logger.exception(f"Unexpected error: {str(e)}")
        return 1


def display_examples():
    """Display usage examples"""
    examples = [
        "All 3-character combinations:",
        "  wordgen -c 3",
        "",
        "Several lengths, letters only:",
        "  wordgen -c 1,2,3 --no-numbers --no-symbols",
        "",
        "Spread the work over 4 threads:",
        "  wordgen -c 5 -j 4",
        "",
        "Leetspeak permutations of a term:",
        "  wordgen -p password -t leet.yaml",
        "",
        "Write to a file with a progress bar:",
        "  wordgen -c 4 --no-symbols -o words.txt --progress",
        "",
        "For more options:",
        "  wordgen -h",
    ]

    print("\n".join(examples))


if __name__ == "__main__":
    if len(sys.argv) == 1:
        display_examples()
        sys.exit(1)

    sys.exit(main())
