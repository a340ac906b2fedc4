#!/usr/bin/env python3
"""
Banker's Safety Checker
Main entry point for the safety check.

Loads a resource-allocation snapshot, runs Banker's Algorithm and reports
whether the system is in a safe state.
"""

import argparse
import sys
from typing import List, Optional

from models.snapshot import InputError
from models.result import SafetyResult, format_sequence
from utils.config import CheckerConfig, DEFAULT_INPUT_PATH
from utils.input_loader import load_input, get_input_description
from utils.logger import CheckerLogger
from algorithms.safety import run_safety_check


def run_check(config: CheckerConfig, logger: CheckerLogger) -> SafetyResult:
    """
    Load the configured input and run the safety check.

    Args:
        config: Run configuration
        logger: Logger instance

    Returns:
        SafetyResult for the loaded snapshot

    Raises:
        InputError: If configuration or input is invalid
    """
    config.validate()

    logger.log(f"\nReading input from file: {config.input_path}")
    snapshot = load_input(
        config.input_path,
        config.num_processes,
        config.num_resources,
        config.resource_names
    )
    description = get_input_description(config.input_path)
    if description:
        logger.log(f"Description: {description}")
    logger.log("Input file read successfully!")

    logger.log_snapshot(snapshot.display())

    logger.log(f"\n{'='*60}")
    logger.log("RUNNING BANKER'S ALGORITHM")
    logger.log(f"{'='*60}")

    result = run_safety_check(snapshot, record_trace=config.trace, logger=logger)

    if result.trace is not None:
        logger.log("\nSimulation Trace:")
        logger.log(result.trace.display())

    return result


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="Banker's Algorithm safety checker (deadlock avoidance)"
    )
    parser.add_argument(
        '--input',
        type=str,
        default=DEFAULT_INPUT_PATH,
        help=f'Path to input file, text or .json (default: {DEFAULT_INPUT_PATH})'
    )
    parser.add_argument(
        '--processes',
        type=int,
        default=None,
        help='Number of processes; omit to read the dimensions from the input'
    )
    parser.add_argument(
        '--resources',
        type=int,
        default=None,
        help='Number of resource types; omit to read the dimensions from the input'
    )
    parser.add_argument(
        '--resource-names',
        type=str,
        default=None,
        help='Comma-separated resource labels (default: A,B,C,...)'
    )
    parser.add_argument(
        '--trace',
        action='store_true',
        help='Print the trace of every pass and release'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )
    parser.add_argument(
        '--log-file',
        type=str,
        default=None,
        help='Also write output to this file'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the safety checker."""
    args = build_parser().parse_args(argv)
    config = CheckerConfig.from_args(args)

    logger = CheckerLogger(verbose=config.verbose, log_file=config.log_file)
    try:
        logger.log("="*60)
        logger.log("BANKER'S ALGORITHM - Deadlock Avoidance Safety Check")
        logger.log("="*60)

        try:
            result = run_check(config, logger)
        except InputError as e:
            logger.log(f"Failed to load input: {e}", "error")
            return 1

        logger.log(result.display())
        logger.log_verdict(result.is_safe, format_sequence(result.sequence))
        return 0
    finally:
        logger.close()


if __name__ == '__main__':
    sys.exit(main())
