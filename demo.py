"""
CLI entry point for demonstrating tensor operations.

Usage with the built-in examples:
    python demo.py

Usage with a config file:
    python demo.py -c configuration.toml
    python demo.py -c configuration.toml --quiet
"""
import argparse
import logging

from intensor.domain.use_cases.demonstration import Demonstration, DemonstrationResult
from intensor.infrastructure.configuration import DemoConfiguration
from intensor.infrastructure.logging import setup_logging
from intensor.infrastructure.reporters import ConsoleReporter, SilentReporter

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """
    Parse command-line arguments.

    Parameters
    ----------
    argv : list[str] | None
        Command-line arguments. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description="Run index selections, reshapes and Hadamard products on sample tensors."
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to a TOML file with a [demo] table (default: built-in examples)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Do not print operation results",
    )
    parser.add_argument(
        "--show-shape",
        action="store_true",
        help="Print the shape next to each result",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def main(argv=None) -> list[DemonstrationResult]:
    """
    Main entry point for the demonstration.

    Parameters
    ----------
    argv : list[str] | None
        Command-line arguments. If None, uses sys.argv.

    Returns
    -------
    list[DemonstrationResult]
        Outcome of every operation.
    """
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    if args.config:
        logger.info(f"Loading configuration from {args.config}")
        config = DemoConfiguration.load(args.config)
    else:
        config = DemoConfiguration.default()

    tensors = config.build_tensors()
    logger.debug(f"Built tensors: {sorted(tensors)}")

    if args.quiet:
        reporter = SilentReporter()
    else:
        reporter = ConsoleReporter(show_shape=args.show_shape)

    use_case = Demonstration(
        tensors=tensors,
        reporter=reporter,
        selections=[(s.tensor, s.dim, s.indices) for s in config.selections],
        reshapes=[(r.tensor, r.shape) for r in config.reshapes],
        products=[(p.left, p.right) for p in config.products],
    )
    return use_case.run()


if __name__ == "__main__":
    main()
