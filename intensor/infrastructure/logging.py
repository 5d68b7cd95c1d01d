"""Root logger setup shared by the command-line entry points."""
import logging
import sys


def setup_logging(level: int = logging.INFO):
    """
    Configure the application's root logger.

    Uses the format "timestamp - logger name - level - message" for records and attaches a StreamHandler that writes logs to stdout.

    Parameters:
        level (int): Minimum level to emit (default: logging.INFO).
    """
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
