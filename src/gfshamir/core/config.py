"""
Defaults and logging setup for the command line.

Every default can be overridden per invocation by an option, or for a
whole shell session by the matching environment variable.
"""

import logging

from .encoding import Encoding


DEFAULT_PARTS = 5
DEFAULT_THRESHOLD = 3
DEFAULT_ENCODING = Encoding.BASE64

ENV_PARTS = "GFSHAMIR_PARTS"
ENV_THRESHOLD = "GFSHAMIR_THRESHOLD"
ENV_ENCODING = "GFSHAMIR_ENCODING"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )
