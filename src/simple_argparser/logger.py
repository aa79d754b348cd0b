"""Package-wide logger for simple_argparser."""

import logging

logger: logging.Logger = logging.getLogger("simple_argparser")
