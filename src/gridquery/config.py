"""Configuration for gridquery serialization and logging."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gridquery.operators import LogicalConnective

# Invariant layouts tried after ISO 8601 when re-emitting dates. English
# month names are rewritten to "M01".."M12" before these are tried, and a
# trailing AM/PM is applied afterwards, so no layout depends on LC_TIME.
DEFAULT_DATE_INPUT_FORMATS: tuple[str, ...] = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M:%S",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%d M%m %Y",
    "M%m %d, %Y",
    "M%m %d %Y",
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class GridQueryConfig:
    """Configuration for composing and re-emitting filter queries."""

    default_connective: LogicalConnective = LogicalConnective.AND
    date_input_formats: tuple[str, ...] = DEFAULT_DATE_INPUT_FORMATS


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the ``gridquery`` logger.

    Calling it again only updates the level.
    """
    pkg_logger = logging.getLogger("gridquery")
    pkg_logger.setLevel(getattr(logging, level.upper()))
    if not pkg_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        pkg_logger.addHandler(handler)
        pkg_logger.propagate = False
    return pkg_logger
