from __future__ import annotations

import logging
import re
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

ParsedVersion = Tuple[int, ...]

# ASCII digits only
_DIGIT_RUN = re.compile(r"[0-9]+")


def parse_version(version: Optional[str]) -> ParsedVersion:
    """
    Parse a free-form version string into its integer segments.

    Every maximal run of ASCII digits becomes one segment, left to right.
    Anything else ("v" prefixes, "." separators, "-beta" suffixes) is dropped.
    Non-string input, and digit runs too long for int conversion, yield ().

    Examples:
        "1.4.2.0"   -> (1, 4, 2, 0)
        "v2.0"      -> (2, 0)
        "18.1-beta" -> (18, 1)
        "release"   -> ()
    """
    if not version or not isinstance(version, str):
        return ()
    try:
        return tuple(int(run) for run in _DIGIT_RUN.findall(version))
    except ValueError:
        # int() refuses digit runs above sys.get_int_max_str_digits()
        logger.debug("Version segment too long to parse: %.40r...", version)
        return ()


def is_parseable(version: Optional[str]) -> bool:
    return bool(parse_version(version))
