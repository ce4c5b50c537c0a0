"""
Substitution of `${name}` placeholders inside resource strings.

The pattern is compiled once, at import time, and never changes.
"""

import logging
import re
from typing import List, Mapping

logger = logging.getLogger(__name__)

VARIABLE_PATTERN = re.compile(r"\$\{([^$}]+)\}")


def has_variables(text: str) -> bool:
    return VARIABLE_PATTERN.search(text) is not None


def find_variables(text: str) -> List[str]:
    """
    Names of every placeholder in `text`, in order of appearance.
    """
    return [m.group(1) for m in VARIABLE_PATTERN.finditer(text)]


def substitute(text: str, context: Mapping[str, str]) -> str:
    """
    Replaces each `${name}` whose name is a key of `context`.

    Unknown names are left as they are, so a later pass can still resolve
    them.
    """

    def _replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name in context:
            return str(context[name])
        logger.debug("variable %r not in context, keeping placeholder", name)
        return match.group(0)

    return VARIABLE_PATTERN.sub(_replace, text)
