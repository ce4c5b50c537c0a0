from dataclasses import dataclass
from typing import Any

from .ArnError import InvalidIdentifier
from .IdentifierLike import PART_SEPARATOR, PATH_SEPARATOR, IdentifierLike, is_printable_ascii


@dataclass(frozen=True)
class Identifier(IdentifierLike):
    """
    Partition, service, region and resource-type tokens.

    Printable ASCII only, no space, no '/' and no ':'.
    """

    value: str

    error = InvalidIdentifier

    @staticmethod
    def is_valid(s: Any) -> bool:
        if not isinstance(s, str) or not s:
            return False
        return all(
            is_printable_ascii(c) and c not in (" ", PATH_SEPARATOR, PART_SEPARATOR)
            for c in s
        )
