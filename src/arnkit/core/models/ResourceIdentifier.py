import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping

from .. import variable_engine
from .ArnError import InvalidResource
from .Identifier import Identifier
from .IdentifierLike import PART_SEPARATOR, PATH_SEPARATOR, IdentifierLike, is_printable_ascii

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceIdentifier(IdentifierLike):
    """
    The resource part of an ARN.

    Printable ASCII only but, unlike `Identifier`, spaces, '/' and ':' are
    allowed so that paths (`user/org/name`) and qualifiers
    (`layer:my-layer:3`) can be expressed. May hold `${name}` placeholders.
    """

    value: str

    error = InvalidResource

    @staticmethod
    def is_valid(s: Any) -> bool:
        if not isinstance(s, str) or not s:
            return False
        return all(is_printable_ascii(c) for c in s)

    @classmethod
    def from_identifier(cls, identifier: Identifier) -> "ResourceIdentifier":
        # qualquer Identifier válido já é um ResourceIdentifier válido
        return cls.unchecked(identifier.value)

    @classmethod
    def _join(cls, components: Iterable[IdentifierLike], separator: str) -> "ResourceIdentifier":
        parts = [str(c) for c in components]
        if not parts:
            raise InvalidResource("")
        return cls.unchecked(separator.join(parts))

    @classmethod
    def from_path(cls, components: Iterable[IdentifierLike]) -> "ResourceIdentifier":
        """
        Joins `Identifier` and/or `ResourceIdentifier` components with '/'.
        """
        return cls._join(components, PATH_SEPARATOR)

    @classmethod
    def from_qualified(cls, components: Iterable[IdentifierLike]) -> "ResourceIdentifier":
        """
        Joins `Identifier` and/or `ResourceIdentifier` components with ':'.
        """
        return cls._join(components, PART_SEPARATOR)

    def contains_path(self) -> bool:
        return PATH_SEPARATOR in self.value

    def path_split(self) -> List["ResourceIdentifier"]:
        return [ResourceIdentifier.unchecked(p) for p in self.value.split(PATH_SEPARATOR)]

    def contains_qualified(self) -> bool:
        return PART_SEPARATOR in self.value

    def qualifier_split(self) -> List["ResourceIdentifier"]:
        return [ResourceIdentifier.unchecked(p) for p in self.value.split(PART_SEPARATOR)]

    def has_variables(self) -> bool:
        return variable_engine.has_variables(self.value)

    def variable_names(self) -> List[str]:
        return variable_engine.find_variables(self.value)

    def is_plain(self) -> bool:
        return not self.has_wildcards() and not self.has_variables()

    def replace_variables(self, context: Mapping[str, str]) -> "ResourceIdentifier":
        """
        Substitutes the known `${name}` placeholders and re-validates.

        Raises `InvalidResource` if a substituted value brings in a character
        that is not allowed in a resource (newline, non-ASCII, ...).
        """
        replaced = variable_engine.substitute(self.value, context)
        logger.debug("replaced variables in %r -> %r", self.value, replaced)
        return ResourceIdentifier.parse(replaced)
