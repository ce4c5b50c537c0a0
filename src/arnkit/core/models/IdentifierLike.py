from abc import ABC, abstractmethod
from typing import Any, ClassVar, Type, TypeVar

from .ArnError import ArnError

WILDCARD_ANY = "*"
WILDCARD_ONE = "?"
WILDCARD_CHARS = frozenset((WILDCARD_ANY, WILDCARD_ONE))

PART_SEPARATOR = ":"
PATH_SEPARATOR = "/"

T = TypeVar("T", bound="IdentifierLike")


def is_printable_ascii(c: str) -> bool:
    return "\x1f" < c < "\x7f"


class IdentifierLike(ABC):
    """
    Comportamento comum dos três tipos de identificador (Identifier,
    AccountIdentifier, ResourceIdentifier).

    As subclasses concretas são dataclasses congeladas com um único campo
    `value`; a validação roda no construtor e `unchecked` é a única forma de
    pular essa validação.
    """

    value: str

    # erro levantado quando o valor não passa em `is_valid`
    error: ClassVar[Type[ArnError]] = ArnError

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise self.error(self.value if isinstance(self.value, str) else repr(self.value))

    @staticmethod
    @abstractmethod
    def is_valid(s: Any) -> bool:
        """
        Retorna True se `s` respeita as regras de caracteres desse tipo.
        """
        ...

    @classmethod
    def parse(cls: Type[T], s: str) -> T:
        return cls(s)  # type: ignore[call-arg]

    @classmethod
    def unchecked(cls: Type[T], s: str) -> T:
        """
        Constrói o valor SEM validar.

        Só para literais conhecidos em tempo de escrita do código (ex.: "root",
        "layer"). Nunca usar com entrada externa: o ARN gerado fica corrompido
        silenciosamente.
        """
        obj = object.__new__(cls)
        object.__setattr__(obj, "value", s)
        return obj

    @classmethod
    def any(cls: Type[T]) -> T:
        return cls.unchecked(WILDCARD_ANY)

    def is_any(self) -> bool:
        return bool(self.value) and all(c == WILDCARD_ANY for c in self.value)

    def has_wildcards(self) -> bool:
        return any(c in WILDCARD_CHARS for c in self.value)

    def is_plain(self) -> bool:
        return not self.has_wildcards()

    def __str__(self) -> str:
        return self.value
