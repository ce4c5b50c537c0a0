from abc import ABC, abstractmethod
from typing import ClassVar, Dict, List, Optional, Tuple, Type

from ..arn import ResourceName
from ..builder import IdentifierInput, as_identifier
from ..known import Partition
from ..models import Identifier
from ..models.IdentifierLike import PART_SEPARATOR, PATH_SEPARATOR


class BaseServiceArns(ABC):
    """
    Classe base para os helpers de cada serviço.

    Mantém um registry automático das subclasses concretas; cada subclass
    declara o `service` e implementa `describe(arn)`.
    """

    # registro global de helpers concretos
    registry: ClassVar[List[Type["BaseServiceArns"]]] = []

    # namespace do serviço no ARN (iam, s3, lambda...)
    service: ClassVar[str] = ""

    # tipos de recurso que o helper sabe montar (user, role, bucket...)
    resource_types: ClassVar[Tuple[str, ...]] = ()

    def __init_subclass__(cls, **kwargs):
        """
        Sempre que uma subclass é criada, se não for abstrata, entra no registry.
        """
        super().__init_subclass__(**kwargs)

        # Se tiver métodos abstratos ainda, não registra
        if getattr(cls, "__abstractmethods__", None):
            return

        BaseServiceArns.registry.append(cls)

    @classmethod
    def supports(cls, arn: ResourceName) -> bool:
        return str(arn.service) == cls.service

    @classmethod
    @abstractmethod
    def describe(cls, arn: ResourceName) -> Dict[str, str]:
        """
        Quebra o resource do ARN em partes nomeadas, ex.:
        {"type": "role", "path": "/", "name": "MyRole"}.
        """
        ...

    @staticmethod
    def resource_type_of(arn: ResourceName) -> Optional[str]:
        """
        Primeiro segmento do resource quando ele é `tipo:...` ou `tipo/...`.
        """
        value = str(arn.resource)
        for c in value:
            if c in (PART_SEPARATOR, PATH_SEPARATOR):
                return value.split(c, 1)[0]
        return None

    @staticmethod
    def _partition(partition: Optional[IdentifierInput]) -> Identifier:
        if partition is None:
            return Partition.default().identifier
        return as_identifier(partition)
