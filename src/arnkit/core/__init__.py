from .arn import ResourceName
from .builder import ArnBuilder, ResourceBuilder
from .known import Partition, Region, Service
from .models import (
    AccountIdentifier,
    ArnError,
    ArnErrorKind,
    Identifier,
    IdentifierLike,
    ResourceIdentifier,
)

__all__ = [
    "AccountIdentifier",
    "ArnBuilder",
    "ArnError",
    "ArnErrorKind",
    "Identifier",
    "IdentifierLike",
    "Partition",
    "Region",
    "ResourceBuilder",
    "ResourceIdentifier",
    "ResourceName",
    "Service",
]
