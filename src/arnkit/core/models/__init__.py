from .ArnError import (
    AccountIdWildcardNotAllowed,
    ArnError,
    ArnErrorKind,
    InvalidAccountId,
    InvalidIdentifier,
    InvalidPartition,
    InvalidResource,
    InvalidService,
    MissingAccountId,
    MissingPartition,
    MissingPrefix,
    MissingRegion,
    MissingResource,
    RegionWildcardNotAllowed,
    ResourceWildcardNotAllowed,
    TooFewComponents,
)
from .IdentifierLike import IdentifierLike
from .Identifier import Identifier
from .AccountIdentifier import AccountIdentifier
from .ResourceIdentifier import ResourceIdentifier

__all__ = [
    "AccountIdWildcardNotAllowed",
    "AccountIdentifier",
    "ArnError",
    "ArnErrorKind",
    "Identifier",
    "IdentifierLike",
    "InvalidAccountId",
    "InvalidIdentifier",
    "InvalidPartition",
    "InvalidResource",
    "InvalidService",
    "MissingAccountId",
    "MissingPartition",
    "MissingPrefix",
    "MissingRegion",
    "MissingResource",
    "RegionWildcardNotAllowed",
    "ResourceIdentifier",
    "ResourceWildcardNotAllowed",
    "TooFewComponents",
]
