"""
arnkit: parse, build and validate AWS ARNs.

    from arnkit import ResourceName

    arn = ResourceName.parse("arn:aws:lambda:us-east-2:123456789012:function:my-fn")
    arn.resource.qualifier_split()
"""

from .core import (
    AccountIdentifier,
    ArnBuilder,
    ArnError,
    ArnErrorKind,
    Identifier,
    IdentifierLike,
    Partition,
    Region,
    ResourceBuilder,
    ResourceIdentifier,
    ResourceName,
    Service,
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
