from enum import Enum
from typing import Optional


class ArnErrorKind(str, Enum):
    TOO_FEW_COMPONENTS = "too_few_components"
    MISSING_PREFIX = "missing_prefix"
    INVALID_PARTITION = "invalid_partition"
    INVALID_IDENTIFIER = "invalid_identifier"
    INVALID_ACCOUNT_ID = "invalid_account_id"
    INVALID_RESOURCE = "invalid_resource"
    INVALID_SERVICE = "invalid_service"
    MISSING_PARTITION = "missing_partition"
    MISSING_REGION = "missing_region"
    MISSING_ACCOUNT_ID = "missing_account_id"
    MISSING_RESOURCE = "missing_resource"
    REGION_WILDCARD_NOT_ALLOWED = "region_wildcard_not_allowed"
    ACCOUNT_ID_WILDCARD_NOT_ALLOWED = "account_id_wildcard_not_allowed"
    RESOURCE_WILDCARD_NOT_ALLOWED = "resource_wildcard_not_allowed"


class ArnError(ValueError):
    """
    Base class for every parse or validation failure.

    `kind` identifies the failure; `value` keeps the offending string for the
    kinds that carry one.
    """

    kind: ArnErrorKind
    message: str = "invalid ARN"

    def __init__(self, value: Optional[str] = None) -> None:
        self.value = value
        if value is None:
            super().__init__(self.message)
        else:
            super().__init__(f"{self.message}: {value!r}")


class TooFewComponents(ArnError):
    kind = ArnErrorKind.TOO_FEW_COMPONENTS
    message = "an ARN needs at least 6 ':' separated components"


class MissingPrefix(ArnError):
    kind = ArnErrorKind.MISSING_PREFIX
    message = "an ARN must start with 'arn'"


class InvalidPartition(ArnError):
    kind = ArnErrorKind.INVALID_PARTITION
    message = "invalid partition"


class InvalidIdentifier(ArnError):
    kind = ArnErrorKind.INVALID_IDENTIFIER
    message = "invalid identifier"


class InvalidAccountId(ArnError):
    kind = ArnErrorKind.INVALID_ACCOUNT_ID
    message = "invalid account id"


class InvalidResource(ArnError):
    kind = ArnErrorKind.INVALID_RESOURCE
    message = "invalid resource"


class InvalidService(ArnError):
    kind = ArnErrorKind.INVALID_SERVICE
    message = "unexpected service"


class MissingPartition(ArnError):
    kind = ArnErrorKind.MISSING_PARTITION
    message = "partition is required"


class MissingRegion(ArnError):
    kind = ArnErrorKind.MISSING_REGION
    message = "region is required"


class MissingAccountId(ArnError):
    kind = ArnErrorKind.MISSING_ACCOUNT_ID
    message = "account id is required"


class MissingResource(ArnError):
    kind = ArnErrorKind.MISSING_RESOURCE
    message = "resource is required"


class RegionWildcardNotAllowed(ArnError):
    kind = ArnErrorKind.REGION_WILDCARD_NOT_ALLOWED
    message = "wildcards are not allowed in the region"


class AccountIdWildcardNotAllowed(ArnError):
    kind = ArnErrorKind.ACCOUNT_ID_WILDCARD_NOT_ALLOWED
    message = "wildcards are not allowed in the account id"


class ResourceWildcardNotAllowed(ArnError):
    kind = ArnErrorKind.RESOURCE_WILDCARD_NOT_ALLOWED
    message = "wildcards are not allowed in the resource"
