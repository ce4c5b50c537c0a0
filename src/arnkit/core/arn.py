import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

from .known import Partition, Service
from .models import (
    AccountIdentifier,
    Identifier,
    IdentifierLike,
    InvalidIdentifier,
    InvalidPartition,
    MissingPrefix,
    MissingResource,
    ResourceIdentifier,
    TooFewComponents,
)
from .models.IdentifierLike import PART_SEPARATOR

logger = logging.getLogger(__name__)

ARN_PREFIX = "arn"
ARN_COMPONENT_COUNT = 6

DEFAULT_PARTITION = Partition.default().value
PARTITION_PREFIX = DEFAULT_PARTITION + "-"

ACCOUNT_ROOT = "root"

I = TypeVar("I", bound=IdentifierLike)


def is_valid_partition(value: str) -> bool:
    """
    `aws` ou `aws-<sufixo>` (aws-cn, aws-us-gov, ...).
    """
    return value == DEFAULT_PARTITION or value.startswith(PARTITION_PREFIX)


def _coerce(value: Any, kind: Type[I], optional: bool) -> Optional[I]:
    if value is None or (optional and value == ""):
        return None
    if isinstance(value, kind):
        return value
    if kind is ResourceIdentifier and isinstance(value, Identifier):
        return ResourceIdentifier.from_identifier(value)  # type: ignore[return-value]
    return kind.parse(str(value))


@dataclass(frozen=True, kw_only=True)
class ResourceName:
    """
    Amazon Resource Name:

        arn:partition:service:region:account-id:resource

    `partition` vazio é exibido como `aws`; `region` e `account_id` vazios
    são exibidos como campos vazios (`arn:aws:s3:::bucket`). O `resource`
    pode conter ':' e '/'.
    """

    partition: Optional[Identifier] = None
    service: Identifier
    region: Optional[Identifier] = None
    account_id: Optional[AccountIdentifier] = None
    resource: ResourceIdentifier

    def __post_init__(self) -> None:
        if self.service is None:
            raise InvalidIdentifier("")
        if self.resource is None:
            raise MissingResource()

        object.__setattr__(self, "partition", _coerce(self.partition, Identifier, optional=True))
        object.__setattr__(self, "service", _coerce(self.service, Identifier, optional=False))
        object.__setattr__(self, "region", _coerce(self.region, Identifier, optional=True))
        object.__setattr__(self, "account_id", _coerce(self.account_id, AccountIdentifier, optional=True))
        object.__setattr__(self, "resource", _coerce(self.resource, ResourceIdentifier, optional=False))

    # ------------------------------------------------------------------
    # construção
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, s: str) -> "ResourceName":
        """
        Split-and-validate parser.

        The string is split on every ':'; the first five slices are the
        prefix, partition, service, region and account, everything after the
        fifth ':' is joined back together as the resource. The first invalid
        field stops the parse with that field's error.
        """
        parts = s.split(PART_SEPARATOR)
        if len(parts) < ARN_COMPONENT_COUNT:
            raise TooFewComponents(s)
        if parts[0] != ARN_PREFIX:
            raise MissingPrefix(s)

        _, partition, service, region, account_id, *resource = parts

        if not partition:
            partition_id = None
        elif is_valid_partition(partition):
            partition_id = Identifier.parse(partition)
        else:
            raise InvalidPartition(partition)

        arn = cls(
            partition=partition_id,
            service=Identifier.parse(service),
            region=Identifier.parse(region) if region else None,
            account_id=AccountIdentifier.parse(account_id) if account_id else None,
            resource=ResourceIdentifier.parse(PART_SEPARATOR.join(resource)),
        )
        logger.debug("parsed %r", arn)
        return arn

    @classmethod
    def new(cls, service: Identifier, resource: ResourceIdentifier) -> "ResourceName":
        """
        Minimal ARN, no partition, region or account.
        """
        return cls(service=service, resource=resource)

    @classmethod
    def aws(cls, service: Identifier, resource: ResourceIdentifier) -> "ResourceName":
        """
        Minimal ARN in the default `aws` partition.
        """
        return cls(partition=Partition.default().identifier, service=service, resource=resource)

    @classmethod
    def from_account(cls, account: AccountIdentifier) -> "ResourceName":
        """
        The account root principal, `arn:aws:iam::{account}:root`.
        """
        return cls(
            partition=Partition.default().identifier,
            service=Service.IDENTITY_ACCESS_MANAGEMENT.identifier,
            account_id=account,
            resource=ResourceIdentifier.unchecked(ACCOUNT_ROOT),
        )

    # ------------------------------------------------------------------
    # cópia com substituição
    # ------------------------------------------------------------------

    def with_partition(self, partition: Union[Identifier, str, None]) -> "ResourceName":
        return replace(self, partition=partition)

    def with_service(self, service: Union[Identifier, str]) -> "ResourceName":
        return replace(self, service=service)

    def with_region(self, region: Union[Identifier, str, None]) -> "ResourceName":
        return replace(self, region=region)

    def with_account(self, account_id: Union[AccountIdentifier, str, None]) -> "ResourceName":
        return replace(self, account_id=account_id)

    def with_resource(self, resource: Union[ResourceIdentifier, str]) -> "ResourceName":
        return replace(self, resource=resource)

    # ------------------------------------------------------------------
    # validação e predicados
    # ------------------------------------------------------------------

    def validate(self) -> "ResourceName":
        """
        Re-checks every field, including values built with `unchecked`.

        Kept apart from `parse` so extra rule checks can be layered on top
        (see `arnkit.core.validation`).
        """
        if self.partition is not None:
            if not is_valid_partition(self.partition.value):
                raise InvalidPartition(self.partition.value)
            Identifier.parse(self.partition.value)
        Identifier.parse(self.service.value)
        if self.region is not None:
            Identifier.parse(self.region.value)
        if self.account_id is not None:
            AccountIdentifier.parse(self.account_id.value)
        ResourceIdentifier.parse(self.resource.value)
        return self

    def has_wildcards(self) -> bool:
        return any(
            field is not None and field.has_wildcards()
            for field in (self.partition, self.service, self.region, self.account_id, self.resource)
        )

    def has_variables(self) -> bool:
        return self.resource.has_variables()

    def is_plain(self) -> bool:
        return not self.has_wildcards() and not self.has_variables()

    def replace_variables(self, context: Mapping[str, str]) -> "ResourceName":
        return self.with_resource(self.resource.replace_variables(context))

    # ------------------------------------------------------------------
    # saída
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return PART_SEPARATOR.join(
            [
                ARN_PREFIX,
                str(self.partition) if self.partition is not None else DEFAULT_PARTITION,
                str(self.service),
                str(self.region) if self.region is not None else "",
                str(self.account_id) if self.account_id is not None else "",
                str(self.resource),
            ]
        )

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "arn": str(self),
            "partition": str(self.partition) if self.partition is not None else None,
            "service": str(self.service),
            "region": str(self.region) if self.region is not None else None,
            "account_id": str(self.account_id) if self.account_id is not None else None,
            "resource": str(self.resource),
        }
