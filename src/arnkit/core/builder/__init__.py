"""
Fluent construction of ARNs.

    arn = (
        ArnBuilder.service(Service.LAMBDA)
        .resource(ResourceBuilder.typed("layer").resource_name("my-layer").version(3).build_qualified_id())
        .in_region(Region.US_EAST_2)
        .owned_by("123456789012")
        .build()
    )
    str(arn) == "arn:aws:lambda:us-east-2:123456789012:layer:my-layer:3"

Strings are parsed (and so validated) as they come in; `build()` runs
`ResourceName.validate()` on the result.
"""

import logging
from typing import List, Optional, Union

from ..arn import ResourceName
from ..known import Partition, Region, Service
from ..models import AccountIdentifier, Identifier, InvalidResource, MissingResource, ResourceIdentifier

logger = logging.getLogger(__name__)

IdentifierInput = Union[Identifier, Partition, Region, Service, str]
AccountInput = Union[AccountIdentifier, str]
ResourceInput = Union[ResourceIdentifier, Identifier, str]


def as_identifier(value: IdentifierInput) -> Identifier:
    if isinstance(value, Identifier):
        return value
    if isinstance(value, (Partition, Region, Service)):
        return value.identifier
    return Identifier.parse(value)


def as_account(value: AccountInput) -> AccountIdentifier:
    if isinstance(value, AccountIdentifier):
        return value
    return AccountIdentifier.parse(value)


def as_resource(value: ResourceInput) -> ResourceIdentifier:
    if isinstance(value, ResourceIdentifier):
        return value
    if isinstance(value, Identifier):
        return ResourceIdentifier.from_identifier(value)
    return ResourceIdentifier.parse(value)


class ArnBuilder:
    """
    Builder mutável; cada método devolve o próprio builder.

    Há vários nomes para o mesmo setter (`in_account`, `and_account`,
    `owned_by`) só para a chamada ler melhor.
    """

    def __init__(self, service: IdentifierInput) -> None:
        self._partition: Optional[Identifier] = None
        self._service: Identifier = as_identifier(service)
        self._region: Optional[Identifier] = None
        self._account_id: Optional[AccountIdentifier] = None
        self._resource: Optional[ResourceIdentifier] = None

    @classmethod
    def service(cls, service: IdentifierInput) -> "ArnBuilder":
        return cls(service)

    # partition ---------------------------------------------------------

    def in_partition(self, partition: IdentifierInput) -> "ArnBuilder":
        self._partition = as_identifier(partition)
        return self

    def in_default_partition(self) -> "ArnBuilder":
        self._partition = Partition.default().identifier
        return self

    def in_any_partition(self) -> "ArnBuilder":
        self._partition = None
        return self

    # region ------------------------------------------------------------

    def in_region(self, region: IdentifierInput) -> "ArnBuilder":
        self._region = as_identifier(region)
        return self

    def and_region(self, region: IdentifierInput) -> "ArnBuilder":
        return self.in_region(region)

    def in_any_region(self) -> "ArnBuilder":
        self._region = Identifier.any()
        return self

    # account -----------------------------------------------------------

    def in_account(self, account: AccountInput) -> "ArnBuilder":
        self._account_id = as_account(account)
        return self

    def and_account(self, account: AccountInput) -> "ArnBuilder":
        return self.in_account(account)

    def owned_by(self, account: AccountInput) -> "ArnBuilder":
        return self.in_account(account)

    def in_any_account(self) -> "ArnBuilder":
        self._account_id = AccountIdentifier.any()
        return self

    # resource ----------------------------------------------------------

    def resource(self, resource: ResourceInput) -> "ArnBuilder":
        self._resource = as_resource(resource)
        return self

    def is_(self, resource: ResourceInput) -> "ArnBuilder":
        return self.resource(resource)

    def any_resource(self) -> "ArnBuilder":
        self._resource = ResourceIdentifier.any()
        return self

    def build(self) -> ResourceName:
        if self._resource is None:
            raise MissingResource()

        arn = ResourceName(
            partition=self._partition,
            service=self._service,
            region=self._region,
            account_id=self._account_id,
            resource=self._resource,
        )
        logger.debug("built %s", arn)
        return arn.validate()


class ResourceBuilder:
    """
    Junta componentes de um resource e emite como path ('/') ou como id
    qualificado (':').
    """

    def __init__(self, *components: ResourceInput) -> None:
        self._components: List[ResourceIdentifier] = [as_resource(c) for c in components]

    @classmethod
    def named(cls, name: ResourceInput) -> "ResourceBuilder":
        return cls(name)

    @classmethod
    def typed(cls, resource_type: IdentifierInput) -> "ResourceBuilder":
        return cls(as_identifier(resource_type))

    def add(self, component: ResourceInput) -> "ResourceBuilder":
        self._components.append(as_resource(component))
        return self

    def type_name(self, resource_type: IdentifierInput) -> "ResourceBuilder":
        return self.add(as_identifier(resource_type))

    def resource_name(self, name: ResourceInput) -> "ResourceBuilder":
        return self.add(name)

    def sub_resource_name(self, name: ResourceInput) -> "ResourceBuilder":
        return self.add(name)

    def resource_path(self, path: ResourceInput) -> "ResourceBuilder":
        return self.add(path)

    def qualified_name(self, name: ResourceInput) -> "ResourceBuilder":
        return self.add(name)

    def version(self, version: int) -> "ResourceBuilder":
        if isinstance(version, bool) or not isinstance(version, int) or version < 0:
            raise InvalidResource(repr(version))
        return self.add(ResourceIdentifier.unchecked(str(version)))

    def build_resource_path(self) -> ResourceIdentifier:
        return ResourceIdentifier.from_path(self._components)

    def build_qualified_id(self) -> ResourceIdentifier:
        return ResourceIdentifier.from_qualified(self._components)
