"""
ARNs do Lambda.

https://docs.aws.amazon.com/IAM/latest/UserGuide/list_awslambda.html
"""

from typing import Dict, Optional

from ..arn import ResourceName
from ..builder import AccountInput, ArnBuilder, IdentifierInput, ResourceBuilder
from ..known import Service
from .base import BaseServiceArns


class LambdaArns(BaseServiceArns):
    service = Service.LAMBDA.value
    resource_types = ("function", "layer", "event-source-mapping")

    @classmethod
    def _build(
        cls,
        region: IdentifierInput,
        account: AccountInput,
        resource: ResourceBuilder,
        partition: Optional[IdentifierInput],
    ) -> ResourceName:
        return (
            ArnBuilder.service(Service.LAMBDA)
            .in_partition(cls._partition(partition))
            .in_region(region)
            .owned_by(account)
            .is_(resource.build_qualified_id())
            .build()
        )

    @classmethod
    def function(
        cls,
        region: IdentifierInput,
        account: AccountInput,
        function_name: IdentifierInput,
        qualifier: Optional[IdentifierInput] = None,
        partition: Optional[IdentifierInput] = None,
    ) -> ResourceName:
        """
        `arn:${Partition}:lambda:${Region}:${Account}:function:${FunctionName}`

        Com `qualifier` (versão ou alias) acrescenta `:${Qualifier}`.
        """
        resource = ResourceBuilder.typed("function").type_name(function_name)
        if qualifier is not None:
            resource.type_name(qualifier)
        return cls._build(region, account, resource, partition)

    @classmethod
    def layer(
        cls,
        region: IdentifierInput,
        account: AccountInput,
        layer_name: IdentifierInput,
        partition: Optional[IdentifierInput] = None,
    ) -> ResourceName:
        """
        `arn:${Partition}:lambda:${Region}:${Account}:layer:${LayerName}`
        """
        resource = ResourceBuilder.typed("layer").type_name(layer_name)
        return cls._build(region, account, resource, partition)

    @classmethod
    def layer_version(
        cls,
        region: IdentifierInput,
        account: AccountInput,
        layer_name: IdentifierInput,
        layer_version: int,
        partition: Optional[IdentifierInput] = None,
    ) -> ResourceName:
        """
        `arn:${Partition}:lambda:${Region}:${Account}:layer:${LayerName}:${LayerVersion}`
        """
        resource = ResourceBuilder.typed("layer").type_name(layer_name).version(layer_version)
        return cls._build(region, account, resource, partition)

    @classmethod
    def event_source_mapping(
        cls,
        region: IdentifierInput,
        account: AccountInput,
        mapping_uuid: IdentifierInput,
        partition: Optional[IdentifierInput] = None,
    ) -> ResourceName:
        """
        `arn:${Partition}:lambda:${Region}:${Account}:event-source-mapping:${UUID}`
        """
        resource = ResourceBuilder.typed("event-source-mapping").type_name(mapping_uuid)
        return cls._build(region, account, resource, partition)

    @classmethod
    def describe(cls, arn: ResourceName) -> Dict[str, str]:
        segments = [str(s) for s in arn.resource.qualifier_split()]
        if len(segments) == 1:
            return {"type": "", "name": segments[0]}

        out = {"type": segments[0], "name": segments[1]}
        if len(segments) > 2:
            out["qualifier"] = ":".join(segments[2:])
        return out
