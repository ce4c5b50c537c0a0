"""
ARNs do Cognito Identity.

https://docs.aws.amazon.com/IAM/latest/UserGuide/list_amazoncognitoidentity.html
"""

from typing import Dict, Optional

from ..arn import ResourceName
from ..builder import AccountInput, ArnBuilder, IdentifierInput, ResourceBuilder, ResourceInput
from ..known import Service
from .base import BaseServiceArns


class CognitoIdentityArns(BaseServiceArns):
    service = Service.COGNITO_IDENTITY.value
    resource_types = ("identitypool",)

    @classmethod
    def identity_pool(
        cls,
        region: IdentifierInput,
        account: AccountInput,
        identity_pool_id: ResourceInput,
        partition: Optional[IdentifierInput] = None,
    ) -> ResourceName:
        """
        `arn:${Partition}:cognito-identity:${Region}:${Account}:identitypool/${IdentityPoolId}`

        O id do pool tem ':' (`us-east-1:uuid`), por isso entra como resource.
        """
        return (
            ArnBuilder.service(Service.COGNITO_IDENTITY)
            .in_partition(cls._partition(partition))
            .in_region(region)
            .owned_by(account)
            .is_(ResourceBuilder.typed("identitypool").resource_name(identity_pool_id).build_resource_path())
            .build()
        )

    @classmethod
    def describe(cls, arn: ResourceName) -> Dict[str, str]:
        resource_type, _, pool_id = str(arn.resource).partition("/")
        return {"type": resource_type, "identity_pool_id": pool_id}
