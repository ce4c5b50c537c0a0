"""
ARNs do IAM.

https://docs.aws.amazon.com/IAM/latest/UserGuide/list_identityandaccessmanagement.html
"""

from typing import Dict, Optional

from ..arn import ACCOUNT_ROOT, ResourceName
from ..builder import AccountInput, ArnBuilder, IdentifierInput, ResourceBuilder, ResourceInput, as_account
from ..known import Service
from ..models import Identifier
from .base import BaseServiceArns


class IAMArns(BaseServiceArns):
    service = Service.IDENTITY_ACCESS_MANAGEMENT.value
    resource_types = ("root", "user", "role", "group", "policy")

    @classmethod
    def root(cls, account: AccountInput) -> ResourceName:
        """
        `arn:aws:iam::123456789012:root`
        """
        return as_account(account).root_arn()

    @classmethod
    def _named(
        cls,
        resource_type: str,
        account: AccountInput,
        name: ResourceInput,
        partition: Optional[IdentifierInput],
    ) -> ResourceName:
        return (
            ArnBuilder.service(Service.IDENTITY_ACCESS_MANAGEMENT)
            .in_partition(cls._partition(partition))
            .owned_by(account)
            .is_(ResourceBuilder.typed(Identifier.unchecked(resource_type)).resource_name(name).build_resource_path())
            .build()
        )

    @classmethod
    def user(cls, account: AccountInput, user_name: ResourceInput, partition: Optional[IdentifierInput] = None) -> ResourceName:
        """
        `arn:${Partition}:iam::${Account}:user/${UserNameWithPath}`
        """
        return cls._named("user", account, user_name, partition)

    @classmethod
    def role(cls, account: AccountInput, role_name: ResourceInput, partition: Optional[IdentifierInput] = None) -> ResourceName:
        """
        `arn:${Partition}:iam::${Account}:role/${RoleNameWithPath}`
        """
        return cls._named("role", account, role_name, partition)

    @classmethod
    def group(cls, account: AccountInput, group_name: ResourceInput, partition: Optional[IdentifierInput] = None) -> ResourceName:
        """
        `arn:${Partition}:iam::${Account}:group/${GroupNameWithPath}`
        """
        return cls._named("group", account, group_name, partition)

    @classmethod
    def policy(cls, account: AccountInput, policy_name: ResourceInput, partition: Optional[IdentifierInput] = None) -> ResourceName:
        """
        `arn:${Partition}:iam::${Account}:policy/${PolicyNameWithPath}`
        """
        return cls._named("policy", account, policy_name, partition)

    @classmethod
    def describe(cls, arn: ResourceName) -> Dict[str, str]:
        value = str(arn.resource)
        if value == ACCOUNT_ROOT:
            return {"type": ACCOUNT_ROOT, "account": str(arn.account_id or "")}

        segments = [str(s) for s in arn.resource.path_split()]
        if len(segments) == 1:
            return {"type": "", "name": value}

        # role/path/to/MyRole -> path "/path/to/", name "MyRole"
        resource_type, *middle, name = segments
        path = "/" + "/".join(middle) + "/" if middle else "/"
        return {"type": resource_type, "path": path, "name": name}
