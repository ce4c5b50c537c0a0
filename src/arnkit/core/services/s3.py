"""
ARNs do S3.

https://docs.aws.amazon.com/IAM/latest/UserGuide/list_amazons3.html
"""

from typing import Dict, Optional

from ..arn import ResourceName
from ..builder import (
    AccountInput,
    ArnBuilder,
    IdentifierInput,
    ResourceBuilder,
    ResourceInput,
    as_resource,
)
from ..known import Service
from ..models import Identifier, InvalidService, ResourceIdentifier
from .base import BaseServiceArns


class S3Arns(BaseServiceArns):
    service = Service.S3.value
    resource_types = ("bucket", "object", "job")

    @classmethod
    def bucket(cls, bucket_name: IdentifierInput, partition: Optional[IdentifierInput] = None) -> ResourceName:
        """
        `arn:${Partition}:s3:::${BucketName}`
        """
        return (
            ArnBuilder.service(Service.S3)
            .in_partition(cls._partition(partition))
            .is_(ResourceBuilder.named(Identifier.parse(str(bucket_name))).build_resource_path())
            .build()
        )

    @classmethod
    def object(
        cls,
        bucket_name: IdentifierInput,
        object_name: ResourceInput,
        partition: Optional[IdentifierInput] = None,
    ) -> ResourceName:
        """
        `arn:${Partition}:s3:::${BucketName}/${ObjectName}`
        """
        return (
            ArnBuilder.service(Service.S3)
            .in_partition(cls._partition(partition))
            .is_(
                ResourceBuilder.named(Identifier.parse(str(bucket_name)))
                .resource_path(object_name)
                .build_resource_path()
            )
            .build()
        )

    @classmethod
    def object_from(cls, bucket: ResourceName, object_name: ResourceInput) -> ResourceName:
        """
        Object ARN derived from a bucket ARN; every other field is kept.

        Raises `InvalidService` when `bucket` is not an S3 ARN.
        """
        if not cls.supports(bucket):
            raise InvalidService(str(bucket.service))
        return bucket.with_resource(ResourceIdentifier.from_path([bucket.resource, as_resource(object_name)]))

    @classmethod
    def job(
        cls,
        region: IdentifierInput,
        account: AccountInput,
        job_id: IdentifierInput,
        partition: Optional[IdentifierInput] = None,
    ) -> ResourceName:
        """
        `arn:${Partition}:s3:${Region}:${Account}:job/${JobId}`
        """
        return (
            ArnBuilder.service(Service.S3)
            .in_partition(cls._partition(partition))
            .in_region(region)
            .owned_by(account)
            .is_(ResourceBuilder.typed("job").resource_name(Identifier.parse(str(job_id))).build_resource_path())
            .build()
        )

    @classmethod
    def describe(cls, arn: ResourceName) -> Dict[str, str]:
        if arn.region is not None and cls.resource_type_of(arn) == "job":
            _, _, job_id = str(arn.resource).partition("/")
            return {"type": "job", "job_id": job_id}

        bucket, _, key = str(arn.resource).partition("/")
        if not key:
            return {"type": "bucket", "bucket": bucket}
        return {"type": "object", "bucket": bucket, "key": key}
