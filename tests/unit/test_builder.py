import pytest

from arnkit.core.builder import ArnBuilder, ResourceBuilder
from arnkit.core.known import Partition, Region, Service
from arnkit.core.models import (
    Identifier,
    InvalidAccountId,
    InvalidIdentifier,
    InvalidResource,
    MissingResource,
    ResourceIdentifier,
)


def test_build_lambda_layer_version():
    arn = (
        ArnBuilder.service(Service.LAMBDA)
        .resource(ResourceBuilder.typed("layer").resource_name("my-layer").version(3).build_qualified_id())
        .in_region(Region.US_EAST_2)
        .owned_by("123456789012")
        .build()
    )
    assert str(arn) == "arn:aws:lambda:us-east-2:123456789012:layer:my-layer:3"
    assert arn.partition is None


def test_build_with_partition_and_any():
    arn = (
        ArnBuilder.service("sqs")
        .in_partition(Partition.AWS_CHINA)
        .in_any_region()
        .in_any_account()
        .any_resource()
        .build()
    )
    assert str(arn) == "arn:aws-cn:sqs:*:*:*"
    assert arn.has_wildcards()


def test_build_default_partition_then_any_partition():
    builder = ArnBuilder.service(Service.S3).is_("bucket").in_default_partition()
    assert str(builder.build().partition) == "aws"
    assert builder.in_any_partition().build().partition is None


def test_aliases_set_the_same_field():
    a = ArnBuilder.service("sns").is_("topic").in_region("us-east-1").in_account("123456789012").build()
    b = ArnBuilder.service("sns").is_("topic").and_region("us-east-1").and_account("123456789012").build()
    assert a == b


def test_build_without_resource_fails():
    with pytest.raises(MissingResource):
        ArnBuilder.service("s3").build()


def test_builder_parses_strings():
    with pytest.raises(InvalidIdentifier):
        ArnBuilder.service("s 3")
    with pytest.raises(InvalidAccountId):
        ArnBuilder.service("s3").in_account("123")


def test_build_validates_unchecked_parts():
    builder = ArnBuilder.service(Identifier.unchecked("bad/service")).is_("x")
    with pytest.raises(InvalidIdentifier):
        builder.build()


def test_resource_builder_path():
    resource = (
        ResourceBuilder.typed("user")
        .resource_path("division_abc/subdivision_xyz")
        .resource_name("Bob")
        .build_resource_path()
    )
    assert resource == ResourceIdentifier.parse("user/division_abc/subdivision_xyz/Bob")


def test_resource_builder_qualified():
    resource = (
        ResourceBuilder.typed("function")
        .resource_name("my-fn")
        .qualified_name("PROD")
        .build_qualified_id()
    )
    assert str(resource) == "function:my-fn:PROD"


def test_resource_builder_named_and_sub_resource():
    resource = ResourceBuilder.named("my-bucket").sub_resource_name("thing-1").build_resource_path()
    assert str(resource) == "my-bucket/thing-1"


@pytest.mark.parametrize("version", [-1, "3", 1.5, True])
def test_resource_builder_rejects_bad_versions(version):
    with pytest.raises(InvalidResource):
        ResourceBuilder.typed("layer").version(version)


def test_resource_builder_empty_fails():
    with pytest.raises(InvalidResource):
        ResourceBuilder().build_qualified_id()
