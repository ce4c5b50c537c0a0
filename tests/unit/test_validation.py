from pathlib import Path

import pytest

from arnkit.core import validation
from arnkit.core.arn import ResourceName
from arnkit.core.models import (
    AccountIdWildcardNotAllowed,
    InvalidPartition,
    InvalidResource,
    MissingAccountId,
    MissingPartition,
    MissingRegion,
    RegionWildcardNotAllowed,
    ResourceIdentifier,
    ResourceWildcardNotAllowed,
)
from arnkit.core.validation import ResourceFormat


@pytest.mark.parametrize(
    "resource, expected",
    [
        ("my-queue", (None, ResourceFormat.ID)),
        ("user/org/Bob", ("user", ResourceFormat.PATH)),
        ("function:my-fn", ("function", ResourceFormat.TYPE_ID)),
        ("layer:my-layer:3", ("layer", ResourceFormat.QTYPE_ID)),
        ("identitypool/us-east-1:abc", ("identitypool", ResourceFormat.PATH)),
        ("log-group:/aws/lambda/fn:*", ("log-group", ResourceFormat.QTYPE_ID)),
    ],
)
def test_resource_shape(resource, expected):
    assert validation.resource_shape(ResourceIdentifier.parse(resource)) == expected


def test_default_rules_load():
    rules = validation.load_rules()
    assert "iam-user" in rules
    assert rules["lambda-function"].resource_formats == (ResourceFormat.TYPE_ID, ResourceFormat.QTYPE_ID)
    assert validation.load_rules() is rules


def test_load_rules_from_file(rules_file: Path):
    rules = validation.load_rules(rules_file)
    assert set(rules) == {"iam-user", "sqs"}
    assert rules["sqs"].region_wc_allowed
    assert not rules["sqs"].account_wc_allowed


def test_load_rules_empty_file(tmp_path: Path):
    p = tmp_path / "empty.yaml"
    p.write_text("", encoding="utf-8")
    assert validation.load_rules(p) == {}


@pytest.mark.parametrize(
    "content",
    [
        "- name: iam\n  resource_format: Id\n",
        "format: iam\n",
        "format:\n  - iam\n",
    ],
)
def test_load_rules_rejects_bad_shape(tmp_path: Path, content):
    p = tmp_path / "bad.yaml"
    p.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        validation.load_rules(p)


def test_is_registered():
    assert validation.is_registered("iam", ResourceIdentifier.parse("user/Bob"))
    assert validation.is_registered("sqs", ResourceIdentifier.parse("queue"))
    assert not validation.is_registered("iam", ResourceIdentifier.parse("server-certificate/x"))
    assert not validation.is_registered("nope", ResourceIdentifier.parse("x"))


@pytest.mark.parametrize(
    "arn",
    [
        "arn:aws:iam::123456789012:user/Bob",
        "arn:aws:iam::123456789012:user/*",
        "arn:aws:iam::aws:policy/ReadOnlyAccess",
        "arn:aws:lambda:us-east-1:123456789012:function:my-fn",
        "arn:aws:lambda:us-east-1:123456789012:function:my-fn:PROD",
        "arn:aws:sqs:*:*:queue-*",
        "arn:aws:cognito-identity:us-east-1:123456789012:identitypool/us-east-1:abc",
        # sem regra: só a validação básica
        "arn:aws:s3:::my-bucket/*",
    ],
)
def test_validate_ok(arn):
    parsed = ResourceName.parse(arn)
    assert validation.validate(parsed) is parsed


@pytest.mark.parametrize(
    "arn, error",
    [
        ("arn::iam::123456789012:user/Bob", MissingPartition),
        ("arn:aws:iam:::user/Bob", MissingAccountId),
        ("arn:aws:lambda::123456789012:function:f", MissingRegion),
        ("arn:aws:lambda:us-*:123456789012:function:f", RegionWildcardNotAllowed),
        ("arn:aws:lambda:us-east-1:12345678901*:function:f", AccountIdWildcardNotAllowed),
        ("arn:aws:iam::123456789012:policy/*", ResourceWildcardNotAllowed),
        ("arn:aws:iam::123456789012:group/*", ResourceWildcardNotAllowed),
        ("arn:aws:lambda:us-east-1:123456789012:layer:*", ResourceWildcardNotAllowed),
        ("arn:aws:lambda:us-east-1:123456789012:event-source-mapping:a:b", InvalidResource),
        ("arn:aws:lambda:us-east-1:123456789012:function::PROD", InvalidResource),
        ("arn:aws:sqs:us-east-1:123456789012:a/b", InvalidResource),
    ],
)
def test_validate_rejects(arn, error):
    with pytest.raises(error):
        validation.validate(ResourceName.parse(arn))


def test_validate_runs_core_checks_first():
    from arnkit.core.models import Identifier

    arn = ResourceName(partition=Identifier.unchecked("gcp"), service="iam", resource="user/Bob")
    with pytest.raises(InvalidPartition):
        validation.validate(arn)


def test_validate_with_custom_rules(rules_file: Path):
    rules = validation.load_rules(rules_file)
    arn = ResourceName.parse("arn:aws:lambda::123456789012:function:f")
    # lambda não está nesse arquivo
    assert validation.validate(arn, rules) is arn

    with pytest.raises(ResourceWildcardNotAllowed):
        validation.validate(ResourceName.parse("arn:aws:iam::123456789012:user/*"), rules)
