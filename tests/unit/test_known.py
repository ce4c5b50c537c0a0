from arnkit.core.known import Partition, Region, Service
from arnkit.core.models import Identifier


def test_partition_default():
    assert Partition.default() is Partition.AWS
    assert Partition.default().identifier == Identifier.parse("aws")


def test_known_values_are_valid_identifiers():
    for enum in (Partition, Region, Service):
        for member in enum:
            assert Identifier.parse(member.value) == member.identifier


def test_known_str():
    assert str(Service.COGNITO_IDENTITY) == "cognito-identity"
    assert str(Region.SA_EAST_1) == "sa-east-1"
    assert Service("iam") is Service.IDENTITY_ACCESS_MANAGEMENT
