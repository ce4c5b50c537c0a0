"""
Service specific ARN rules, loaded from a YAML table.

Each rule is keyed by the service name, or by `service-resource_type` when the
rule only applies to one resource type:

    format:
      - name: iam
        resource_type: user
        partition_required: true
        region_required: false
        account_id_required: true
        resource_format: Path
        resource_wc_allowed: true

An ARN with no matching rule only goes through `ResourceName.validate()`.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from .arn import ResourceName
from .models import (
    AccountIdWildcardNotAllowed,
    InvalidResource,
    MissingAccountId,
    MissingPartition,
    MissingRegion,
    RegionWildcardNotAllowed,
    ResourceIdentifier,
    ResourceWildcardNotAllowed,
)
from .models.IdentifierLike import PART_SEPARATOR, PATH_SEPARATOR, WILDCARD_CHARS

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = Path(__file__).parent / "data" / "service-formats.yaml"


class ResourceFormat(str, Enum):
    ID = "Id"
    PATH = "Path"
    TYPE_ID = "TypeId"
    QTYPE_ID = "QTypeId"


@dataclass(frozen=True)
class ServiceArnFormat:
    name: str
    resource_formats: Tuple[ResourceFormat, ...]
    resource_type: Optional[str] = None
    partition_required: bool = False
    region_required: bool = False
    region_wc_allowed: bool = False
    account_id_required: bool = False
    account_wc_allowed: bool = False
    resource_wc_allowed: bool = False

    @property
    def key(self) -> str:
        return make_key(self.name, self.resource_type)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ServiceArnFormat":
        data = dict(data)
        raw_format = data.pop("resource_format")
        if isinstance(raw_format, str):
            raw_format = [raw_format]
        return cls(resource_formats=tuple(ResourceFormat(f) for f in raw_format), **data)


Rules = Dict[str, ServiceArnFormat]


def make_key(service: str, resource_type: Optional[str]) -> str:
    if resource_type:
        return f"{service}-{resource_type}"
    return service


def load_rules(path: Union[str, Path, None] = None) -> Rules:
    """
    Lê a tabela de regras. Sem `path` usa a tabela que vem com o pacote.
    """
    if path is None:
        return _default_rules()
    return _read_rules(Path(path))


@lru_cache(maxsize=1)
def _default_rules() -> Rules:
    return _read_rules(DEFAULT_RULES_PATH)


def _read_rules(path: Path) -> Rules:
    content = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(content, dict):
        raise ValueError(f"{path}: esperado um mapa com a chave 'format'")

    entries = content.get("format") or []
    if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
        raise ValueError(f"{path}: 'format' deve ser uma lista de regras")

    formats = [ServiceArnFormat.from_dict(e) for e in entries]
    logger.debug("loaded %d ARN rules from %s", len(formats), path)
    return {f.key: f for f in formats}


def first_separator(value: str) -> Optional[str]:
    """
    ':' ou '/', o que aparecer primeiro em `value`.
    """
    for c in value:
        if c in (PART_SEPARATOR, PATH_SEPARATOR):
            return c
    return None


def resource_shape(resource: ResourceIdentifier) -> Tuple[Optional[str], ResourceFormat]:
    """
    Classifica o resource:

    - `type:id:qualifier...` -> ("type", QTypeId)
    - `type:id`              -> ("type", TypeId)
    - `type/a/b`             -> ("type", Path)
    - `id`                   -> (None, Id)

    O primeiro separador decide: `identitypool/us-east-1:uuid` é Path.
    """
    value = str(resource)
    separator = first_separator(value)
    if separator is None:
        return None, ResourceFormat.ID
    if separator == PATH_SEPARATOR:
        return value.split(PATH_SEPARATOR, 1)[0], ResourceFormat.PATH

    parts = value.split(PART_SEPARATOR)
    if len(parts) > 2:
        return parts[0], ResourceFormat.QTYPE_ID
    return parts[0], ResourceFormat.TYPE_ID


def find_rule(arn: ResourceName, rules: Optional[Rules] = None) -> Optional[ServiceArnFormat]:
    rules = load_rules() if rules is None else rules
    service = str(arn.service)
    resource_type, _ = resource_shape(arn.resource)
    return rules.get(make_key(service, resource_type)) or rules.get(service)


def is_registered(service: str, resource: ResourceIdentifier, rules: Optional[Rules] = None) -> bool:
    rules = load_rules() if rules is None else rules
    resource_type, _ = resource_shape(resource)
    return make_key(service, resource_type) in rules or service in rules


def _has_wildcards(value: str) -> bool:
    return any(c in WILDCARD_CHARS for c in value)


def _check_resource(rule: ServiceArnFormat, resource: ResourceIdentifier) -> None:
    if resource.is_any():
        if not rule.resource_wc_allowed:
            raise ResourceWildcardNotAllowed(str(resource))
        return

    _, shape = resource_shape(resource)
    if shape not in rule.resource_formats:
        raise InvalidResource(str(resource))

    if shape in (ResourceFormat.ID, ResourceFormat.PATH):
        if not rule.resource_wc_allowed and resource.has_wildcards():
            raise ResourceWildcardNotAllowed(str(resource))
        return

    resource_type, *rest = [str(p) for p in resource.qualifier_split()]
    if not resource_type or any(not p for p in rest):
        raise InvalidResource(str(resource))
    # o tipo nunca aceita curinga
    if _has_wildcards(resource_type):
        raise ResourceWildcardNotAllowed(str(resource))
    if not rule.resource_wc_allowed and any(_has_wildcards(p) for p in rest):
        raise ResourceWildcardNotAllowed(str(resource))


def validate(arn: ResourceName, rules: Optional[Rules] = None) -> ResourceName:
    """
    `arn.validate()` plus the matching service rule, if there is one.

    Raises the first failure found; returns the ARN unchanged when it passes.
    """
    arn.validate()

    rule = find_rule(arn, rules)
    if rule is None:
        logger.debug("no rule for %s, core validation only", arn)
        return arn

    logger.debug("checking %s against rule %s", arn, rule.key)

    if rule.partition_required and arn.partition is None:
        raise MissingPartition()

    if arn.region is None:
        if rule.region_required:
            raise MissingRegion()
    elif not rule.region_wc_allowed and arn.region.has_wildcards():
        raise RegionWildcardNotAllowed(str(arn.region))

    if arn.account_id is None:
        if rule.account_id_required:
            raise MissingAccountId()
    elif not rule.account_wc_allowed and arn.account_id.has_wildcards():
        raise AccountIdWildcardNotAllowed(str(arn.account_id))

    _check_resource(rule, arn.resource)
    return arn
