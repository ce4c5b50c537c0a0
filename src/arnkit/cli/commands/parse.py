from typing import Any, Dict, List

import typer
import typer_di

from arnkit.core import validation
from arnkit.core.arn import ResourceName
from arnkit.core.models import ArnError
from arnkit.core.services import get_helper_for_arn
from arnkit.core.validation import Rules

from ..params import output_params, rules_params
from .console import BOLD, CYAN, GREY, RED, RESET, RULE, YELLOW
from .render import dump, error_entry


def describe_arn(arn: ResourceName) -> Dict[str, Any]:
    """
    Campos do ARN mais a quebra do resource em path/qualificadores.
    """
    resource = arn.resource
    data: Dict[str, Any] = arn.to_dict()
    resource_type, resource_format = validation.resource_shape(resource)
    data["resource_type"] = resource_type
    data["resource_format"] = resource_format.value
    if resource.contains_qualified():
        data["qualifiers"] = [str(p) for p in resource.qualifier_split()]
    elif resource.contains_path():
        data["path"] = [str(p) for p in resource.path_split()]
    data["wildcards"] = arn.has_wildcards()
    data["variables"] = resource.variable_names()
    try:
        data["details"] = get_helper_for_arn(arn).describe(arn)
    except LookupError:
        pass
    return data


def _print_parsed(results: List[Dict[str, Any]]) -> None:
    print()
    for item in results:
        print(RULE)
        if "error" in item:
            print(f"{RED}{BOLD}INVALID:{RESET} {item['input']}")
            print(f"  {item['error']} {GREY}({item['kind']}){RESET}")
            continue

        print(f"{CYAN}{BOLD}{item['arn']}{RESET}")
        for key in ("partition", "service", "region", "account_id", "resource", "resource_type"):
            value = item[key] if item[key] is not None else f"{GREY}(vazio){RESET}"
            print(f"  {key:<14} {value}")
        for key in ("qualifiers", "path"):
            if key in item:
                print(f"  {key:<14} {' | '.join(item[key])}")
        if item["wildcards"]:
            print(f"  {YELLOW}contém curingas{RESET}")
        for key, value in (item.get("details") or {}).items():
            print(f"  {GREY}{key:<14}{RESET} {value}")
        if item["variables"]:
            print(f"  {YELLOW}variáveis:{RESET} {', '.join(item['variables'])}")
    print(RULE)
    print()


def parse(
    arns: List[str] = typer.Argument(..., help="ARN(s) para decodificar."),
    check: bool = typer.Option(
        False,
        "--validate",
        help="Aplica também as regras por serviço.",
    ),
    rules: Rules = typer_di.Depends(rules_params),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Decodifica ARNs e mostra cada campo.

    Ex:
    arnkit parse arn:aws:iam::123456789012:user/Bob
    arnkit parse arn:aws:lambda:us-east-2:123456789012:function:fn --validate --json
    """
    results: List[Dict[str, Any]] = []
    failed = False

    for raw in arns:
        try:
            arn = ResourceName.parse(raw)
            if check:
                validation.validate(arn, rules)
        except ArnError as e:
            failed = True
            results.append(error_entry(raw, e))
            continue
        results.append(describe_arn(arn))

    if not dump(results, output):
        _print_parsed(results)

    if failed:
        raise typer.Exit(code=1)
