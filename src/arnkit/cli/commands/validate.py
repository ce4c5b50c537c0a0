from typing import Any, Dict, List

import typer
import typer_di

from arnkit.core import validation
from arnkit.core.arn import ResourceName
from arnkit.core.models import ArnError
from arnkit.core.validation import Rules

from ..params import output_params, rules_params
from .console import BOLD, GREEN, GREY, RED, RESET, RULE
from .render import dump


def _check(raw: str, rules: Rules) -> Dict[str, Any]:
    try:
        arn = validation.validate(ResourceName.parse(raw), rules)
    except ArnError as e:
        return {"arn": raw, "valid": False, "error": str(e), "kind": e.kind.value}

    rule = validation.find_rule(arn, rules)
    return {"arn": raw, "valid": True, "rule": rule.key if rule else None}


def _print_results(results: List[Dict[str, Any]]) -> None:
    print()
    print(RULE)
    for item in results:
        if item["valid"]:
            rule = item["rule"] or "core"
            print(f"  {GREEN}✔{RESET} {item['arn']} {GREY}(rule={rule}){RESET}")
        else:
            print(f"  {RED}✘{RESET} {item['arn']}")
            print(f"    {item['error']} {GREY}({item['kind']}){RESET}")
    print(RULE)

    invalid = sum(1 for item in results if not item["valid"])
    if invalid:
        print(f"{RED}{BOLD}{invalid} ARN(s) inválido(s).{RESET}")
    else:
        print(f"{GREEN}{BOLD}Todos os ARNs são válidos.{RESET}")
    print()


def validate(
    arns: List[str] = typer.Argument(..., help="ARN(s) para validar."),
    rules: Rules = typer_di.Depends(rules_params),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Valida ARNs com o parser e as regras por serviço.

    Sai com código 1 se algum ARN for inválido.
    """
    results = [_check(raw, rules) for raw in arns]

    if not dump(results, output):
        _print_results(results)

    if not all(item["valid"] for item in results):
        raise typer.Exit(code=1)
