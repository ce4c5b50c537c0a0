from typing import Dict, List

import typer
import typer_di

from arnkit.core.arn import ResourceName
from arnkit.core.models import ArnError

from ..params import output_params
from .console import BOLD, CYAN, GREY, RED, RESET, RULE, YELLOW
from .render import dump, error_entry


def _parse_vars(pairs: List[str]) -> Dict[str, str]:
    context: Dict[str, str] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise typer.BadParameter(f"Variável deve ser nome=valor, recebido: {pair!r}")
        context[name] = value
    return context


def substitute(
    arn: str = typer.Argument(..., help="ARN com placeholders ${nome} no resource."),
    variables: List[str] = typer.Option(
        None,
        "--var",
        help="Valor de uma variável, nome=valor. Pode ser repetido.",
    ),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Substitui as variáveis ${nome} do resource de um ARN.

    Ex:
    arnkit substitute 'arn:aws:iam::123456789012:user/${aws:username}' --var aws:username=Bob
    """
    context = _parse_vars(variables or [])

    try:
        original = ResourceName.parse(arn)
        result = original.replace_variables(context)
    except ArnError as e:
        if not dump(error_entry(arn, e), output):
            print(f"{RED}{BOLD}ERRO:{RESET} {e}")
        raise typer.Exit(code=1)

    data = {
        "input": arn,
        "arn": str(result),
        "unresolved": result.resource.variable_names(),
    }

    if dump(data, output):
        return

    print(RULE)
    print(f"{GREY}{arn}{RESET}")
    print(f"{CYAN}{BOLD}{result}{RESET}")
    if data["unresolved"]:
        print(f"{YELLOW}sem valor:{RESET} {', '.join(data['unresolved'])}")
    print(RULE)
