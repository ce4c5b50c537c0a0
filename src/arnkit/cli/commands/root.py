import typer
import typer_di

from arnkit.core.models import AccountIdentifier, ArnError

from ..params import output_params
from .console import BOLD, CYAN, RED, RESET
from .render import dump, error_entry


def root(
    account: str = typer.Argument(..., help="Account ID (12 dígitos)."),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Mostra o ARN do root principal de uma conta.
    """
    try:
        arn = AccountIdentifier.parse(account).root_arn()
    except ArnError as e:
        if not dump(error_entry(account, e), output):
            print(f"{RED}{BOLD}ERRO:{RESET} {e}")
        raise typer.Exit(code=1)

    if not dump(arn.to_dict(), output):
        print(f"{CYAN}{BOLD}{arn}{RESET}")
