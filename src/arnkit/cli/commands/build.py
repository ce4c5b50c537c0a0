from typing import Optional

import typer
import typer_di

from arnkit.core.builder import ArnBuilder
from arnkit.core.models import ArnError

from ..params import output_params
from .console import BOLD, CYAN, RED, RESET, RULE
from .render import dump, error_entry


def build(
    service: str = typer.Option(..., "--service", "-s", help="Namespace do serviço (iam, s3, lambda...)."),
    resource: str = typer.Option(..., "--resource", "-r", help="Resource, ex.: user/Bob ou function:my-fn."),
    partition: Optional[str] = typer.Option(None, "--partition", help="Partition (aws, aws-cn, aws-us-gov)."),
    region: Optional[str] = typer.Option(None, "--region", help="Region, ex.: sa-east-1."),
    account: Optional[str] = typer.Option(None, "--account", help="Account ID (12 dígitos)."),
    any_region: bool = typer.Option(False, "--any-region", help="Usa '*' como region."),
    any_account: bool = typer.Option(False, "--any-account", help="Usa '*' como account."),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Monta um ARN a partir das partes.

    Ex:
    arnkit build -s iam -r user/Bob --partition aws --account 123456789012
    """
    if region and any_region:
        raise typer.BadParameter("Use --region ou --any-region, não os dois.")
    if account and any_account:
        raise typer.BadParameter("Use --account ou --any-account, não os dois.")

    try:
        builder = ArnBuilder.service(service).resource(resource)
        if partition:
            builder.in_partition(partition)
        if region:
            builder.in_region(region)
        elif any_region:
            builder.in_any_region()
        if account:
            builder.in_account(account)
        elif any_account:
            builder.in_any_account()
        arn = builder.build()
    except ArnError as e:
        if not dump(error_entry(f"{service} {resource}", e), output):
            print(f"{RED}{BOLD}ERRO:{RESET} {e}")
        raise typer.Exit(code=1)

    if not dump(arn.to_dict(), output):
        print(RULE)
        print(f"{CYAN}{BOLD}{arn}{RESET}")
        print(RULE)
