from typing import Dict, List

import typer_di

from arnkit.core.services import BaseServiceArns, load_services

from ..params import output_params
from .console import BOLD, CYAN, GREEN, GREY, RESET, RULE
from .render import dump


def _print_services(services_list: List[Dict]) -> None:
    print()
    print(RULE)
    print(f"{CYAN}{BOLD}Registered Service Helpers:{RESET}")
    print(RULE)
    print()
    if not services_list:
        print("  (none registered)")
        print()
        return

    for helper in services_list:
        types = ", ".join(helper["resource_types"])
        print(f"  {GREEN}•{RESET} {helper['name']:<28} {GREY}(service={helper['service']}; {types}){RESET}")

    print()
    print(RULE)
    print()


def services(output: str = typer_di.Depends(output_params)) -> None:
    """
    Lista os helpers de serviço registrados.
    """
    load_services()

    services_list = [
        {
            "name": helper.__name__,
            "service": helper.service,
            "resource_types": list(helper.resource_types),
        }
        for helper in sorted(BaseServiceArns.registry, key=lambda c: c.service)
    ]

    if not dump(services_list, output):
        _print_services(services_list)
