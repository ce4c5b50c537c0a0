import importlib
import logging
import pkgutil
from typing import Type

from ..arn import ResourceName
from .base import BaseServiceArns

logger = logging.getLogger(__name__)

_loaded = False


def load_services() -> None:
    """
    Garante que todos os módulos em arnkit.core.services.* foram importados,
    para que o __init_subclass__ do BaseServiceArns tenha rodado
    e populado o registry.

    Um helper importado direto (ex.: `services.s3`) não conta como
    descoberta feita; só a varredura completa marca `_loaded`.
    """
    global _loaded
    if _loaded:
        return

    for _, name, _ in pkgutil.iter_modules(__path__, __name__ + "."):
        if name.endswith(".base"):
            continue
        logger.debug("loading service helpers from %s", name)
        importlib.import_module(name)

    _loaded = True


def get_helper_for_arn(arn: ResourceName) -> Type[BaseServiceArns]:
    """
    Resolve o helper do serviço do ARN, disparando o auto-discovery
    na primeira chamada.
    """
    load_services()

    for helper_cls in BaseServiceArns.registry:
        if helper_cls.supports(arn):
            return helper_cls

    raise LookupError(f"Nenhum helper encontrado para o ARN: {arn}")


def get_helper_for_service(service: str) -> Type[BaseServiceArns]:
    load_services()

    service = service.lower()
    for helper_cls in BaseServiceArns.registry:
        if helper_cls.service.lower() == service:
            return helper_cls

    raise LookupError(f"Nenhum helper encontrado para o serviço '{service}'.")
