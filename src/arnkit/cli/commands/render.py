import json
from typing import Any

import typer
import yaml

from arnkit.core.models import ArnError


def dump(data: Any, output: str) -> bool:
    """
    Emite `data` como json ou yaml. Devolve False quando o output é text,
    deixando a impressão colorida para o comando.
    """
    if output == "json":
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return True

    if output == "yaml":
        typer.echo(yaml.safe_dump(data, sort_keys=False, allow_unicode=True))
        return True

    return False


def error_entry(raw: str, error: ArnError) -> dict:
    return {"input": raw, "error": str(error), "kind": error.kind.value}
