from importlib.metadata import PackageNotFoundError, version

import typer


def get_version() -> str:
    """
    Versão instalada do arnkit, ou "unknown" quando rodando sem metadados.
    """
    try:
        return version("arnkit")
    except PackageNotFoundError:
        return "unknown"


def version_callback(value: bool) -> None:
    if value:
        print(get_version())
        raise typer.Exit()
