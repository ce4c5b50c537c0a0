from pathlib import Path
from typing import Optional

import typer
import yaml

from arnkit.core.validation import Rules, load_rules


def output_params(
    output: str = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: text (default), json ou yaml.",
    ),
    out_json: bool = typer.Option(False, "--json", help="Alias para --output json"),
    out_yaml: bool = typer.Option(False, "--yaml", help="Alias para --output yaml"),
    out_text: bool = typer.Option(False, "--text", help="Alias para --output text"),
) -> str:
    output_options = [
        out_json,
        out_yaml,
        out_text,
        output is not None,  # só conta se o usuário forneceu --output
    ]

    if sum(output_options) > 1:
        raise typer.BadParameter(
            "Use apenas uma opção de output: --json, --yaml, --text ou --output."
        )

    if out_json:
        output = "json"
    elif out_yaml:
        output = "yaml"
    elif out_text:
        output = "text"

    if output not in {"json", "yaml", "text"}:
        output = "text"

    return output


def rules_params(
    rules_file: Optional[Path] = typer.Option(
        None,
        "--rules",
        envvar="ARNKIT_RULES",
        help="Arquivo YAML com as regras por serviço (default: tabela embutida).",
    ),
) -> Rules:
    """
    Carrega a tabela de regras, do arquivo informado ou a embutida no pacote.
    """
    if rules_file is not None and not rules_file.is_file():
        raise typer.BadParameter(f"Arquivo de regras não encontrado: {rules_file}")

    try:
        return load_rules(rules_file)
    except (yaml.YAMLError, TypeError, ValueError, KeyError) as e:
        raise typer.BadParameter(f"Arquivo de regras inválido ({rules_file}): {e}") from e
