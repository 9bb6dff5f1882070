"""Bridge query commands - run count, retrieve or search against an adapter."""

import json
from typing import Callable, Optional, Tuple

import click

from bridgemock.adapters import BridgeAdapter, get_adapter
from bridgemock.cli.utils import BridgeConsole, format_error
from bridgemock.config import load_properties
from bridgemock.core.errors import BridgeError
from bridgemock.core.models import BridgeRequest

console = BridgeConsole()


def _parse_pairs(ctx, param, values: Tuple[str, ...]) -> dict:
    """Click callback turning repeated KEY=VALUE options into a dict."""
    pairs = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got '{item}'")
        pairs[key] = value
    return pairs


def request_options(func: Callable) -> Callable:
    """Options shared by every query command."""
    options = [
        click.option('--structure', '-s', required=True, help='Structure (record type) to query'),
        click.option('--field', '-f', 'fields', multiple=True, help='Field to return (repeatable)'),
        click.option('--query', '-q', default='', help='Query, may reference <%=parameter["NAME"]%>'),
        click.option('--param', '-p', 'parameters', multiple=True, callback=_parse_pairs,
                     help='Request parameter as KEY=VALUE (repeatable)'),
        click.option('--meta', '-m', 'metadata', multiple=True, callback=_parse_pairs,
                     help='Request metadata as KEY=VALUE (repeatable)'),
        click.option('--adapter', '-a', default=None, help='Registered adapter to use (default: $BRIDGE_ADAPTER)'),
        click.option('--config', '-c', 'config_path', type=click.Path(dir_okay=False), default=None,
                     help='YAML file of adapter property values'),
        click.option('--json', 'json_output', is_flag=True, help='Output JSON instead of rich text'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_adapter(adapter_key: Optional[str], config_path: Optional[str]) -> BridgeAdapter:
    adapter = get_adapter(adapter_key)
    properties = load_properties(config_path) if config_path else {}
    return adapter.configure(properties)


def _run(operation: str, json_output: bool, adapter_key, config_path, **request_kwargs):
    try:
        adapter = _build_adapter(adapter_key, config_path)
        request = BridgeRequest(**request_kwargs)
        result = getattr(adapter, operation)(request)
    except BridgeError as e:
        if json_output:
            click.echo(json.dumps({"error": e.message}, indent=2))
        else:
            console.print(format_error(f"{operation.capitalize()} failed: {e.message}"))
        raise click.exceptions.Exit(1)

    if json_output:
        click.echo(json.dumps(result.model_dump(), indent=2))
        return

    console.print_header(
        f"{adapter.name} v{adapter.version} ({adapter.settings.app_env}) - {operation} {request.structure}"
    )
    if operation == "count":
        console.print_count(result)
    elif operation == "retrieve":
        console.print_record(result)
    else:
        console.print_record_list(result)


def _command(operation: str, help_text: str) -> click.Command:
    @click.command(name=operation, help=help_text)
    @request_options
    def command(structure, fields, query, parameters, metadata, adapter, config_path, json_output):
        _run(
            operation,
            json_output,
            adapter,
            config_path,
            structure=structure,
            fields=list(fields),
            query=query,
            parameters=parameters,
            metadata=metadata,
        )
    return command


count = _command("count", "Count the records matching a query.\n\nExample:\n    bridgemock count -s Users -p count=7")
retrieve = _command("retrieve", "Retrieve a single record.\n\nExample:\n    bridgemock retrieve -s Users -f name -f id")
search = _command(
    "search",
    "Search for a page of records.\n\nExample:\n    bridgemock search -s Users -f name -m count=25 -m offset=20 -m pageSize=10",
)
