"""tdcache - Decode decrypted cache files from the command line."""
from __future__ import annotations

from pathlib import Path

import click

from tdcache_core.protocol import KeyType
from tdcache_decode.dispatch import parse_cache
from tdcache_decode.errors import CacheDecodeError
from tdcache_decode.records import KEY_TYPE_REGISTRY

from .serialize import canonical_json
from .tables import write_parquet


def _parse_key_type(ctx: click.Context, param: click.Parameter, value: str) -> int:
    """Accept a KeyType name (``locations``) or a number (``4``, ``0x04``)."""
    try:
        return KeyType[value.upper()]
    except KeyError:
        pass
    try:
        return int(value, 0)
    except ValueError:
        raise click.BadParameter(f"not a key type name or number: {value}")


def decode_file(path: Path, key_type: int) -> dict:
    try:
        result = parse_cache(path.read_bytes(), key_type)
    except CacheDecodeError as e:
        return {"status": "FAIL", "path": str(path), "error_count": 1, "errors": [e.as_dict()]}
    return {"status": "PASS", "path": str(path), "kind": type(result).__name__, "record": result}


key_type_option = click.option(
    "--key-type",
    "-k",
    required=True,
    callback=_parse_key_type,
    help="Record kind held by the file, by name or number.",
)


@click.group()
def main():
    pass


@main.command("decode")
@key_type_option
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path))
def decode_cmd(key_type: int, paths: tuple[Path, ...]):
    """Print one JSON line per decoded file. A bad file does not stop the rest."""
    failed = 0
    for path in paths:
        report = decode_file(path, key_type)
        if report["status"] != "PASS":
            failed += 1
        click.echo(canonical_json(report))
    if failed:
        raise SystemExit(1)


@main.command("export")
@key_type_option
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("out", type=click.Path(dir_okay=False, path_type=Path))
def export_cmd(key_type: int, path: Path, out: Path):
    """Write the decoded entries of PATH to OUT as parquet."""
    try:
        result = parse_cache(path.read_bytes(), key_type)
        written = write_parquet(result, out)
    except Exception as e:
        # Fail closed with a single-line reason.
        click.echo(f"FATAL: {e}")
        raise SystemExit(1)
    if written:
        click.echo(f"PASS: {out}")
    else:
        click.echo(f"EMPTY: nothing to write for {path}")


@main.command("key-types")
def key_types_cmd():
    """List key types and whether they can be decoded."""
    for key_type in KeyType:
        schema = KEY_TYPE_REGISTRY.get(key_type)
        layout = schema.layout.value if schema is not None else "-"
        click.echo(f"0x{int(key_type):02x} {key_type.name.lower():<26} {layout}")


if __name__ == "__main__":
    main()
