import json
import logging
import os
import click
from jinja2 import Environment, PackageLoader, select_autoescape
from .errors import TtlSchemaError
from .registry import load_builtin_schemas, parse_uploaded_schema


def _load_entries(input_path):
    if os.path.isdir(input_path):
        return load_builtin_schemas(input_path)
    with open(input_path, 'rb') as f:
        content = f.read()
    return [parse_uploaded_schema(os.path.basename(input_path), content)]


def _to_json(entries):
    return json.dumps([
        {
            "id": e.id,
            "name": e.name,
            "description": e.description,
            "fileName": e.file_name,
            "isUserUploaded": e.is_user_uploaded,
            "parsed": e.parsed.to_dict(),
        }
        for e in entries
    ], indent=2, ensure_ascii=False)


@click.command()
@click.argument('input_path', type=click.Path(exists=True))
@click.option('--output', '-o', default=None, help='Write the report to this file instead of stdout.')
@click.option('--format', 'fmt', type=click.Choice(['text', 'json']), default='text', help='Report format.')
@click.option('--export', 'export_dir', default=None, help='Directory to copy the raw Turtle source(s) into.')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging.')
def main(input_path, output, fmt, export_dir, verbose):
    """Summarize the classes, properties and instances of a Turtle schema.

    INPUT_PATH is either a .ttl file or a directory holding a registry.json.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    click.echo(f"Parsing schemas from {input_path}...", err=True)
    try:
        entries = _load_entries(input_path)
    except TtlSchemaError as e:
        raise click.ClickException(str(e))

    for entry in entries:
        doc = entry.parsed
        click.echo(f"{entry.file_name}: found {len(doc.classes)} classes, {len(doc.properties)} properties, "
                   f"{len(doc.instances)} instances, {len(doc.prefixes)} prefixes.", err=True)

    if fmt == 'json':
        report = _to_json(entries)
    else:
        env = Environment(
            loader=PackageLoader("ttlschema"),
            autoescape=select_autoescape()
        )
        report = env.get_template("summary.txt").render(entries=entries)

    if output:
        output_dir = os.path.dirname(os.path.abspath(output))
        if not os.path.exists(output_dir):
            os.makedirs(output_dir)
        with open(output, 'w', encoding='utf-8') as f:
            f.write(report)
        click.echo(f"Report written to {output}", err=True)
    else:
        click.echo(report)

    # Raw source is copied verbatim, comments and formatting included
    if export_dir:
        os.makedirs(export_dir, exist_ok=True)
        for entry in entries:
            # registry files may live in subdirectories; export flat
            dst = os.path.join(export_dir, os.path.basename(entry.file_name))
            with open(dst, 'w', encoding='utf-8', newline='') as f:
                f.write(entry.parsed.raw)
            click.echo(f"Exported source to {dst}", err=True)

if __name__ == '__main__':
    main()
