"""CLI commands for dbdatagen."""

import logging
import sys

import click

from dbdatagen.config import Settings
from dbdatagen.exceptions import ConfigurationError, DataGenError

logger = logging.getLogger(__name__)


def _connect(settings: Settings):
    """Open a pyodbc connection from the configured connection string."""
    if not settings.connection_string:
        raise ConfigurationError(
            "No connection string configured.\n\n"
            "Suggestions:\n"
            "1. Set connection_string in dbdatagen.toml\n"
            "2. Export DBDATAGEN_CONNECTION_STRING"
        )
    import pyodbc

    return pyodbc.connect(settings.connection_string, autocommit=False)


def _fail(error: Exception) -> None:
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(package_name="dbdatagen")
@click.option("--verbose", "-v", is_flag=True, help="Log emitted SQL and generation details")
@click.option(
    "--config-file",
    type=click.Path(exists=True, dir_okay=False),
    help="Settings file (default: nearest dbdatagen.toml)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_file: str | None) -> None:
    """dbdatagen - synthetic data for SQL Server tables."""
    try:
        settings = Settings.from_toml(config_file) if config_file else Settings.find_and_load()
    except ConfigurationError as e:
        _fail(e)

    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = settings


@cli.command()
@click.argument("config", type=click.Path(exists=True, dir_okay=False))
@click.option("--table", "tables", multiple=True, help="Only these tables (repeatable)")
@click.option("--exclude-table", "exclude_tables", multiple=True, help="Skip these tables")
@click.option("--column", "columns", multiple=True, help="Only these columns")
@click.option("--exclude-column", "exclude_columns", multiple=True, help="Skip these columns")
@click.option("--dry-run", is_flag=True, help="Print the T-SQL instead of running it")
@click.pass_obj
def generate(
    settings: Settings,
    config: str,
    tables: tuple[str, ...],
    exclude_tables: tuple[str, ...],
    columns: tuple[str, ...],
    exclude_columns: tuple[str, ...],
    dry_run: bool,
) -> None:
    """Fill the tables of a configuration document with synthetic rows."""
    from dbdatagen.backends import DirectBackend, StagingBackend
    from dbdatagen.document import load_document
    from dbdatagen.orchestrator import DataGenerator

    try:
        document = load_document(config)
        if dry_run:
            backend = StagingBackend(batch_size=settings.batch_size)
        else:
            backend = DirectBackend(_connect(settings), batch_size=settings.batch_size)

        results = DataGenerator(backend, settings).run(
            document,
            tables=tables or None,
            exclude_tables=exclude_tables or None,
            columns=columns or None,
            exclude_columns=exclude_columns or None,
        )
    except DataGenError as e:
        _fail(e)

    if dry_run:
        for statement in backend.statements:
            click.echo(statement)
            click.echo("GO")

    for result in results:
        line = f"{result.schema}.{result.table}: {result.status}, {result.rows} rows"
        if result.skipped_columns:
            line += f" (skipped columns: {', '.join(result.skipped_columns)})"
        if result.error:
            line += f"\n  {result.error}"
        click.echo(line, err=dry_run)

    if not all(result.succeeded for result in results):
        sys.exit(1)


@cli.command()
@click.argument("kind")
@click.option("--min", "min_value", help="Lower bound (number, length or date)")
@click.option("--max", "max_value", help="Upper bound (number, length or date)")
@click.option("--precision", type=int, help="Decimal digits")
@click.option("--charset", help="Characters for random strings")
@click.option("--format", "fmt", help="Template where '#' marks a generated character")
@click.option("--separator", help="Separator, e.g. for MAC addresses")
@click.option("--value", help="Input for Random.Shuffle and Random.Replace")
@click.option("--count", type=int, default=1, help="Number of values (default: 1)")
@click.pass_obj
def value(
    settings: Settings,
    kind: str,
    min_value: str | None,
    max_value: str | None,
    precision: int | None,
    charset: str | None,
    fmt: str | None,
    separator: str | None,
    value: str | None,
    count: int,
) -> None:
    """
    Generate random values of KIND.

    KIND is a native type ("int", "datetime2") or a Category.SubType pair
    ("Internet.Email", "Address.ZipCode").
    """
    from dbdatagen.generators import RandomizerCatalog, ValueGenerator
    from dbdatagen.models import GenerationRequest

    try:
        request = GenerationRequest.parse(
            kind,
            min=min_value,
            max=max_value,
            precision=precision,
            character_set=charset,
            format=fmt,
            separator=separator,
            value=value,
            locale=settings.locale,
        )
        generator = ValueGenerator(RandomizerCatalog.for_locale(settings.locale, settings.seed))
        for _ in range(count):
            click.echo(generator.generate(request))
    except DataGenError as e:
        _fail(e)


@cli.command()
@click.option("--category", help="Only this category")
@click.option("--pattern", help="Only subtypes containing this text")
def types(category: str | None, pattern: str | None) -> None:
    """List the available Category.SubType pairs."""
    from dbdatagen.generators import list_types

    try:
        pairs = list_types(category, pattern)
    except DataGenError as e:
        _fail(e)

    for cat, subtype_name in pairs:
        click.echo(f"{cat.value:<10} {subtype_name}")


@cli.command()
@click.argument("template", default="PersonalData")
@click.option("--rows", type=int, default=10, help="Number of rows (default: 10)")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "csv"]),
    default="json",
    help="Output format (default: json)",
)
@click.option("--output", type=click.Path(dir_okay=False), help="Write to file instead of stdout")
@click.pass_obj
def dataset(
    settings: Settings, template: str, rows: int, fmt: str, output: str | None
) -> None:
    """Generate rows from a dataset TEMPLATE (name or file) without a database."""
    from dbdatagen.dataset import generate_dataset, write_dataset
    from dbdatagen.generators import RandomizerCatalog

    try:
        data = generate_dataset(
            template, rows, RandomizerCatalog.for_locale(settings.locale, settings.seed)
        )
    except DataGenError as e:
        _fail(e)

    if output:
        with open(output, "w", encoding="utf-8", newline="") as f:
            write_dataset(data, f, fmt)
        click.echo(f"Wrote {len(data)} rows to {output}", err=True)
    else:
        write_dataset(data, sys.stdout, fmt)


@cli.command()
@click.option("--schema", default="dbo", help="Schema to describe (default: dbo)")
@click.option("--table", "tables", multiple=True, help="Only these tables (repeatable)")
@click.option("--rows", type=int, default=1000, help="Rows per table (default: 1000)")
@click.option("--truncate", is_flag=True, help="Set TruncateTable on every table")
@click.option("--output", required=True, type=click.Path(dir_okay=False), help="Document file")
@click.pass_obj
def config(
    settings: Settings,
    schema: str,
    tables: tuple[str, ...],
    rows: int,
    truncate: bool,
    output: str,
) -> None:
    """Write a configuration document describing tables of the database."""
    from dbdatagen.introspection import SchemaIntrospector

    try:
        conn = _connect(settings)
        try:
            document = SchemaIntrospector(conn, schema).build_document(
                list(tables) or None, rows=rows, truncate=truncate
            )
        finally:
            conn.close()
    except DataGenError as e:
        _fail(e)

    document.to_json(output)
    click.echo(f"Wrote {len(document.tables)} table(s) to {output}")


if __name__ == "__main__":
    cli()
