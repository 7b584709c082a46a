"""validate json documents against a draft-04 schema from the command line"""
import json
import logging
import pathlib
import typing

import typer

from . import utils, validators

app = typer.Typer(add_completion=False)


@app.command()
def main(
    schema: pathlib.Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="the json schema file"
    ),
    instances: typing.List[pathlib.Path] = typer.Argument(
        ..., exists=True, dir_okay=False, help="the json documents to validate"
    ),
    unique_items: typing.Optional[str] = typer.Option(
        None, "--unique-items", help="uniqueItems semantics, pairwise or adjacent"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="log debug messages"),
):
    """validate each INSTANCE against SCHEMA, exit 1 if any fails"""
    import rich.console
    import rich.logging
    import rich.markup

    console = rich.console.Console()
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[rich.logging.RichHandler(console=rich.console.Console(stderr=True))],
    )

    try:
        mode = utils.get_unique_items_mode(unique_items)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--unique-items")

    try:
        validator = validators.get_validator(json.loads(schema.read_text()), mode)
    except ValueError as e:
        # SchemaError and json.JSONDecodeError are both ValueErrors
        console.print(f"[red]invalid schema[/red] {rich.markup.escape(str(schema))}")
        console.print(rich.markup.escape(str(e)))
        raise typer.Exit(code=2)

    failed = 0
    for instance in instances:
        name = rich.markup.escape(str(instance))
        try:
            object = json.loads(instance.read_text())
        except ValueError as e:
            failed += 1
            console.print(
                f"[red]invalid json[/red] {name}: {rich.markup.escape(str(e))}"
            )
            continue
        report = validator.audit(object)
        if report:
            console.print(f"[green]ok[/green] {name}")
        else:
            failed += 1
            console.print(f"[red]failed[/red] {name}")
            console.print(rich.markup.escape(report.report()))
    raise typer.Exit(code=1 if failed else 0)


if __name__ == "__main__":
    app()
