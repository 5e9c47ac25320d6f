import typer

from llapctl import handoff
from llapctl.config import Config
from llapctl.errors import LlapOptionsError, ParseSyntaxError
from llapctl.logging import setup_logger
from llapctl.processor import LlapOptionsProcessor

# Every token belongs to the options processor, including -h and --help
app = typer.Typer(add_completion=False)


@app.command(context_settings={
    "allow_extra_args": True,
    "ignore_unknown_options": True,
    "help_option_names": [],
})
def main(ctx: typer.Context):
    """LLAP launcher - validate cluster options and hand them to the launcher."""
    try:
        Config.validate()
    except ValueError as e:
        typer.echo(f"❌ Error: {e}", err=True)
        raise typer.Exit(code=1)

    logger = setup_logger("llapctl")
    processor = LlapOptionsProcessor()

    try:
        configuration = processor.process(ctx.args)
    except ParseSyntaxError as e:
        typer.echo(f"❌ Error: {e}", err=True)
        processor.print_usage()
        raise typer.Exit(code=1)
    except LlapOptionsError as e:
        typer.echo(f"❌ Error: {e}", err=True)
        raise typer.Exit(code=1)

    if configuration is None:
        # usage was printed
        raise typer.Exit(code=0)

    # Write before echoing so a failed write leaves nothing on stdout
    if configuration.directory:
        try:
            path = handoff.write_document(configuration)
        except OSError as e:
            typer.echo(f"❌ Error: {e}", err=True)
            raise typer.Exit(code=1)
        logger.info(f"✅ Launcher configuration written to {path}")

    typer.echo(handoff.dumps(configuration))


if __name__ == "__main__":
    app()
