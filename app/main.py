"""The ``_`` built-in: print the translation of a message."""

import typer

from core.logging import get_module_logger
from infrastructure.i18n import LocaleContext, create_translator

logger = get_module_logger()

cli = typer.Typer(add_completion=False)


# No flags are recognized: anything that looks like an option is the message.
@cli.command(
    context_settings={
        "help_option_names": [],
        "ignore_unknown_options": True,
    }
)
def underscore(message: str = typer.Argument(..., metavar="STRING")):
    """Translate STRING to the current language, if possible."""
    translator = create_translator(context=LocaleContext.from_environ())
    resolved = translator.resolve(message)
    logger.debug(
        "resolved_message",
        message=message,
        translated=resolved != message,
    )
    typer.echo(resolved)


def main():
    """Main function to run the command."""
    cli(prog_name="_")


if __name__ == "__main__":
    main()
