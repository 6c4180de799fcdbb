"""andor command-line interface."""

import logging
from typing import Any

import rich_click as click
from rich.logging import RichHandler

from andor.examples import GLOBAL_EXAMPLE_OPTIONS, ExampleInfo, OptionInfo

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def configure_logging(level: str) -> None:
    """Route library log records through a rich handler."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="andor")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default="WARNING", show_default=True,
              help="Logging level for search diagnostics")
def main(log_level: str) -> None:
    """andor: AND-OR search for conditional plans."""
    configure_logging(log_level)


@main.group(invoke_without_command=True)
@click.pass_context
def example(ctx: click.Context) -> None:
    """Run example planning scenarios."""
    if ctx.invoked_subcommand is None:
        # No subcommand given - list examples
        from andor.examples import EXAMPLES

        click.echo("Available examples:\n")
        for name, info in EXAMPLES.items():
            click.echo(f"  {name:24} {info['description']}")
        click.echo("\nRun an example with: andor example <name>")


def _apply_option(cmd: Any, opt: OptionInfo) -> Any:
    option_name = opt["name"]
    param_name = opt.get("param_name", option_name.lstrip("-").replace("-", "_"))
    if opt.get("is_flag", False):
        return click.option(option_name, param_name, is_flag=True, default=opt.get("default", False),
                            help=opt.get("help", ""))(cmd)
    extra_kwargs: dict[str, Any] = {}
    if "type" in opt:
        extra_kwargs["type"] = opt["type"]
    return click.option(option_name, param_name, default=opt.get("default"), show_default=True,
                        help=opt.get("help", ""), **extra_kwargs)(cmd)


def _make_example_command(name: str, info: ExampleInfo) -> None:
    """Create and register a click command for an example."""
    description = info["description"]
    options = info.get("options", [])

    @example.command(name, help=description)
    def _run(**kwargs: object) -> None:
        from andor.examples import EXAMPLES

        example_info = EXAMPLES[name]
        click.echo(f"Running example: {name}")
        click.echo(f"  {example_info['description']}\n")
        example_fn = example_info["main"]
        example_fn(**kwargs)

    # Example-specific options, then the options every example accepts
    for opt in reversed(options + GLOBAL_EXAMPLE_OPTIONS):
        _run = _apply_option(_run, opt)


def _register_examples() -> None:
    from andor.examples import EXAMPLES

    for name, info in EXAMPLES.items():
        _make_example_command(name, info)


_register_examples()


if __name__ == "__main__":
    main()
