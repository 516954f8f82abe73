"""
Command-line interface for Janus Platform.

Provides commands for invoking plugin methods and inspecting the
platform providers.
"""

from __future__ import annotations

import json
import logging
import platform
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from janus_platform import __version__
from janus_platform.channel import NOT_IMPLEMENTED, MethodChannel
from janus_platform.config import Config
from janus_platform.errors import MissingPluginError
from janus_platform.methods import METHOD_DESCRIPTIONS, supported_methods
from janus_platform.platforms import PROVIDERS, detect_provider_name, get_provider
from janus_platform.plugin import register_plugins
from janus_platform.registry import PluginRegistry

console = Console()

EXIT_NOT_IMPLEMENTED = 3


def setup_logging(level: str, log_file: str | None = None) -> None:
    """Configure logging with rich handler."""
    handlers: list[logging.Handler] = [RichHandler(console=console, rich_tracebacks=True)]
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=handlers,
        force=True,
    )


@click.group()
@click.version_option(version=__version__, prog_name="janus-platform")
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "-V",
    "--verbose",
    is_flag=True,
    help="Enable verbose output",
)
@click.pass_context
def main(ctx: click.Context, config: Path | None, verbose: bool) -> None:
    """
    Janus Platform - host OS version plugin.

    Invoke methods on the plugin channel and inspect platform providers.
    """
    ctx.ensure_object(dict)

    if config:
        ctx.obj["config"] = Config.load(config)
    else:
        ctx.obj["config"] = Config.load()

    log_level = "DEBUG" if verbose else ctx.obj["config"].log_level
    setup_logging(log_level, ctx.obj["config"].log_file)
    ctx.obj["verbose"] = verbose


@main.command()
@click.argument("method")
@click.option(
    "--arguments",
    "-a",
    "arguments_json",
    default=None,
    help="Call arguments as a JSON document",
)
@click.option(
    "--format",
    "-f",
    type=click.Choice(["json", "pretty"]),
    default="pretty",
    help="Output format",
)
@click.pass_context
def invoke(ctx: click.Context, method: str, arguments_json: str | None, format: str) -> None:
    """
    Invoke METHOD on the plugin channel.

    Exits with status 3 when the plugin has no implementation for METHOD.
    """
    config: Config = ctx.obj["config"]

    arguments = None
    if arguments_json is not None:
        try:
            arguments = json.loads(arguments_json)
        except json.JSONDecodeError as e:
            raise click.BadParameter(f"Invalid JSON: {e}", param_hint="--arguments")

    try:
        registry = register_plugins(PluginRegistry(), config)
        channel = MethodChannel(config.channel_name, registry)
        result = channel.invoke_method(method, arguments)
    except (MissingPluginError, ValueError) as e:
        console.print(f"[red]✗ {e}[/]")
        ctx.exit(1)

    implemented = result is not NOT_IMPLEMENTED

    if format == "json":
        console.print_json(
            json.dumps(
                {
                    "channel": config.channel_name,
                    "method": method,
                    "implemented": implemented,
                    "result": result if implemented else None,
                }
            )
        )
    elif implemented:
        console.print(result, markup=False, highlight=False, soft_wrap=True)
    else:
        console.print(f"[yellow]Method not implemented:[/] {method}")

    if not implemented:
        ctx.exit(EXIT_NOT_IMPLEMENTED)


@main.command("list")
def list_methods() -> None:
    """List all methods supported on the plugin channel."""
    table = Table(title="Supported Methods", show_header=True)
    table.add_column("Method", style="cyan")
    table.add_column("Description")

    for method in supported_methods():
        table.add_row(method.value, METHOD_DESCRIPTIONS.get(method, ""))

    console.print()
    console.print(table)


@main.command("platforms")
def list_platforms() -> None:
    """List all available platform providers."""
    detected = detect_provider_name()

    table = Table(title="Platform Providers", show_header=True)
    table.add_column("Name", style="cyan")
    table.add_column("OS Name")
    table.add_column("Description")
    table.add_column("Active", justify="center")

    for name, cls in PROVIDERS.items():
        table.add_row(
            name,
            cls.os_name if name != "generic" else "[dim]platform.system()[/]",
            cls.description,
            "[green]✓[/]" if name == detected else "",
        )

    console.print()
    console.print(table)


@main.command("version", short_help="Display version information")
def version() -> None:
    """Display version information for Janus Platform."""
    console.print()
    console.print(
        Panel.fit(
            f"[bold blue]Janus Platform[/]\nVersion: [cyan]{__version__}[/]",
            border_style="blue",
            title="Version Information",
        )
    )
    console.print()

    table = Table(show_header=False, box=None)
    table.add_column("Component", style="dim", width=20)
    table.add_column("Version", style="cyan")

    table.add_row("Janus Platform", __version__)
    table.add_row("Python", platform.python_version())

    console.print(table)
    console.print()


@main.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show current configuration and the selected platform provider."""
    config: Config = ctx.obj["config"]

    console.print()
    console.print(
        Panel.fit(
            "[bold]Janus Platform Status[/]",
            border_style="blue",
        )
    )

    table = Table(show_header=False, box=None)
    table.add_column("Setting", style="dim")
    table.add_column("Value")

    table.add_row("Channel", config.channel_name)
    table.add_row("Platform Override", config.platform_override or "[dim]Not set[/]")
    table.add_row("Log Level", config.log_level)
    table.add_row("Log File", config.log_file or "[dim]Not set[/]")

    console.print(table)

    try:
        provider = get_provider(override=config.platform_override)
    except ValueError as e:
        console.print(f"[red]✗ {e}[/]")
        ctx.exit(1)

    console.print()
    details = Table(title="Platform", show_header=False, box=None)
    details.add_column("Field", style="dim")
    details.add_column("Value", style="cyan")
    for key, value in provider.describe().items():
        details.add_row(key, str(value) if value else "[dim]-[/]")

    console.print(details)


@main.command()
@click.argument("output_path", type=click.Path(path_type=Path))
def init_config(output_path: Path) -> None:
    """
    Generate a sample configuration file.

    Creates a YAML configuration file with all available options
    and helpful comments.
    """
    sample_config = """# Janus Platform Configuration

# Channel shared with the host application shell
channel:
  # Must match the name the host uses, or calls are never delivered
  name: janus_flutter

# Platform provider selection
platform:
  # Force a provider: ios, macos, windows, linux, generic
  # (null = detect from the running system)
  override: null

# Logging
logging:
  # Log level: DEBUG, INFO, WARNING, ERROR
  level: INFO

  # Log file path (null = stderr only)
  file: null
"""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(sample_config)
    console.print(f"[green]✓ Configuration file created: {output_path}[/]")
    console.print()
    console.print("Next steps:")
    console.print("  1. Edit the channel name if your host uses a different one")
    console.print("  2. Query the platform: [cyan]janus invoke getPlatformVersion[/]")


if __name__ == "__main__":
    main()
