"""Command-line interface for seo-head.

Renders page heads from page data files and explains presenter selection.
All presenters are auto-discovered via the registry.
"""

import json
import logging
import sys
import tomllib
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console

from .constants import PAGE_HEAD_ACTION, PRODUCT_NAME, TITLE_FILTER
from .core.actions import ActionHub
from .core.catalogue import CATALOGUE
from .core.config_manager import ConfigManager, Options
from .core.context import ContextMemoizer, PagePresentationProvider, PageRequest, PageType
from .core.frontend import FrontEnd
from .core.host import ConfiguredHost
from .core.registry import registry
from .presenters.protocol import VerbosityLevel
from .renderers import CLIRenderer, JSONRenderer
from .utils.helpers import HelpersSurface, get_product_version
from .utils.logger import setup_logger
from .utils.replace_vars import ReplaceVars

logger = logging.getLogger(__name__)

app = typer.Typer(
    name=PRODUCT_NAME,
    help="SEO head tag output for web pages",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()

VerbosityOption = Annotated[
    str,
    typer.Option(
        "--verbosity",
        "-v",
        help="Output verbosity: quiet, normal, verbose, debug",
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration file",
        exists=True,
        dir_okay=False,
    ),
]


# ============================================================================
# Validation Functions
# ============================================================================


def validate_verbosity(value: str) -> VerbosityLevel:
    """
    Validate verbosity level.

    Args:
        value: Verbosity level string

    Returns:
        Verbosity level

    Raises:
        typer.BadParameter: If verbosity is invalid
    """
    try:
        return VerbosityLevel(value.lower())
    except ValueError:
        valid_levels = ", ".join(level.value for level in VerbosityLevel)
        raise typer.BadParameter(
            f"Invalid verbosity: {value}. Must be one of: {valid_levels}"
        ) from None


def validate_page_type(value: str) -> PageType:
    """
    Validate a page type name.

    Raises:
        typer.BadParameter: If the page type is unknown
    """
    try:
        return PageType(value)
    except ValueError:
        valid_types = ", ".join(page_type.value for page_type in PageType)
        raise typer.BadParameter(
            f"Unknown page type: {value}. Must be one of: {valid_types}"
        ) from None


# ============================================================================
# Helper Functions
# ============================================================================


def _setup(verbosity: str, config_file: Path | None) -> ConfigManager:
    """Configure logging and load configuration."""
    setup_logger(level=validate_verbosity(verbosity))

    config_manager = ConfigManager()
    try:
        if config_file:
            config_manager.load_from_files(extra_paths=[config_file])
        else:
            config_manager.load_from_files()
    except Exception as e:
        logger.warning(f"Failed to load configuration: {e}")
        # Continue with defaults
    return config_manager


def _load_page(page_file: Path) -> dict[str, Any]:
    """
    Read page data from a JSON or TOML file.

    Raises:
        typer.Exit: If the file cannot be read or is not a mapping
    """
    try:
        if page_file.suffix == ".toml":
            with open(page_file, "rb") as f:
                data = tomllib.load(f)
        else:
            with open(page_file, encoding="utf-8") as f:
                data = json.load(f)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error: Failed to read page data from {page_file}: {e}[/red]")
        raise typer.Exit(1)

    if not isinstance(data, dict):
        console.print(f"[red]Error: Page data in {page_file} must be a mapping[/red]")
        raise typer.Exit(1)
    return data


def _build_front_end(
    config_manager: ConfigManager,
    options: Options | None = None,
    host: ConfiguredHost | None = None,
) -> FrontEnd:
    """Wire a FrontEnd from loaded configuration."""
    options = options or config_manager.options
    host = host or config_manager.host
    memoizer = ContextMemoizer(PagePresentationProvider(options))
    return FrontEnd(
        memoizer=memoizer,
        options=options,
        host=host,
        helpers=HelpersSurface(options=options),
        replace_vars=ReplaceVars(),
    )


# ============================================================================
# Commands
# ============================================================================


@app.command()
def head(
    page_file: Annotated[
        Path,
        typer.Argument(help="Page data file (JSON or TOML)", exists=True, dir_okay=False),
    ],
    verbosity: VerbosityOption = "normal",
    config_file: ConfigOption = None,
):
    """
    Print the SEO head of a page.

    The page file holds a mapping with at least a page_type key.

    Example:
        seo-head head page.json
        seo-head head page.toml --config site.toml
    """
    config_manager = _setup(verbosity, config_file)
    page = _load_page(page_file)

    front_end = _build_front_end(config_manager)
    actions = ActionHub()
    front_end.register_hooks(actions)

    try:
        actions.do_action(PAGE_HEAD_ACTION, PageRequest(page=page), sys.stdout)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def title(
    page_file: Annotated[
        Path,
        typer.Argument(help="Page data file (JSON or TOML)", exists=True, dir_okay=False),
    ],
    verbosity: VerbosityOption = "normal",
    config_file: ConfigOption = None,
):
    """
    Print the page title as bare text.

    This is the text a theme that prints its own <title> tag would use.
    """
    config_manager = _setup(verbosity, config_file)
    page = _load_page(page_file)

    front_end = _build_front_end(config_manager)
    actions = ActionHub()
    front_end.register_hooks(actions)

    try:
        text = actions.apply_filters(TITLE_FILTER, "", PageRequest(page=page))
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    sys.stdout.write(text + "\n")


@app.command()
def plan(
    page_type: Annotated[
        str,
        typer.Argument(help="Page type (e.g. Post_Type, Term_Archive, Error_Page)"),
    ],
    opengraph: Annotated[
        bool | None,
        typer.Option("--opengraph/--no-opengraph", help="Override the opengraph option"),
    ] = None,
    twitter: Annotated[
        bool | None,
        typer.Option("--twitter/--no-twitter", help="Override the twitter option"),
    ] = None,
    theme_title_tag: Annotated[
        bool,
        typer.Option("--theme-title-tag", help="Theme prints its own <title> tag"),
    ] = False,
    force_rewrite_title: Annotated[
        bool,
        typer.Option("--force-rewrite-title", help="Output <title> anyway"),
    ] = False,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: cli, json"),
    ] = "cli",
    verbosity: VerbosityOption = "normal",
    config_file: ConfigOption = None,
):
    """
    Show which presenters a page type gets, in output order.

    Example:
        seo-head plan Post_Type
        seo-head plan Term_Archive --no-twitter --verbosity verbose
        seo-head plan Error_Page --format json
    """
    page_type_value = validate_page_type(page_type)
    config_manager = _setup(verbosity, config_file)
    verbosity_level = validate_verbosity(verbosity)

    updates: dict[str, bool] = {}
    if opengraph is not None:
        updates["opengraph"] = opengraph
    if twitter is not None:
        updates["twitter"] = twitter
    if force_rewrite_title:
        updates["forcerewritetitle"] = True
    options = Options(config_manager.site_options.model_copy(update=updates))

    host_config = config_manager.host_config
    if theme_title_tag:
        host_config = host_config.model_copy(update={"theme_outputs_title_tag": True})
    host = ConfiguredHost(host_config)

    if output_format == "cli":
        renderer = CLIRenderer(
            verbosity=verbosity_level,
            color=config_manager.global_config.color,
        )
    elif output_format == "json":
        renderer = JSONRenderer(verbosity=verbosity_level)
    else:
        console.print(f"[red]Error: Unknown output format: {output_format}[/red]")
        console.print("Available formats: cli, json")
        raise typer.Exit(1)

    front_end = _build_front_end(config_manager, options=options, host=host)
    renderer.render_plan(front_end.explain(page_type_value, verbosity_level))


@app.command()
def list_presenters() -> None:
    """
    List all catalogued presenters.

    Shows presenter ID and name grouped by category.
    """
    console.print("[bold blue]Available Presenters[/bold blue]\n")

    for category in CATALOGUE.category_names():
        console.print(f"[cyan]{category.upper()}[/cyan]")
        for presenter_id in CATALOGUE.category(category):
            metadata = registry.get(presenter_id)
            name = metadata.name if metadata else "[yellow]not registered[/yellow]"
            console.print(f"  • {presenter_id:36} - {name}")
        console.print()


@app.command()
def create_config(
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output file path",
        ),
    ] = Path(".seo-head.toml"),
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite existing file",
        ),
    ] = False,
):
    """
    Create a default configuration file.

    Example:
        seo-head create-config
        seo-head create-config --output ~/.config/seo-head/config.toml
    """
    if output.exists() and not force:
        console.print(f"[yellow]File already exists: {output}[/yellow]")
        console.print("Use --force to overwrite")
        raise typer.Exit(1)

    config_manager = ConfigManager()

    try:
        config_manager.create_default_config_file(output)
        console.print(f"[green]✓ Created configuration file: {output}[/green]")
    except Exception as e:
        console.print(f"[red]✗ Failed to create config: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"{PRODUCT_NAME} version {get_product_version()}")


# ============================================================================
# Entry Point
# ============================================================================


def main() -> None:
    """Main entry point for CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        console.print(f"[red]Unexpected error: {e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
