"""
Reflow Parser CLI Application.

Main entry point for the reflow-parse command-line interface. Parses text
files with one of the reference grammars and shows the resulting blocks.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .. import __version__
from ..core.block import Block, BlockType
from ..core.parsing import Grammar, parse_text
from ..exceptions import ReflowParserError
from ..exceptions.config_exceptions import ConfigurationError
from ..utils.config import ConfigManager
from ..utils.logging_config import LogFormat, setup_logging

# Initialize console for rich output
console = Console()

app = typer.Typer(
    name="reflow-parse",
    help="Split text into wrappable paragraphs and ignored regions",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Global state
_config_manager: Optional[ConfigManager] = None
_logger: Optional[logging.Logger] = None
_global_config: dict = {}

PREVIEW_WIDTH = 48


def get_config_manager(config_path: Optional[str] = None) -> ConfigManager:
    """
    Get or create the global configuration manager.
    
    Args:
        config_path: Optional path to configuration file
        
    Returns:
        ConfigManager instance
        
    Raises:
        typer.Exit: If configuration loading fails
    """
    global _config_manager
    
    if _config_manager is None or config_path:
        try:
            _config_manager = ConfigManager(config_file=config_path, load_env=True)
            _config_manager.load_config()
        except ConfigurationError as e:
            rprint(f"[red]Configuration Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)
        _apply_configured_log_level(_config_manager)
    
    return _config_manager


def _apply_configured_log_level(config_manager: ConfigManager) -> None:
    """Use logging.level from configuration unless --verbose was given."""
    global _logger
    if _global_config.get("verbose"):
        return
    
    log_format = LogFormat.JSON if _global_config.get("json_logs") else LogFormat.RICH
    _logger = setup_logging(log_format=log_format, level=config_manager.get("logging.level", "WARNING"))
    _global_config["logger"] = _logger


def get_global_config() -> dict:
    """Get the global configuration dictionary."""
    return _global_config


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[str] = typer.Option(
        None,
        "--config-path",
        "-c",
        help="Path to configuration file (default: reflow.config.json)",
        metavar="PATH",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging (DEBUG level)",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Write log records as JSON lines",
    ),
) -> None:
    """
    Reflow Parser CLI - inspect how text is split into blocks.
    
    Common workflows:
    • Show blocks: reflow-parse blocks notes.txt
    • Indent-aware paragraphs: reflow-parse blocks notes.txt --grammar indent
    • Show configuration: reflow-parse config
    """
    global _logger, _global_config, _config_manager
    _logger = setup_logging(verbose, LogFormat.JSON if json_logs else LogFormat.RICH)
    
    # Each invocation starts from fresh configuration
    _config_manager = None
    _global_config = {
        "config_path": config_path,
        "verbose": verbose,
        "json_logs": json_logs,
        "logger": _logger,
    }
    ctx.obj = _global_config.copy()


def _preview(block: Block) -> str:
    first_line = block.lines.head
    if len(first_line) > PREVIEW_WIDTH:
        first_line = first_line[:PREVIEW_WIDTH - 1] + "…"
    return first_line


def _blocks_table(blocks: List[Block], source: str) -> Table:
    table = Table(title=f"Blocks in {source}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Type", style="cyan")
    table.add_column("Lines", justify="right")
    table.add_column("Prefixes")
    table.add_column("First line")
    
    for index, block in enumerate(blocks, 1):
        if block.block_type == BlockType.TEXT:
            prefixes = block.wrappable.prefixes
            prefix_text = f"{prefixes.first_line!r} / {prefixes.continuation!r}"
        else:
            prefix_text = "-"
        
        table.add_row(
            str(index),
            block.block_type.value,
            str(len(block.lines)),
            prefix_text,
            Text(_preview(block)),
        )
    
    return table


@app.command()
def blocks(
    path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Text file to parse",
    ),
    grammar: Grammar = typer.Option(
        Grammar.PLAIN,
        "--grammar",
        "-g",
        help="Reference grammar to parse with",
        case_sensitive=False,
    ),
    tab_width: Optional[int] = typer.Option(
        None,
        "--tab-width",
        "-t",
        help="Columns per tab when measuring indentation (overrides configuration)",
    ),
    tidy_up_indents: Optional[bool] = typer.Option(
        None,
        "--tidy-up-indents/--keep-indents",
        help="Drop paragraph indentation instead of keeping it as prefixes",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print blocks as JSON instead of a table",
    ),
) -> None:
    """Parse a text file and show its blocks."""
    config_manager = get_config_manager(_global_config.get("config_path"))
    
    try:
        settings = config_manager.parser_settings(
            tab_width=tab_width,
            tidy_up_indents=tidy_up_indents,
        )
        document = path.read_text(encoding="utf-8")
        parsed = parse_text(document, settings, grammar)
    except ConfigurationError as e:
        rprint(f"[red]Configuration Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except ReflowParserError as e:
        rprint(f"[red]Parser Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except (OSError, UnicodeDecodeError) as e:
        rprint(f"[red]Error:[/red] Could not read {path}: {escape(str(e))}")
        raise typer.Exit(1)
    
    if as_json:
        typer.echo(json.dumps([block.to_dict() for block in parsed], indent=2, ensure_ascii=False))
    else:
        console.print(_blocks_table(parsed.to_list(), path.name))


@app.command()
def config() -> None:
    """Show the effective configuration."""
    config_manager = get_config_manager(_global_config.get("config_path"))
    effective = config_manager.config
    
    info_text = Text()
    info_text.append(f"Config file: {config_manager.config_file}\n")
    info_text.append(f"Project root: {config_manager.project_root}\n\n")
    info_text.append(json.dumps(effective, indent=2))
    
    console.print(Panel(info_text, title="Configuration", border_style="blue"))


@app.command()
def version() -> None:
    """Show version information."""
    rprint(f"Reflow Parser [blue]v{__version__}[/blue]")


if __name__ == "__main__":
    app()
