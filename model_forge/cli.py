"""
Command-line interface for model generation.

Usage:
    model-forge generate data.json --language go --option package_name=models
    model-forge generate --stdin -l python < data.json
    model-forge languages
    model-forge info rust
"""

import argparse
import sys
from pathlib import Path
from typing import Any, List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import (
    ConfigError,
    RegistryError,
    generate_code,
    get_generator,
    get_language_info,
    get_registry,
    list_all_language_info,
)
from .codegen.core.config import load_options, parse_option_overrides
from .logging_config import get_logger, setup_logging
from .utils import (
    InputValidationError,
    JSONLoaderError,
    load_json,
    load_json_from_string,
    validate_model_input,
)

logger = get_logger(__name__)

console = Console()
error_console = Console(stderr=True)

# Syntax lexers for languages whose registry name rich does not know
SYNTAX_LEXERS = {"objc": "objective-c", "vbnet": "vb.net"}


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="model-forge",
        description="Generate typed model declarations from a JSON sample",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  model-forge generate data.json --language typescript
  model-forge generate -l go --option package_name=models -o models.go data.json
  model-forge generate --url https://example.com/user.json -l kotlin
  model-forge languages
  model-forge info swift
        """.strip(),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", metavar="FILE", help="Also write logs to FILE")

    subparsers = parser.add_subparsers(dest="command")

    generate = subparsers.add_parser(
        "generate", help="Generate model code from JSON input"
    )
    input_group = generate.add_mutually_exclusive_group()
    input_group.add_argument("file", nargs="?", help="JSON file to read")
    input_group.add_argument("--url", help="URL to fetch JSON from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read JSON from standard input"
    )
    generate.add_argument(
        "--language", "-l", required=True, help="Target language name or alias"
    )
    generate.add_argument(
        "--root-name",
        default="DataModel",
        help="Name for the root model (default: DataModel)",
    )
    generate.add_argument("--config", metavar="FILE", help="JSON options file")
    generate.add_argument(
        "--option",
        action="append",
        metavar="KEY=VALUE",
        help="Generator option override; may be repeated",
    )
    generate.add_argument("--output", "-o", help="Output file (default: stdout)")
    generate.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show generation metadata and warnings",
    )
    generate.add_argument(
        "--allow-empty-keys",
        action="store_true",
        help="Accept objects with empty-string keys (they are skipped)",
    )
    generate.set_defaults(func=handle_generate)

    languages = subparsers.add_parser("languages", help="List supported languages")
    languages.set_defaults(func=handle_languages)

    info = subparsers.add_parser("info", help="Show details and options of a language")
    info.add_argument("language", help="Language name or alias")
    info.set_defaults(func=handle_info)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``model-forge`` console script."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_file)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except (CLIError, ConfigError, RegistryError, InputValidationError) as e:
        error_console.print(f"[red]✗ Error:[/red] {e}")
        logger.debug(f"Command failed: {e}")
        return 1
    except KeyboardInterrupt:
        error_console.print("[yellow]Interrupted[/yellow]")
        return 1


def _read_input(args: argparse.Namespace) -> Any:
    """Load the JSON document named by the generate arguments."""
    try:
        if args.file:
            return load_json(file_path=args.file)[1]
        if args.url:
            return load_json(url=args.url)[1]
        if args.stdin:
            return load_json_from_string(sys.stdin.read(), "<stdin>")[1]
    except (JSONLoaderError, FileNotFoundError) as e:
        raise CLIError(str(e)) from e

    raise CLIError("Input source required (file, --url, or --stdin)")


def handle_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    registry = get_registry()
    language = registry.resolve(args.language)

    data = _read_input(args)
    validate_model_input(data, allow_empty_keys=args.allow_empty_keys)

    options = load_options(
        language,
        registry.get_generator_class(language).options_class,
        config_file=args.config,
        overrides=parse_option_overrides(args.option),
    )
    generator = get_generator(language, options)
    logger.info(f"Generating {language} code for root {args.root_name}")

    result = generate_code(generator, data, args.root_name)
    if not result.success:
        error_console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        return 1

    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            raise CLIError(f"Failed to write to {output_path}: {e}") from e
        console.print(
            f"[green]✓[/green] Generated {generator.label} code saved to [cyan]{output_path}[/cyan]"
        )
    elif console.is_terminal:
        lexer = SYNTAX_LEXERS.get(language, language)
        console.print(Syntax(result.code, lexer, theme="monokai"))
    else:
        # Piped output must stay byte-exact
        sys.stdout.write(result.code)
        if not result.code.endswith("\n"):
            sys.stdout.write("\n")

    if args.verbose:
        _print_metadata(result)

    return 0


def _print_metadata(result) -> None:
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in result.metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), str(value))

    error_console.print()
    error_console.print(metadata_table)

    if result.warnings:
        error_console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            error_console.print(f"  [yellow]•[/yellow] {warning}")


def handle_languages(args: argparse.Namespace) -> int:
    """List supported languages with their aliases."""
    table = Table(title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Label")
    table.add_column("Extension", style="cyan")
    table.add_column("Aliases", style="blue")

    for name, info in sorted(list_all_language_info().items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(name, info["label"], info["file_extension"], aliases)

    console.print(table)
    console.print(
        Panel(
            "[bold]Usage:[/bold] model-forge generate [dim]input.json[/dim] --language [cyan]LANGUAGE[/cyan]\n"
            "[bold]Info:[/bold] model-forge info [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def handle_info(args: argparse.Namespace) -> int:
    """Show detailed information about one language."""
    info = get_language_info(args.language)

    info_text = (
        f"[bold]Language:[/bold] {info['name']}\n"
        f"[bold]Label:[/bold] {info['label']}\n"
        f"[bold]File Extension:[/bold] {info['file_extension']}\n"
        f"[bold]Generator Class:[/bold] {info['class']}\n"
        f"[bold]Module:[/bold] {info['module']}"
    )
    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print(Panel(info_text, title=f"🔧 {info['label']} Generator", border_style="green"))

    options_table = Table(
        title="⚙️  Default Options",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    options_table.add_column("Option", style="bold")
    options_table.add_column("Default", style="green")
    for key, value in info["options"].items():
        options_table.add_row(key, repr(value))

    console.print(options_table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
