"""
Command-line interface for realm-codegen.

Loads a GraphQL schema from a file or endpoint and writes the generated
model source to stdout or a file.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.syntax import Syntax
from rich import box

from .codegen import (
    ConfigError,
    GeneratorConfig,
    generate_code,
    get_generator,
    load_config,
)
from .logging_config import get_logger, setup_logging
from .utils import SchemaLoaderError, load_schema

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="realm-codegen",
        description="Generate Realm model classes from a GraphQL schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  realm-codegen schema.graphql
  realm-codegen schema.graphql --namespace API -o Models.swift
  realm-codegen --url https://example.com/graphql --generate-initializers
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument(
        "schema", nargs="?", help="GraphQL SDL (.graphql) or introspection (.json) file"
    )
    input_group.add_argument("--url", help="GraphQL endpoint to introspect")

    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("--config", help="Configuration file path (JSON)")

    # Generation options
    gen_group = parser.add_argument_group("generation options")
    gen_group.add_argument(
        "--namespace", help="Wrap all models in a 'public enum' of this name"
    )
    gen_group.add_argument(
        "--passthrough-custom-scalars",
        action="store_true",
        help="Use custom scalar names as Swift types instead of String",
    )
    gen_group.add_argument(
        "--custom-scalars-prefix",
        metavar="PREFIX",
        help="Prefix for passed-through custom scalar type names",
    )
    gen_group.add_argument(
        "--generate-initializers",
        action="store_true",
        help="Emit a memberwise initializer for every model",
    )
    gen_group.add_argument(
        "--deprecation-attributes",
        action="store_true",
        help="Mark deprecated fields with @available(*, deprecated)",
    )
    gen_group.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't copy field descriptions into doc comments",
    )

    # Informational commands
    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation result metadata",
    )
    info_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        if not (args.schema or args.url):
            raise CLIError("Input source required (schema file or --url)")

        _, schema = load_schema(file_path=args.schema, url=args.url)
        config = _build_config(args)
        return _generate_and_output(schema, config, args)

    except (CLIError, SchemaLoaderError, ConfigError, FileNotFoundError) as e:
        logger.debug("CLI failed", exc_info=True)
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and CLI arguments."""
    overrides = {}

    if args.namespace:
        overrides["namespace"] = args.namespace
    if args.passthrough_custom_scalars:
        overrides["passthrough_custom_scalars"] = True
    if args.custom_scalars_prefix:
        overrides["custom_scalars_prefix"] = args.custom_scalars_prefix
    if args.generate_initializers:
        overrides["generate_initializers"] = True
    if args.deprecation_attributes:
        overrides["add_deprecation_attributes"] = True
    if args.no_comments:
        overrides["add_comments"] = False
    if args.output:
        overrides["output_file"] = args.output

    return load_config(custom_config=overrides, config_file=args.config)


def _generate_and_output(schema, config: GeneratorConfig, args: argparse.Namespace) -> int:
    """Generate code and handle output with rich formatting."""
    generator = get_generator(config)
    result = generate_code(generator, schema)

    if not result.success:
        console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        return 1

    if config.output_file:
        output_path = Path(config.output_file)
        try:
            output_path.write_text(result.code + "\n", encoding="utf-8")
        except OSError as e:
            console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return 1
        console.print(
            f"[green]✓[/green] Generated Realm models saved to "
            f"[cyan]{output_path}[/cyan]"
        )
    elif console.is_terminal:
        console.print(Syntax(result.code, "swift", theme="monokai"))
    else:
        sys.stdout.write(result.code + "\n")

    if args.verbose and result.metadata:
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

        console.print()
        console.print(metadata_table)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
