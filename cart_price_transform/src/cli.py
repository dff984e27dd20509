"""
Command-line interface for Cart Price Transform.

Runs the cart scan the way a checkout host would: read an input document,
write the result document. Also offers a quick price quote and config
management.
"""

import sys
from decimal import InvalidOperation

import click
import yaml

from .calculator import adjusted_unit_price, calculate_discount_percentage
from .config import Config, ConfigManager
from .constants import PRICE_VALUE_PREFIX
from .errors import InputDocumentError
from .extractor import parse_price_value
from .models import TransformReport
from .schemas import FunctionResult, parse_function_input
from .transformer import CartTransformer
from ..utils.logger_setup import LoggerManager
from ..utils.money import format_money, normalize, to_decimal

MAX_DETAIL_ERRORS = 5


def _render_result(result: FunctionResult, config: Config) -> str:
    """Render the result document in the configured format."""
    if config.output.format == 'yaml':
        data = result.model_dump(by_alias=True, mode='json')
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    return result.to_json(indent=config.output.indent or None) + "\n"


def _echo_summary(report: TransformReport):
    """Print a per-line table to stderr."""
    click.echo(f"\n📋 Cart lines: {report.lines_scanned}, price updates: {report.lines_matched}", err=True)
    for line in report.lines:
        if not line.matched:
            click.echo(f"  - {line.cart_line_id}: {format_money(line.unit_price, line.currency_code)} (unchanged)", err=True)
            continue
        click.echo(
            f"  ✓ {line.cart_line_id}: {format_money(line.unit_price, line.currency_code)}"
            f" → target {format_money(line.target_price, line.currency_code)}"
            f", decrease {normalize(line.percentage)}%"
            f" = {format_money(adjusted_unit_price(line.unit_price, line.percentage), line.currency_code)}",
            err=True,
        )


@click.group()
@click.version_option(version="0.1.0")
@click.pass_context
def cli(ctx):
    """Cart Price Transform - turn custom target prices into percentage discounts."""
    config = ConfigManager().load()
    LoggerManager.setup_logging(
        log_file=config.logging.log_file,
        level=config.logging.level,
        console=config.logging.console,
    )
    ctx.obj = config


@cli.command()
@click.option('--overwrite', is_flag=True, help='Overwrite existing configuration')
def init(overwrite):
    """Initialize configuration in current directory."""
    config_manager = ConfigManager()

    if config_manager.init_config(overwrite=overwrite):
        click.echo("✓ Configuration initialized successfully")
        click.echo(f"  Config file: {config_manager.config_file}")
    else:
        click.echo("Configuration already exists. Use --overwrite to replace it.")


@cli.command()
@click.option('--input', '-i', 'input_file', type=click.File('r', encoding='utf-8'), default='-',
              help='Input document (default: stdin)')
@click.option('--output', '-o', 'output_file', type=click.File('w', encoding='utf-8'), default='-',
              help='Result document (default: stdout)')
@click.option('--summary', is_flag=True, help='Print a per-line summary to stderr')
@click.pass_obj
def run(config, input_file, output_file, summary):
    """Compute price updates for a cart input document."""
    errors = ConfigManager().validate(config)
    if errors:
        click.echo("❌ Invalid configuration:", err=True)
        for error in errors:
            click.echo(f"  - {error}", err=True)
        sys.exit(1)

    try:
        function_input = parse_function_input(input_file.read())
    except InputDocumentError as e:
        click.echo(f"❌ {e}", err=True)
        for detail in e.details[:MAX_DETAIL_ERRORS]:
            location = ".".join(str(part) for part in detail.get('loc', ()))
            click.echo(f"  - {location}: {detail.get('msg')}", err=True)
        sys.exit(1)

    result, report = CartTransformer().run_with_report(function_input)
    output_file.write(_render_result(result, config))

    if summary:
        _echo_summary(report)


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument('price')
@click.argument('target')
def quote(price, target):
    """Show the discount turning PRICE into TARGET (e.g. 1000 '$600').

    Negative amounts such as -5 are read as values, not options.
    """
    try:
        original = to_decimal(price)
    except InvalidOperation:
        raise click.BadParameter(f"'{price}' is not a number", param_hint='PRICE')
    if not original.is_finite():
        raise click.BadParameter(f"'{price}' is not a finite number", param_hint='PRICE')

    if not target.startswith(PRICE_VALUE_PREFIX):
        target = PRICE_VALUE_PREFIX + target
    target_price = parse_price_value(target)
    if target_price is None:
        raise click.BadParameter(f"'{target}' is not a valid price", param_hint='TARGET')

    percentage = calculate_discount_percentage(original, target_price)
    click.echo(f"Discount: {normalize(percentage)}%")
    click.echo(f"  {format_money(original)} → {format_money(adjusted_unit_price(original, percentage))}")


@cli.command()
def clean():
    """Remove the configuration directory."""
    config_manager = ConfigManager()

    if config_manager.cleanup():
        click.echo(f"✓ Removed {config_manager.config_dir}")
    else:
        click.echo("Nothing to clean.")


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
