"""Developer CLI for trying the extraction engine on raw text."""

from __future__ import annotations

import dataclasses
import enum
import json
from decimal import Decimal
from pathlib import Path
from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pricewatch.core.config import get_settings
from pricewatch.observability.logging import setup_logging
from pricewatch.pricing import (
    FallbackPriceLocator,
    TitleAttributeExtractor,
    extract_product_pricing,
    format_price,
    parse_price,
    resolve_prices,
    validation_problems,
)
from pricewatch.pricing.models import ParsedPrice

app = typer.Typer(help="Extract prices and discounts from retail page text.")
console = Console()

JSON_OPTION = typer.Option(False, "--json", help="Print the result as JSON.")


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, enum.Enum):
        return value.value
    raise TypeError(f"Cannot serialize {type(value).__name__}")


def _echo_json(obj: Any) -> None:
    payload = dataclasses.asdict(obj) if dataclasses.is_dataclass(obj) else obj
    typer.echo(json.dumps(payload, indent=2, default=_json_default))


def _price_cell(price: ParsedPrice | None) -> str:
    return format_price(price) if price else "-"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Emit debug logs to stderr."),
) -> None:
    """Configure logging before any command runs."""

    try:
        settings = get_settings()
    except ValidationError as exc:
        console.print(f"[bold red]Invalid configuration:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    setup_logging(level="DEBUG" if verbose else settings.log_level)


@app.command()
def parse(
    text: str = typer.Argument(..., help="Price text, e.g. 'Sale: $24.99'."),
    as_json: bool = JSON_OPTION,
) -> None:
    """Parse a single price string."""

    price = parse_price(text)
    if price is None:
        console.print(f"[bold red]No price found in:[/bold red] {text!r}")
        raise typer.Exit(code=1)
    if as_json:
        _echo_json(price)
        return
    console.print(
        f"[bold green]{format_price(price)}[/bold green]"
        f" sale={price.is_sale_price} currency={price.currency or '-'}"
    )


@app.command()
def resolve(
    current: str = typer.Argument(..., help="Current price text."),
    regular: str | None = typer.Option(None, "--regular", "-r", help="Regular price text."),
    promo: str | None = typer.Option(None, "--promo", "-p", help="Promotional text."),
    as_json: bool = JSON_OPTION,
) -> None:
    """Resolve a current/regular pair and validate it."""

    result = resolve_prices(current, regular, promo)
    problems = validation_problems(result)
    if as_json:
        _echo_json({**dataclasses.asdict(result), "valid": not problems, "problems": problems})
    else:
        table = Table(title="Price resolution")
        table.add_column("Field")
        table.add_column("Value")
        table.add_row("current", _price_cell(result.current_price))
        table.add_row("regular", _price_cell(result.regular_price))
        table.add_row(
            "discount",
            f"{result.discount_percent}%" if result.discount_percent is not None else "-",
        )
        table.add_row("promo", result.promo_text or "-")
        for error in result.errors:
            table.add_row("error", error)
        console.print(table)
    if problems:
        console.print(f"[bold red]Invalid:[/bold red] {'; '.join(problems)}")
        raise typer.Exit(code=1)


@app.command()
def locate(
    page_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="File with page text."),
    strike: list[str] = typer.Option(
        [], "--strike", help="Text of a struck-through element (repeatable)."
    ),
    as_json: bool = JSON_OPTION,
) -> None:
    """Propose candidate price text from a page's visible text."""

    page_text = page_file.read_text(encoding="utf-8", errors="replace")
    located = FallbackPriceLocator().locate(page_text, strike)
    if as_json:
        _echo_json(located)
        return
    console.print(f"current: {located.current_price_text or '-'}")
    console.print(f"regular: {located.regular_price_text or '-'}")


@app.command()
def title(
    text: str = typer.Argument(..., help="Product title."),
    profile: str = typer.Option("pharmacy", help="Retailer profile: pharmacy or pet."),
) -> None:
    """Extract brand and size from a product title."""

    try:
        extractor = TitleAttributeExtractor.for_profile(profile)
    except KeyError as exc:
        console.print(f"[bold red]Error:[/bold red] unknown profile {profile!r}")
        raise typer.Exit(code=2) from exc
    console.print(f"brand: {extractor.extract_brand(text) or '-'}")
    console.print(f"size: {extractor.extract_size(text) or '-'}")


@app.command()
def extract(
    current: str | None = typer.Option(None, "--current", "-c", help="Current price text."),
    regular: str | None = typer.Option(None, "--regular", "-r", help="Regular price text."),
    promo: str | None = typer.Option(None, "--promo", "-p", help="Promotional text."),
    page_file: Path | None = typer.Option(
        None, "--page-file", exists=True, dir_okay=False, help="File with page text."
    ),
    product_title: str | None = typer.Option(None, "--title", "-t", help="Product title."),
    as_json: bool = JSON_OPTION,
) -> None:
    """Run the full pipeline: structured text, page-text fallback, validation."""

    page_text = page_file.read_text(encoding="utf-8", errors="replace") if page_file else None
    pricing = extract_product_pricing(
        current, regular, promo, page_text=page_text, title=product_title
    )
    if as_json:
        _echo_json(pricing)
    else:
        result = pricing.pricing
        console.print(f"tier: {pricing.tier.value}")
        console.print(f"current: {_price_cell(result.current_price)}")
        console.print(f"regular: {_price_cell(result.regular_price)}")
        if result.discount_percent is not None:
            console.print(f"discount: {result.discount_percent}%")
        if pricing.brand or pricing.size_text:
            console.print(f"brand: {pricing.brand or '-'}  size: {pricing.size_text or '-'}")
    if not pricing.valid:
        console.print(f"[bold red]Invalid:[/bold red] {'; '.join(pricing.problems)}")
        raise typer.Exit(code=1)


if __name__ == "__main__":  # pragma: no cover
    app()
