# tyrecompare/cli/runner.py

"""Headless CLI search runner, sharing the orchestrator with the TUI."""

import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from tyrecompare.config.settings import Settings
from tyrecompare.config.vendor_registry import VendorRegistry
from tyrecompare.filters.offer_comparator import OfferComparator
from tyrecompare.models.offer import Offer
from tyrecompare.models.search_request import SearchRequest
from tyrecompare.models.tyre_size import TyreSizeDescriptor
from tyrecompare.services.search_orchestrator import SearchOrchestrator
from tyrecompare.sources.base_source import OfferSource
from tyrecompare.sources.fixture_source import FixtureSource
from tyrecompare.sources.remote_source import RemoteSource
from tyrecompare.storage.file_manager import FileManager

logger = logging.getLogger("tyrecompare.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def resolve_vendor_keys(vendor_csv: str | None) -> frozenset[str]:
    """Map a comma-separated list of vendor keys to a key set.

    Returns every vendor when *vendor_csv* is ``None``.
    Raises ``SystemExit`` on unknown keys or an empty selection.
    """
    if vendor_csv is None:
        return frozenset(v.key for v in VendorRegistry.list_vendors())

    requested = [
        k.strip() for k in vendor_csv.split(",") if k.strip()
    ]
    unknown = [k for k in requested if VendorRegistry.get(k) is None]
    if unknown or not requested:
        valid = ", ".join(v.key for v in VendorRegistry.list_vendors())
        if unknown:
            _err.print(
                f"[red]Unknown vendor(s): {', '.join(unknown)}[/red]"
            )
        else:
            _err.print("[red]Select at least one vendor.[/red]")
        _err.print(f"[dim]Available: {valid}[/dim]")
        raise SystemExit(1)

    return frozenset(requested)


def build_source(use_remote: bool, api_url: str | None = None) -> OfferSource:
    """Pick the remote service or the demo fixture."""
    if use_remote:
        return RemoteSource(base_url=api_url)
    return FixtureSource()


def _print_table(
    offers: list[Offer], cheapest: float | None, title: str
) -> None:
    """Render a Rich table of offers to stdout, cheapest in green."""
    table = Table(
        title=title,
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Site", style="magenta")
    table.add_column("Brand")
    table.add_column("Pattern")
    table.add_column("Size")
    table.add_column("Stock", justify="right")
    table.add_column("Price", justify="right")
    table.add_column("URL", overflow="fold", style="dim")

    for idx, o in enumerate(offers, 1):
        price_str = OfferComparator.format_price(o.price, o.currency)
        if OfferComparator.is_cheapest(o, cheapest):
            price_str = f"[bold green]{price_str}[/bold green]"
        table.add_row(
            str(idx),
            o.site,
            o.brand,
            o.pattern,
            o.size,
            str(o.stock),
            price_str,
            o.url,
        )

    Console().print(table)


async def cli_search(
    size_text: str,
    brand: str,
    vendor_csv: str | None,
    use_remote: bool,
    descending: bool,
    output_format: str,
    export: bool,
    save: bool,
    output_dir: str | None,
    api_url: str | None = None,
) -> int:
    """Run a headless search and return an exit code (0=ok, 1=fail)."""
    try:
        descriptor = TyreSizeDescriptor.parse(size_text)
    except ValueError as exc:
        _err.print(f"[red]{exc}[/red]")
        return 1

    vendor_keys = resolve_vendor_keys(vendor_csv)
    request = SearchRequest(
        descriptor=descriptor, brand=brand, vendor_keys=vendor_keys
    )

    if output_dir is not None:
        Settings.RESULTS_DIR = Path(output_dir)

    source = build_source(use_remote, api_url)
    orchestrator = SearchOrchestrator()
    if descending:
        orchestrator.toggle_sort()

    vendor_labels = ", ".join(VendorRegistry.keys_in_order(vendor_keys))
    _err.print(
        f"[bold]Searching:[/bold] {descriptor.format()} {brand}  "
        f"[dim]vendors={vendor_labels} source={source.source_name}[/dim]"
    )

    result = await orchestrator.search(request, source)

    if result.error is not None:
        _err.print(f"[red]Error: {result.error}[/red]")
        return 1

    offers = orchestrator.sorted_offers()
    if not offers:
        _err.print("[yellow]No offers found.[/yellow]")
        return 1

    cheapest = orchestrator.cheapest_price()
    if cheapest is not None:
        best = OfferComparator.cheapest_offers(offers)
        _err.print(
            f"[green]✓ {len(offers)} offers, cheapest "
            f"{OfferComparator.format_price(cheapest, best[0].currency)}"
            f" at {', '.join(o.site for o in best)}[/green]"
        )

    if export or save:
        try:
            file_manager = FileManager()
            if export:
                path = file_manager.export_csv(descriptor, offers)
                _err.print(f"[dim]Exported CSV → {path}[/dim]")
            if save:
                path = file_manager.save_results(descriptor, offers)
                _err.print(f"[dim]Saved JSON → {path}[/dim]")
        except OSError as exc:
            logger.error("Writing results failed: %s", exc, exc_info=True)
            _err.print(f"[red]Writing results failed: {exc}[/red]")
            return 1

    if output_format == "table":
        _print_table(offers, cheapest, f"Offers for {descriptor.format()}")
    else:
        json.dump(
            [o.to_dict() for o in offers],
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")

    return 0
