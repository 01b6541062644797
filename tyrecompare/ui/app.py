# tyrecompare/ui/app.py

"""Terminal UI for the tyrecompare price comparison engine."""

import logging
import webbrowser
from typing import cast

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.widgets import (
    Button,
    Checkbox,
    Collapsible,
    DataTable,
    Footer,
    Header,
    Input,
    Static,
)

from tyrecompare.config.settings import Settings
from tyrecompare.config.vendor_registry import VendorRegistry
from tyrecompare.filters.offer_comparator import OfferComparator
from tyrecompare.models.offer import Offer
from tyrecompare.models.search_request import SearchRequest
from tyrecompare.models.tyre_size import TyreSizeDescriptor
from tyrecompare.services.errors import SearchError
from tyrecompare.services.search_orchestrator import SearchOrchestrator
from tyrecompare.sources.base_source import OfferSource
from tyrecompare.sources.fixture_source import FixtureSource
from tyrecompare.sources.remote_source import RemoteSource
from tyrecompare.storage.file_manager import FileManager

logger = logging.getLogger("tyrecompare.ui")

# (input id, placeholder, default value)
_SIZE_FIELDS: list[tuple[str, str, str]] = [
    ("width_input", "Width", Settings.DEFAULT_WIDTH),
    ("height_input", "Height", Settings.DEFAULT_ASPECT_HEIGHT),
    ("rim_input", "Rim", Settings.DEFAULT_RIM_DIAMETER),
    ("load_input", "Load idx", Settings.DEFAULT_LOAD_INDEX),
    ("speed_input", "Speed", Settings.DEFAULT_SPEED_SYMBOL),
    ("brand_input", "Brand (opt.)", Settings.DEFAULT_BRAND),
]


class TyreCompareApp(App[object]):
    """Terminal UI for the tyrecompare price comparison engine."""

    CSS_PATH = "styles.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("e", "export", "Export CSV"),
        Binding("p", "sort_price", "Price Sort"),
    ]

    def __init__(self, source: OfferSource | None = None) -> None:
        super().__init__()
        self.settings = Settings()
        self.orchestrator = SearchOrchestrator()
        self.file_manager = FileManager()
        self.displayed_offers: list[Offer] = []
        self.last_request: SearchRequest | None = None
        self._source_override = source

    def compose(self) -> ComposeResult:
        """Build the widget tree for the TUI."""
        size_inputs = [
            Input(value=default, placeholder=placeholder, id=input_id)
            for input_id, placeholder, default in _SIZE_FIELDS
        ]
        vendor_checkboxes = [
            Checkbox(vendor.label, value=True, id=f"check_{vendor.key}")
            for vendor in VendorRegistry.list_vendors()
        ]

        yield Header()
        yield Container(
            Static("🛞 Tyre Price Comparison", id="title"),

            # Size descriptor + brand
            Horizontal(*size_inputs, id="size_bar"),

            # Vendor selection
            Collapsible(
                *vendor_checkboxes,
                title="Vendors",
                collapsed=False,
                id="vendor_toggles",
            ),

            Horizontal(
                Button(
                    "Search all vendors", variant="primary", id="search_btn"
                ),
                Button(
                    "Export CSV", variant="success", id="export_btn",
                    disabled=True,
                ),
                Button("Sort by price: ascending", id="sort_btn", disabled=True),
                Checkbox(
                    "Use demo data",
                    value=self.settings.USE_FIXTURE,
                    id="use_fixture",
                ),
                id="action_bar",
            ),

            Static("", id="size_label"),
            Static("", id="summary"),
            Static("Ready", id="status"),
            cast(
                DataTable[str | Text],
                DataTable(
                    id="results_table",
                    zebra_stripes=True,
                    cursor_type="row",
                ),
            ),
            id="main_container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Configure the results table and initial labels."""
        table = cast(
            DataTable[str | Text],
            self.query_one("#results_table", DataTable),
        )
        table.add_columns(
            "Site", "Brand", "Pattern", "Size", "Stock", "Price", "URL"
        )
        self._update_size_label()
        self._refresh_controls()

    # ── Form state ───────────────────────────────────────

    def current_descriptor(self) -> TyreSizeDescriptor:
        """Read the size inputs into a descriptor (values verbatim)."""
        return TyreSizeDescriptor(
            width=self.query_one("#width_input", Input).value,
            aspect_height=self.query_one("#height_input", Input).value,
            rim_diameter=self.query_one("#rim_input", Input).value,
            load_index=self.query_one("#load_input", Input).value,
            speed_symbol=self.query_one("#speed_input", Input).value,
        )

    def selected_vendor_keys(self) -> frozenset[str]:
        """Keys of every checked vendor."""
        return frozenset(
            vendor.key
            for vendor in VendorRegistry.list_vendors()
            if self.query_one(f"#check_{vendor.key}", Checkbox).value
        )

    def _build_source(self) -> OfferSource:
        if self._source_override is not None:
            return self._source_override
        if self.query_one("#use_fixture", Checkbox).value:
            return FixtureSource()
        return RemoteSource()

    def _update_size_label(self) -> None:
        self.query_one("#size_label", Static).update(
            f"Size: {self.current_descriptor().format()}"
        )

    def _update_summary(self) -> None:
        offers = self.orchestrator.result_set.offers
        cheapest = self.orchestrator.cheapest_price()
        if cheapest is None:
            cheapest_text = "-"
        else:
            best = OfferComparator.cheapest_offers(offers)
            cheapest_text = OfferComparator.format_price(
                cheapest, best[0].currency
            )
        self.query_one("#summary", Static).update(
            f"Selected vendors: {len(self.selected_vendor_keys())}  |  "
            f"Offers found: {len(offers)}  |  "
            f"Best price: {cheapest_text}"
        )

    def _refresh_controls(self) -> None:
        """Enable/disable actions from the current state."""
        in_flight = self.orchestrator.in_flight
        empty = self.orchestrator.result_set.is_empty

        search_btn = self.query_one("#search_btn", Button)
        search_btn.disabled = in_flight or not self.selected_vendor_keys()
        search_btn.label = (
            "Searching..." if in_flight else "Search all vendors"
        )
        self.query_one("#export_btn", Button).disabled = in_flight or empty

        sort_btn = self.query_one("#sort_btn", Button)
        sort_btn.disabled = empty
        direction = (
            "ascending"
            if self.orchestrator.result_set.sort_ascending
            else "descending"
        )
        sort_btn.label = f"Sort by price: {direction}"
        self._update_summary()

    # ── Events ───────────────────────────────────────────

    def on_input_changed(self, event: Input.Changed) -> None:
        """Keep the canonical size label in sync with the inputs."""
        if event.input.id != "brand_input":
            self._update_size_label()

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        """Vendor toggles change what a search may do."""
        self._refresh_controls()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button click events."""
        if event.button.id == "search_btn":
            self.run_worker(self.perform_search(), group="search")
        elif event.button.id == "export_btn":
            self.action_export()
        elif event.button.id == "sort_btn":
            self.action_sort_price()

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter in any field starts a search."""
        self.run_worker(self.perform_search(), group="search")

    # ── Search ───────────────────────────────────────────

    async def perform_search(self) -> None:
        """Run one search against the selected vendors."""
        vendor_keys = self.selected_vendor_keys()
        if not vendor_keys:
            self.notify("Select at least one vendor!", severity="error")
            return
        if self.orchestrator.in_flight:
            self.notify("A search is already running", severity="warning")
            return

        request = SearchRequest(
            descriptor=self.current_descriptor(),
            brand=self.query_one("#brand_input", Input).value,
            vendor_keys=vendor_keys,
        )
        source = self._build_source()
        status = self.query_one("#status", Static)
        status.update(
            f"🔍 Searching {request.descriptor.format()}, please wait..."
        )

        search_btn = self.query_one("#search_btn", Button)
        search_btn.disabled = True
        search_btn.label = "Searching..."
        try:
            result = await self.orchestrator.search(request, source)
        except SearchError as exc:
            logger.warning("Search not started: %s", exc)
            self.notify(str(exc), severity="warning")
            return
        finally:
            self._refresh_controls()

        self.last_request = request
        self.populate_table()

        if result.error is not None:
            status.update(f"❌ {result.error}")
            self.notify(result.error, severity="error")
        elif result.result_set.is_empty:
            status.update("❌ No offers found")
        else:
            status.update(
                f"✅ Found {len(result.result_set)} offers"
            )

    def populate_table(self) -> None:
        """Fill the DataTable with the current offers, sorted."""
        table = cast(
            DataTable[str | Text],
            self.query_one("#results_table", DataTable),
        )
        table.clear()
        self.displayed_offers = self.orchestrator.sorted_offers()
        cheapest = self.orchestrator.cheapest_price()

        for o in self.displayed_offers:
            is_cheapest = OfferComparator.is_cheapest(o, cheapest)
            table.add_row(
                o.site,
                o.brand,
                o.pattern,
                o.size,
                str(o.stock),
                Text(
                    OfferComparator.format_price(o.price, o.currency),
                    style="bold green" if is_cheapest else "",
                ),
                o.url,
            )

    def on_data_table_row_selected(
        self, event: DataTable.RowSelected
    ) -> None:
        """Open the selected offer's URL in the default browser."""
        if 0 <= event.cursor_row < len(self.displayed_offers):
            webbrowser.open(
                self.displayed_offers[event.cursor_row].url
            )

    # ── Actions ──────────────────────────────────────────

    def action_sort_price(self) -> None:
        """Flip the price sort direction of the current offers."""
        if self.orchestrator.result_set.is_empty:
            self.notify("No results to sort", severity="warning")
            return
        self.orchestrator.toggle_sort()
        self.populate_table()
        self._refresh_controls()

    def action_export(self) -> None:
        """Export the currently sorted offers to a CSV file."""
        if self.orchestrator.result_set.is_empty or self.last_request is None:
            self.notify("No results to export", severity="warning")
            return
        try:
            path = self.file_manager.export_csv(
                self.last_request.descriptor,
                self.orchestrator.sorted_offers(),
            )
            logger.info("Exported results to %s", path)
            self.notify(f"Exported to {path}")
        except Exception as e:
            logger.error("Failed to export results", exc_info=True)
            self.notify(f"Export failed: {e}", severity="error")
