"""Client-side catalog filtering and sorting.

``filter_products`` is a pure function of (products, filter state) and is
recomputed in full on every change. ``CatalogFilter`` owns the raw inputs,
debounces keystrokes and holds the committed ``CatalogFilterState``.
"""

import logging
import threading
import unicodedata
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Iterable, Optional

from cashier.client.debounce import Debouncer
from cashier.config import get_settings

logger = logging.getLogger(__name__)


class SortMode(str, Enum):
    ALPHABETICAL = "alphabetical"
    PRICE_DESC = "price-desc"
    PRICE_ASC = "price-asc"


class FilterMode(str, Enum):
    NORMAL = "normal"
    BARCODE_LOCKED = "barcode-locked"


@dataclass(frozen=True)
class CatalogFilterState:
    search_query: str = ""
    barcode_query: str = ""
    category: str = ""
    sort_by: SortMode = SortMode.ALPHABETICAL

    @property
    def mode(self) -> FilterMode:
        if self.barcode_query.strip():
            return FilterMode.BARCODE_LOCKED
        return FilterMode.NORMAL


def _text(value) -> str:
    return value if isinstance(value, str) else ""


def _price(product) -> float:
    value = getattr(product, "price", None)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value


def name_sort_key(name) -> tuple:
    """Locale-like key: accents and case are ignored first, then the raw name."""
    raw = _text(name)
    decomposed = unicodedata.normalize("NFKD", raw)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold(), raw


def _sort(products: list, sort_by) -> list:
    try:
        sort_by = SortMode(sort_by)
    except ValueError:
        sort_by = SortMode.ALPHABETICAL

    if sort_by is SortMode.PRICE_DESC:
        return sorted(products, key=_price, reverse=True)
    if sort_by is SortMode.PRICE_ASC:
        return sorted(products, key=_price)
    return sorted(products, key=lambda product: name_sort_key(getattr(product, "name", None)))


def filter_products(products: Optional[Iterable], state: CatalogFilterState) -> list:
    if not products:
        return []
    filtered = list(products)

    barcode_query = state.barcode_query.strip().lower()
    if barcode_query:
        # A scanned barcode is exact intent: no text, category or sort applied.
        return [
            product
            for product in filtered
            if barcode_query in _text(getattr(product, "barcode", None)).lower()
        ]

    query = state.search_query.strip().lower()
    if query:
        filtered = [
            product
            for product in filtered
            if query in _text(getattr(product, "name", None)).lower()
            or query in _text(getattr(product, "description", None)).lower()
        ]

    if state.category:
        filtered = [
            product for product in filtered if getattr(product, "product_type", None) == state.category
        ]

    return _sort(filtered, state.sort_by)


class CatalogFilter:
    """Filter inputs for the product list.

    Search and barcode inputs are debounced independently. Committing a
    non-empty barcode query switches to ``FilterMode.BARCODE_LOCKED`` and
    resets search text, category and sort to their defaults; only clearing
    the barcode field returns to ``FilterMode.NORMAL``.
    """

    def __init__(
        self,
        products: Optional[Iterable] = None,
        *,
        debounce_seconds: Optional[float] = None,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
        on_change: Optional[Callable[[list], None]] = None,
    ):
        if debounce_seconds is None:
            debounce_seconds = get_settings().CATALOG_DEBOUNCE_SECONDS
        self._lock = threading.RLock()
        self._products = list(products or [])
        self._state = CatalogFilterState()
        self._on_change = on_change
        self.search_input = ""
        self.barcode_input = ""
        self._search_debouncer = Debouncer(
            debounce_seconds, self._commit_search, timer_factory=timer_factory
        )
        self._barcode_debouncer = Debouncer(
            debounce_seconds, self._commit_barcode, timer_factory=timer_factory
        )
        self._view = filter_products(self._products, self._state)

    @property
    def state(self) -> CatalogFilterState:
        with self._lock:
            return self._state

    @property
    def mode(self) -> FilterMode:
        return self.state.mode

    @property
    def filtered_products(self) -> list:
        with self._lock:
            return list(self._view)

    def set_products(self, products: Optional[Iterable]) -> None:
        with self._lock:
            self._products = list(products or [])
            self._recompute()

    def on_search_input(self, text: str) -> None:
        self.search_input = text
        self._search_debouncer.trigger(text)

    def on_barcode_input(self, text: str) -> None:
        self.barcode_input = text
        self._barcode_debouncer.trigger(text)

    def set_sort(self, sort_by) -> None:
        with self._lock:
            self._state = replace(self._state, sort_by=SortMode(sort_by))
            self._recompute()

    def set_category(self, category: Optional[str]) -> None:
        with self._lock:
            self._state = replace(self._state, category=category or "")
            self._recompute()

    def flush(self) -> None:
        self._search_debouncer.flush()
        self._barcode_debouncer.flush()

    def reset_filters(self) -> None:
        self._search_debouncer.cancel()
        self._barcode_debouncer.cancel()
        with self._lock:
            self.search_input = ""
            self.barcode_input = ""
            self._state = CatalogFilterState()
            self._recompute()

    def _commit_search(self, text: str) -> None:
        with self._lock:
            self._state = replace(self._state, search_query=text)
            self._recompute()

    def _commit_barcode(self, text: str) -> None:
        locking = bool(text.strip())
        if locking:
            self._search_debouncer.cancel()
        with self._lock:
            if locking:
                self.search_input = ""
                self._state = CatalogFilterState(barcode_query=text)
                logger.debug("Catalog filter locked to barcode %r", text)
            else:
                self._state = replace(self._state, barcode_query=text)
            self._recompute()

    def _recompute(self) -> None:
        self._view = filter_products(self._products, self._state)
        if self._on_change is not None:
            self._on_change(list(self._view))


__all__ = [
    "CatalogFilter",
    "CatalogFilterState",
    "FilterMode",
    "SortMode",
    "filter_products",
    "name_sort_key",
]
