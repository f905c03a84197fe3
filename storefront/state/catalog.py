"""
Catalog Query Engine

Tracks filter, sort and pagination intent and reconciles it with product
data fetched from the catalog API.
"""

import logging
import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from ..models.product import PriceRange, Product, SortKey
from ..services.api_client import CatalogAPIError, StorefrontAPIClient
from .actions import (
    CatalogAction,
    ClearFilters,
    DetailFailed,
    DetailRequested,
    DetailSucceeded,
    ListFailed,
    ListRequested,
    ListSucceeded,
    SetCategory,
    SetCurrentPage,
    SetPriceRange,
    SetSearchQuery,
    SetSortBy,
)
from .store import Store

logger = logging.getLogger(__name__)


class FetchStatus(str, Enum):
    """Lifecycle of one asynchronous remote call"""
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class FilterCriteria:
    category: str = "all"
    price_range: PriceRange = field(default_factory=PriceRange)
    search_query: str = ""
    sort_by: SortKey = SortKey.NAME_ASC


@dataclass(frozen=True)
class PaginationState:
    current_page: int = 1
    total_pages: int = 1
    page_size: int = 10


@dataclass(frozen=True)
class DetailState:
    """Slot for the single product shown on the detail page"""
    product: Optional[Product] = None
    status: FetchStatus = FetchStatus.IDLE
    error: Optional[str] = None
    request_id: int = 0


@dataclass(frozen=True)
class CatalogState:
    """Snapshot of the catalog query and its results"""
    filters: FilterCriteria = field(default_factory=FilterCriteria)
    pagination: PaginationState = field(default_factory=PaginationState)
    items: tuple[Product, ...] = ()
    status: FetchStatus = FetchStatus.IDLE
    error: Optional[str] = None
    request_id: int = 0
    detail: DetailState = field(default_factory=DetailState)
    default_filters: FilterCriteria = field(default_factory=FilterCriteria, repr=False)

    @property
    def loading(self) -> bool:
        return self.status == FetchStatus.LOADING


def initial_catalog_state(
    page_size: int = 10,
    default_max_price: float = 10000.0,
) -> CatalogState:
    """Empty catalog state with the given page size and price ceiling"""
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    defaults = FilterCriteria(price_range=PriceRange(min=0, max=default_max_price))
    return CatalogState(
        filters=defaults,
        pagination=PaginationState(page_size=page_size),
        default_filters=defaults,
    )


def _with_filters(state: CatalogState, **changes) -> CatalogState:
    """Apply a filter change; every filter change sends the shopper to page 1"""
    return replace(
        state,
        filters=replace(state.filters, **changes),
        pagination=replace(state.pagination, current_page=1),
    )


def _reject(state: CatalogState, reason: str) -> CatalogState:
    logger.debug(f"Rejected catalog input: {reason}")
    return state


def reduce_catalog(state: CatalogState, action: CatalogAction) -> CatalogState:
    """Pure reducer for the catalog query engine"""
    if isinstance(action, SetCategory):
        if not action.category:
            return _reject(state, "empty category")
        return _with_filters(state, category=action.category)

    if isinstance(action, SetPriceRange):
        price_range = action.price_range
        if price_range.min < 0 or price_range.max < 0:
            return _reject(state, f"negative price bound {price_range}")
        # min > max is stored as given; the filter form corrects it
        return _with_filters(state, price_range=price_range)

    if isinstance(action, SetSearchQuery):
        return _with_filters(state, search_query=action.query)

    if isinstance(action, SetSortBy):
        try:
            sort_by = SortKey(action.sort_by)
        except ValueError:
            return _reject(state, f"unknown sort key {action.sort_by!r}")
        return _with_filters(state, sort_by=sort_by)

    if isinstance(action, ClearFilters):
        return replace(
            state,
            filters=state.default_filters,
            pagination=replace(state.pagination, current_page=1),
        )

    if isinstance(action, SetCurrentPage):
        if not 1 <= action.page <= state.pagination.total_pages:
            return _reject(state, f"page {action.page} out of range")
        return replace(state, pagination=replace(state.pagination, current_page=action.page))

    if isinstance(action, ListRequested):
        return replace(
            state,
            status=FetchStatus.LOADING,
            error=None,
            request_id=action.request_id,
        )

    if isinstance(action, ListSucceeded):
        page_size = state.pagination.page_size
        total_pages = max(1, math.ceil(action.page.total / page_size))
        return replace(
            state,
            items=tuple(action.page.products),
            status=FetchStatus.SUCCEEDED,
            error=None,
            pagination=replace(state.pagination, total_pages=total_pages),
        )

    if isinstance(action, ListFailed):
        # Keep the previously loaded items on screen
        return replace(state, status=FetchStatus.FAILED, error=action.error)

    if isinstance(action, DetailRequested):
        detail = replace(
            state.detail,
            status=FetchStatus.LOADING,
            error=None,
            request_id=action.request_id,
        )
        return replace(state, detail=detail)

    if isinstance(action, DetailSucceeded):
        detail = replace(
            state.detail,
            product=action.product,
            status=FetchStatus.SUCCEEDED,
            error=None,
        )
        return replace(state, detail=detail)

    if isinstance(action, DetailFailed):
        detail = replace(
            state.detail,
            product=None,
            status=FetchStatus.FAILED,
            error=action.error,
        )
        return replace(state, detail=detail)

    raise TypeError(f"Unsupported catalog action: {type(action).__name__}")


class CatalogEngine(Store[CatalogState, CatalogAction]):
    """
    Catalog query engine.

    Filter setters are synchronous. request_list() and request_detail() are
    coroutines that move their slot through idle -> loading -> succeeded or
    failed. When discard_stale_responses is set, a response that resolves
    after a newer request was issued is dropped.
    """

    def __init__(
        self,
        client: StorefrontAPIClient,
        page_size: int = 10,
        default_max_price: float = 10000.0,
        discard_stale_responses: bool = True,
    ):
        super().__init__(
            initial_catalog_state(page_size, default_max_price),
            reduce_catalog,
        )
        self._client = client
        self.discard_stale_responses = discard_stale_responses
        self._last_request_id = 0

    def _next_request_id(self) -> int:
        self._last_request_id += 1
        return self._last_request_id

    # ==================== Filters ====================

    def set_category(self, category: str) -> CatalogState:
        return self.dispatch(SetCategory(category))

    def set_price_range(self, price_range: PriceRange) -> CatalogState:
        return self.dispatch(SetPriceRange(price_range))

    def set_search_query(self, query: str) -> CatalogState:
        return self.dispatch(SetSearchQuery(query))

    def set_sort_by(self, sort_by: str) -> CatalogState:
        return self.dispatch(SetSortBy(sort_by))

    def clear_filters(self) -> CatalogState:
        return self.dispatch(ClearFilters())

    def set_current_page(self, page: int) -> CatalogState:
        return self.dispatch(SetCurrentPage(page))

    # ==================== Fetches ====================

    async def request_list(self) -> CatalogState:
        """Fetch the current page of products for the current filters"""
        request_id = self._next_request_id()
        self.dispatch(ListRequested(request_id))

        filters = self.state.filters
        pagination = self.state.pagination
        logger.info(
            f"Fetching products #{request_id}: page={pagination.current_page} "
            f"category={filters.category} search={filters.search_query!r} "
            f"sort={filters.sort_by.value}"
        )

        try:
            page = await self._client.search_products(
                page=pagination.current_page,
                limit=pagination.page_size,
                category=filters.category,
                search=filters.search_query,
                sort=filters.sort_by,
            )
        except CatalogAPIError as exc:
            logger.error(f"Fetch products #{request_id} failed: {exc.message}")
            outcome = ListFailed(request_id, exc.message)
        else:
            outcome = ListSucceeded(request_id, page)

        if self.discard_stale_responses and request_id != self.state.request_id:
            logger.warning(
                f"Discarding products #{request_id}; "
                f"#{self.state.request_id} is newer"
            )
            return self.state

        return self.dispatch(outcome)

    async def request_detail(self, product_id: str) -> CatalogState:
        """Fetch one product into the detail slot"""
        request_id = self._next_request_id()
        self.dispatch(DetailRequested(request_id, product_id))
        logger.info(f"Fetching product {product_id} #{request_id}")

        try:
            product = await self._client.get_product(product_id)
        except CatalogAPIError as exc:
            logger.error(f"Fetch product {product_id} failed: {exc.message}")
            outcome = DetailFailed(request_id, exc.message)
        else:
            outcome = DetailSucceeded(request_id, product)

        if self.discard_stale_responses and request_id != self.state.detail.request_id:
            logger.warning(
                f"Discarding product {product_id} #{request_id}; "
                f"#{self.state.detail.request_id} is newer"
            )
            return self.state

        return self.dispatch(outcome)
