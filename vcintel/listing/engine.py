"""Company listing: filter, sort and paginate in one pure pass."""

import logging
import math
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from vcintel.models import Company, CompanyQuery, ListingPage
from .errors import InvalidQuery
from .filters import CompanyFilter
from .sorting import resolve_sort_field, sort_companies

logger = logging.getLogger(__name__)


class ListingEngine:
    """Produce one page of companies for a query.

    The engine holds no state between calls and never mutates the input
    collection, so the same inputs always give the same page.
    """

    def list(self, companies: list[Company], query: CompanyQuery) -> ListingPage:
        if query.page_size <= 0:
            raise InvalidQuery(
                f"pageSize must be positive, got {query.page_size}",
                field="pageSize",
            )
        sort_field = resolve_sort_field(query.sort_field)

        matched = CompanyFilter(query).apply(list(companies))
        ordered = sort_companies(matched, sort_field, query.sort_direction)

        total_matched = len(ordered)
        total_pages = math.ceil(total_matched / query.page_size)
        page = self.clamp_page(query.page, total_pages)

        start = (page - 1) * query.page_size
        items = ordered[start:start + query.page_size]

        if page != query.page:
            logger.debug(f"Clamped page {query.page} to {page} of {total_pages}")

        return ListingPage(
            items=items,
            total_matched=total_matched,
            page=page,
            page_size=query.page_size,
            total_pages=total_pages,
        )

    @staticmethod
    def clamp_page(page: int, total_pages: int) -> int:
        """Clamp a 1-indexed page into ``[1, max(1, total_pages)]``."""
        return min(max(page, 1), max(1, total_pages))


def parse_query(params: Mapping[str, Any], default_page_size: Optional[int] = None) -> CompanyQuery:
    """Build a ``CompanyQuery`` from wire-style params.

    Values that cannot be coerced raise ``InvalidQuery`` instead of a
    pydantic ``ValidationError``.
    """
    data = {k: v for k, v in params.items() if v is not None}
    if default_page_size is not None:
        data.setdefault("pageSize", default_page_size)
    try:
        return CompanyQuery.model_validate(data)
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        raise InvalidQuery(f"Invalid {field}: {error['msg']}", field=field) from None


def list_companies(companies: list[Company], query: CompanyQuery) -> ListingPage:
    """Convenience wrapper around ``ListingEngine().list``."""
    return ListingEngine().list(companies, query)
