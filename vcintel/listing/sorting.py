"""Sort keys for the company listing.

Every ``SortField`` maps to an explicit key function. Text keys follow
dictionary-style collation: letters compare ignoring accents and case first,
then accents, then case with lowercase ahead of uppercase.
"""

import unicodedata
from typing import Any, Callable

from vcintel.models import Company, SortDirection, SortField
from .errors import InvalidQuery

SortKey = Callable[[Company], Any]


def collation_key(text: str) -> tuple[str, str, str]:
    """Locale-style comparison key for a text value."""
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), text.casefold(), text.swapcase())


def _text(attr: str) -> SortKey:
    return lambda company: collation_key(getattr(company, attr))


def _value(attr: str) -> SortKey:
    return lambda company: getattr(company, attr)


SORT_KEYS: dict[SortField, SortKey] = {
    SortField.ID: _text("id"),
    SortField.NAME: _text("name"),
    SortField.DESCRIPTION: _text("description"),
    SortField.INDUSTRY: _text("industry"),
    SortField.STAGE: _text("stage"),
    SortField.LOCATION: _text("location"),
    SortField.WEBSITE: _text("website"),
    SortField.FOUNDED: _value("founded"),
    SortField.EMPLOYEES: _value("employees"),
    SortField.TOTAL_FUNDING: _value("total_funding"),
    SortField.LAST_FUNDING_DATE: _value("last_funding_date"),
}


def resolve_sort_field(value: Any) -> SortField:
    """Turn a wire value into a ``SortField`` or raise ``InvalidQuery``."""
    try:
        return SortField(value)
    except ValueError:
        allowed = ", ".join(f.value for f in SortField)
        raise InvalidQuery(
            f"Unknown sort field {value!r}; expected one of: {allowed}",
            field="sortField",
        ) from None


def sort_companies(
    companies: list[Company],
    field: SortField,
    direction: SortDirection = SortDirection.ASC,
) -> list[Company]:
    """Stable sort; equal keys keep their input order in either direction."""
    return sorted(
        companies,
        key=SORT_KEYS[field],
        reverse=direction == SortDirection.DESC,
    )
