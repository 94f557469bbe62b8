"""Company sources feeding the listing engine."""

from typing import Optional

from vcintel.config import settings
from .base import CompanySource
from .json_file import JsonFileCompanySource
from .mock import MockCompanySource


def create_source(companies_file: Optional[str] = None) -> CompanySource:
    """Return a file-backed source when a file is configured, else mock data."""
    path = companies_file or settings.companies_file
    if path:
        return JsonFileCompanySource(path)
    return MockCompanySource()


__all__ = [
    "CompanySource",
    "JsonFileCompanySource",
    "MockCompanySource",
    "create_source",
]
