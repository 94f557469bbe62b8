"""Company source backed by a JSON file."""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from vcintel.models import Company
from .base import CompanySource

logger = logging.getLogger(__name__)


class JsonFileCompanySource(CompanySource):
    """Load companies from a JSON array of camelCase company objects."""

    name = "json_file"

    def __init__(self, path: Path):
        self.path = Path(path)
        self._companies: Optional[list[Company]] = None

    async def fetch_companies(self) -> list[Company]:
        if self._companies is None:
            self._companies = self._load()
        return list(self._companies)

    def _load(self) -> list[Company]:
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, list):
            raise ValueError(f"{self.path}: expected a JSON array of companies")

        companies = []
        seen_ids: set[str] = set()
        for i, item in enumerate(data):
            try:
                company = Company.model_validate(item)
            except ValidationError as e:
                raise ValueError(f"{self.path}: invalid company at index {i}: {e}") from e
            if company.id in seen_ids:
                raise ValueError(f"{self.path}: duplicate company id {company.id!r}")
            seen_ids.add(company.id)
            companies.append(company)

        logger.info(f"Loaded {len(companies)} companies from {self.path}")
        return companies
