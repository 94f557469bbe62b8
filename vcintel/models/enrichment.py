"""Enrichment request/response models."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EnrichmentRequest(BaseModel):
    """Input for a single enrichment call."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str = ""
    company_name: str = Field(default="", alias="companyName")


class EnrichmentSource(BaseModel):
    """One document consulted while enriching, and when it was read."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str
    fetched_at: datetime = Field(alias="fetchedAt")

    @field_validator("fetched_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Naive timestamps from a provider are read as UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class EnrichmentResult(BaseModel):
    """Structured summary of a company derived from public sources.

    ``keywords`` should be unique but duplicates are tolerated. ``sources``
    is the provenance trail and is never empty on a successful response.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    summary: str
    what_they_do: list[str] = Field(alias="whatTheyDo")
    keywords: list[str]
    derived_signals: list[str] = Field(alias="derivedSignals")
    sources: list[EnrichmentSource] = Field(min_length=1)

    @property
    def unique_keywords(self) -> list[str]:
        """Keywords with duplicates dropped, first occurrence kept."""
        return list(dict.fromkeys(self.keywords))
