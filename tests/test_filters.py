"""Tests for listing filter functionality."""

import pytest
from datetime import date

from vcintel.listing import CompanyFilter, available_filters
from vcintel.models import Company, CompanyQuery


def make_query(**kwargs) -> CompanyQuery:
    """Create test query with defaults."""
    return CompanyQuery(**kwargs)


def make_company(**kwargs) -> Company:
    """Create test company with defaults."""
    defaults = {
        "id": "c1",
        "name": "Test Company",
        "description": "Workflow automation for finance teams",
        "industry": "Fintech",
        "stage": "Series A",
        "founded": 2020,
        "last_funding_date": date(2023, 1, 1),
    }
    defaults.update(kwargs)
    return Company(**defaults)


class TestCompanyFilter:
    """Tests for the search, industry and stage predicates."""

    def test_passes_with_no_constraints(self):
        company_filter = CompanyFilter(make_query())
        assert company_filter.matches(make_company())

    def test_search_matches_name_case_insensitively(self):
        company_filter = CompanyFilter(make_query(search_text="TEST comp"))
        assert company_filter.matches(make_company())

    def test_search_matches_description(self):
        company_filter = CompanyFilter(make_query(search_text="finance"))
        assert company_filter.matches(make_company())

    def test_search_ignores_other_fields(self):
        company_filter = CompanyFilter(make_query(search_text="fintech"))
        assert not company_filter.matches(make_company())

    def test_search_text_is_literal(self):
        company_filter = CompanyFilter(make_query(search_text="fin.nce"))
        assert not company_filter.matches(make_company())

    def test_industry_exact_match(self):
        assert CompanyFilter(make_query(industry_filter="Fintech")).matches(make_company())
        assert not CompanyFilter(make_query(industry_filter="fintech")).matches(make_company())

    def test_stage_exact_match(self):
        assert CompanyFilter(make_query(stage_filter="Series A")).matches(make_company())
        assert not CompanyFilter(make_query(stage_filter="Series B")).matches(make_company())

    def test_all_sentinel_disables_filters(self):
        company_filter = CompanyFilter(make_query(industry_filter="all", stage_filter="all"))
        assert company_filter.matches(make_company(industry="Anything", stage="Seed"))

    def test_all_predicates_must_pass(self):
        company_filter = CompanyFilter(
            make_query(search_text="test", industry_filter="Fintech", stage_filter="Seed")
        )
        assert not company_filter.matches(make_company())

    def test_apply_keeps_input_order(self):
        companies = [
            make_company(id="3", name="Zeta Test"),
            make_company(id="1", name="Alpha", description="nothing"),
            make_company(id="2", name="Beta Test"),
        ]
        kept = CompanyFilter(make_query(search_text="test")).apply(companies)
        assert [c.id for c in kept] == ["3", "2"]


class TestAvailableFilters:
    """Tests for the filter choice helper."""

    def test_all_comes_first_then_first_seen(self):
        companies = [
            make_company(id="1", industry="HR Tech", stage="Series F"),
            make_company(id="2", industry="AI", stage="Series D"),
            make_company(id="3", industry="HR Tech", stage="Series D"),
        ]
        options = available_filters(companies)
        assert options.industries == ["all", "HR Tech", "AI"]
        assert options.stages == ["all", "Series F", "Series D"]

    def test_empty_collection(self):
        options = available_filters([])
        assert options.industries == ["all"]
        assert options.stages == ["all"]
