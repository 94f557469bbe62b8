"""Tests for the listing engine."""

import asyncio
from datetime import date

import pytest

from vcintel.connectors import MockCompanySource
from vcintel.listing import (
    SORT_KEYS,
    InvalidQuery,
    ListingEngine,
    collation_key,
    format_funding,
    format_signal,
    list_companies,
    parse_query,
    sort_companies,
)
from vcintel.models import Company, CompanyQuery, SortDirection, SortField


def mock_companies() -> list[Company]:
    return asyncio.run(MockCompanySource().fetch_companies())


def make_company(**kwargs) -> Company:
    """Create test company with defaults."""
    defaults = {
        "id": "c1",
        "name": "Test Company",
        "founded": 2020,
        "last_funding_date": date(2023, 1, 1),
    }
    defaults.update(kwargs)
    return Company(**defaults)


def make_query(**kwargs) -> CompanyQuery:
    return CompanyQuery(**kwargs)


def numbered(count: int) -> list[Company]:
    return [make_company(id=str(i), name=f"Company {i:02d}", employees=i) for i in range(1, count + 1)]


class TestScenarios:
    """The demo data scenarios from the dashboard."""

    def test_search_ai_sorted_by_name(self):
        query = make_query(
            search_text="ai",
            industry_filter="all",
            stage_filter="all",
            sort_field="name",
            sort_direction="asc",
            page=1,
            page_size=10,
        )
        result = list_companies(mock_companies(), query)
        assert [c.name for c in result.items] == ["Anthropic", "Glean"]
        assert result.total_matched == 2
        assert result.total_pages == 1
        assert result.page == 1

    def test_funding_descending_first_page(self):
        query = make_query(sort_field="totalFunding", sort_direction="desc", page=1, page_size=2)
        result = list_companies(mock_companies(), query)
        assert [c.name for c in result.items] == ["Anthropic", "Rippling"]
        assert result.total_matched == 5
        assert result.total_pages == 3

    def test_funding_descending_second_page(self):
        query = make_query(sort_field="totalFunding", sort_direction="desc", page=2, page_size=2)
        result = list_companies(mock_companies(), query)
        assert [c.name for c in result.items] == ["Deel", "Glean"]

    def test_industry_filter(self):
        result = list_companies(mock_companies(), make_query(industry_filter="HR Tech"))
        assert [c.name for c in result.items] == ["Deel", "Rippling"]

    def test_stage_filter_descending_employees(self):
        query = make_query(stage_filter="Series D", sort_field="employees", sort_direction="desc")
        result = list_companies(mock_companies(), query)
        assert [c.name for c in result.items] == ["Deel", "Vercel", "Glean"]


class TestSorting:
    """Tests for stable, typed sorting."""

    def test_every_sort_field_has_a_key(self):
        assert set(SORT_KEYS) == set(SortField)

    def test_numeric_sort_is_numeric(self):
        companies = [
            make_company(id="a", employees=100),
            make_company(id="b", employees=9),
            make_company(id="c", employees=20),
        ]
        ordered = sort_companies(companies, SortField.EMPLOYEES)
        assert [c.id for c in ordered] == ["b", "c", "a"]

    def test_date_sort_is_chronological(self):
        companies = [
            make_company(id="a", last_funding_date=date(2023, 11, 1)),
            make_company(id="b", last_funding_date=date(2023, 5, 23)),
            make_company(id="c", last_funding_date=date(2024, 1, 2)),
        ]
        ordered = sort_companies(companies, SortField.LAST_FUNDING_DATE, SortDirection.DESC)
        assert [c.id for c in ordered] == ["c", "a", "b"]

    def test_text_sort_ignores_case(self):
        companies = [
            make_company(id="a", name="beta"),
            make_company(id="b", name="Alpha"),
            make_company(id="c", name="Gamma"),
        ]
        ordered = sort_companies(companies, SortField.NAME)
        assert [c.name for c in ordered] == ["Alpha", "beta", "Gamma"]

    def test_text_sort_ignores_accents_at_first_level(self):
        companies = [
            make_company(id="a", name="Ecole"),
            make_company(id="b", name="Équipe"),
            make_company(id="c", name="Delta"),
        ]
        ordered = sort_companies(companies, SortField.NAME)
        assert [c.id for c in ordered] == ["c", "a", "b"]

    def test_lowercase_before_uppercase_on_case_tie(self):
        assert collation_key("acme") < collation_key("Acme")

    def test_equal_keys_keep_input_order_ascending(self):
        companies = [
            make_company(id="first", stage="Series D"),
            make_company(id="second", stage="Series A"),
            make_company(id="third", stage="Series D"),
        ]
        ordered = sort_companies(companies, SortField.STAGE)
        assert [c.id for c in ordered] == ["second", "first", "third"]

    def test_equal_keys_keep_input_order_descending(self):
        companies = [
            make_company(id="first", founded=2019),
            make_company(id="second", founded=2021),
            make_company(id="third", founded=2019),
        ]
        ordered = sort_companies(companies, SortField.FOUNDED, SortDirection.DESC)
        assert [c.id for c in ordered] == ["second", "first", "third"]

    def test_sort_does_not_mutate_input(self):
        companies = [make_company(id="b", name="B"), make_company(id="a", name="A")]
        sort_companies(companies, SortField.NAME)
        assert [c.id for c in companies] == ["b", "a"]

    def test_repeated_sort_is_identical(self):
        companies = mock_companies()
        first = sort_companies(companies, SortField.STAGE, SortDirection.DESC)
        second = sort_companies(companies, SortField.STAGE, SortDirection.DESC)
        assert [c.id for c in first] == [c.id for c in second]


class TestPagination:
    """Tests for page windows and clamping."""

    def test_pages_cover_everything_once(self):
        companies = numbered(23)
        engine = ListingEngine()
        first = engine.list(companies, make_query(page_size=5))
        assert first.total_pages == 5

        collected = []
        for page in range(1, first.total_pages + 1):
            collected.extend(engine.list(companies, make_query(page=page, page_size=5)).items)

        full = engine.list(companies, make_query(page_size=100)).items
        assert [c.id for c in collected] == [c.id for c in full]
        assert len({c.id for c in collected}) == 23

    def test_last_page_is_partial(self):
        result = list_companies(numbered(23), make_query(page=5, page_size=5))
        assert len(result.items) == 3

    def test_page_past_end_clamps_to_last(self):
        result = list_companies(numbered(23), make_query(page=9999, page_size=5))
        assert result.page == 5
        assert [c.name for c in result.items] == ["Company 21", "Company 22", "Company 23"]

    def test_page_below_one_clamps_to_first(self):
        result = list_companies(numbered(3), make_query(page=-4, page_size=2))
        assert result.page == 1
        assert len(result.items) == 2

    def test_empty_collection(self):
        result = list_companies([], make_query(page=3))
        assert result.items == []
        assert result.total_matched == 0
        assert result.total_pages == 0
        assert result.page == 1

    def test_no_matches(self):
        result = list_companies(mock_companies(), make_query(search_text="zzz"))
        assert result.total_matched == 0
        assert result.total_pages == 0
        assert result.items == []

    def test_clamp_page(self):
        assert ListingEngine.clamp_page(0, 0) == 1
        assert ListingEngine.clamp_page(2, 3) == 2
        assert ListingEngine.clamp_page(7, 3) == 3

    def test_idempotent(self):
        companies = mock_companies()
        query = make_query(search_text="platform", sort_field="founded", page_size=2)
        assert list_companies(companies, query) == list_companies(companies, query)


class TestInvalidQueries:
    """Tests for configuration errors."""

    @pytest.mark.parametrize("page_size", [0, -1])
    def test_non_positive_page_size(self, page_size):
        with pytest.raises(InvalidQuery) as exc_info:
            list_companies(mock_companies(), make_query(page_size=page_size))
        assert exc_info.value.field == "pageSize"

    def test_unknown_sort_field(self):
        with pytest.raises(InvalidQuery) as exc_info:
            list_companies(mock_companies(), make_query(sort_field="valuation"))
        assert exc_info.value.field == "sortField"

    def test_signals_are_not_sortable(self):
        with pytest.raises(InvalidQuery):
            list_companies(mock_companies(), make_query(sort_field="signals"))

    def test_page_size_checked_even_for_empty_input(self):
        with pytest.raises(InvalidQuery):
            list_companies([], make_query(page_size=0))


class TestParseQuery:
    """Tests for building queries from wire params."""

    def test_wire_names(self):
        query = parse_query({
            "searchText": "ai",
            "sortField": "totalFunding",
            "sortDirection": "desc",
            "page": "2",
            "pageSize": "5",
        })
        assert query.search_text == "ai"
        assert query.sort_field == "totalFunding"
        assert query.sort_direction == SortDirection.DESC
        assert query.page == 2
        assert query.page_size == 5

    def test_none_values_use_defaults(self):
        query = parse_query({"searchText": None, "industryFilter": None}, default_page_size=25)
        assert query.search_text == ""
        assert query.industry_filter == "all"
        assert query.page_size == 25

    def test_bad_direction(self):
        with pytest.raises(InvalidQuery) as exc_info:
            parse_query({"sortDirection": "sideways"})
        assert exc_info.value.field == "sortDirection"

    def test_non_numeric_page(self):
        with pytest.raises(InvalidQuery):
            parse_query({"page": "two"})


class TestFormatting:
    """Tests for display helpers."""

    def test_format_funding(self):
        assert format_funding(1_200_000_000) == "$1.2B"
        assert format_funding(630_000_000) == "$630M"
        assert format_funding(950) == "$950"

    def test_format_funding_rounds_halves_up(self):
        assert format_funding(1_250_000_000) == "$1.3B"
        assert format_funding(1_750_000_000) == "$1.8B"
        assert format_funding(2_500_000) == "$3M"
        assert format_funding(1_000_000_000) == "$1.0B"

    def test_format_signal(self):
        assert format_signal("recent_blog_post") == "Recent Blog Post"
        assert format_signal("ai_forward") == "Ai Forward"
