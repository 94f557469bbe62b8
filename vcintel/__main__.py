"""CLI entry point for the company intelligence backend."""

import argparse
import asyncio
import json
import logging
import sys

from vcintel.config import settings
from vcintel.connectors import create_source
from vcintel.enrich import EnrichmentError, EnrichmentService, create_provider
from vcintel.listing import InvalidQuery, ListingEngine, format_funding, format_signal, parse_query
from vcintel.models import EnrichmentRequest, ListingPage

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def print_listing(result: ListingPage):
    """Print a listing page to the console."""
    print(f"\nShowing {len(result.items)} of {result.total_matched} companies "
          f"(page {result.page} of {max(result.total_pages, 1)})")
    print("-" * 60)

    for company in result.items:
        print(f"\n{company.name}  [{company.industry} | {company.stage}]")
        print(f"   Funding: {format_funding(company.total_funding)} "
              f"(last round {company.last_funding_date.isoformat()})")
        if company.description:
            print(f"   {company.description}")
        if company.signals:
            print(f"   Signals: {', '.join(format_signal(s) for s in company.signals)}")

    if not result.items:
        print("No companies found")
    print()


async def run_list(args: argparse.Namespace) -> ListingPage:
    query = parse_query(
        {
            "searchText": args.search,
            "industryFilter": args.industry,
            "stageFilter": args.stage,
            "sortField": args.sort,
            "sortDirection": args.direction,
            "page": args.page,
            "pageSize": args.page_size,
        },
        default_page_size=settings.default_page_size,
    )
    source = create_source(args.companies)
    companies = await source.fetch_companies()
    return ListingEngine().list(companies, query)


async def run_enrich(args: argparse.Namespace):
    provider = create_provider(args.provider)
    service = EnrichmentService(provider, timeout=args.timeout)
    try:
        return await service.enrich(EnrichmentRequest(url=args.url, company_name=args.name))
    finally:
        await provider.aclose()


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="VC company intelligence - list and enrich companies"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List companies")
    list_parser.add_argument("--search", "-s", default=None, help="Search text over name and description")
    list_parser.add_argument("--industry", default=None, help="Exact industry (default: all)")
    list_parser.add_argument("--stage", default=None, help="Exact stage (default: all)")
    list_parser.add_argument("--sort", default=None, help="Sort field (default: name)")
    list_parser.add_argument("--direction", choices=["asc", "desc"], default=None)
    list_parser.add_argument("--page", type=int, default=None)
    list_parser.add_argument("--page-size", type=int, default=None)
    list_parser.add_argument(
        "--companies", "-c",
        default=None,
        help="Path to a companies JSON file (default: built-in demo data)",
    )
    list_parser.add_argument("--json", action="store_true", help="Print the page as JSON")

    enrich_parser = subparsers.add_parser("enrich", help="Enrich a company from its website")
    enrich_parser.add_argument("url", help="Company website URL")
    enrich_parser.add_argument("--name", "-n", default="", help="Company name")
    enrich_parser.add_argument(
        "--provider",
        choices=["mock", "http"],
        default=None,
        help=f"Enrichment provider (default: {settings.enrichment_provider})",
    )
    enrich_parser.add_argument(
        "--timeout",
        type=float,
        default=settings.enrichment_timeout,
        help=f"Seconds to wait for the provider (default: {settings.enrichment_timeout})",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        if args.command == "list":
            result = asyncio.run(run_list(args))
            if args.json:
                print(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2))
            else:
                print_listing(result)
        else:
            result = asyncio.run(run_enrich(args))
            print(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2))
    except InvalidQuery as e:
        logger.error(f"Invalid query: {e}")
        sys.exit(1)
    except EnrichmentError as e:
        retry_hint = " (retryable)" if e.retryable else ""
        logger.error(f"Enrichment failed [{e.code}]{retry_hint}: {e}")
        sys.exit(1)
    except (OSError, ValueError) as e:
        logger.error(f"Failed: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
