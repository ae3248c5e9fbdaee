"""Command-line interface for rate card quotes and budget recommendations.

Provides an argparse-based tool with three subcommands: ``quote`` prices a
campaign, ``recommend`` runs the budget reverse-calculator, and
``territories`` lists the territory tree.  Output formats: table (default)
or JSON.

This is the input boundary: numeric ranges (duration and track volume at
least 1, follower counts and budget not negative) are enforced here so the
pricing core can stay free of validation.

Usage::

    ratecard quote --tier Superstar --type Paid --weeks 8 --tracks 3 --viral
    ratecard quote --territory usa --territory canada --format json
    ratecard recommend --budget 25000
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from decimal import Decimal, InvalidOperation
from typing import Any

import structlog

from ratecard.config import get_settings
from ratecard.domain.errors import RateCardError
from ratecard.domain.models import WORLDWIDE_ID, CampaignConfiguration, Quote, Recommendation
from ratecard.domain.types import ArtistTier, CampaignType
from ratecard.pricing.engine import quantize_money
from ratecard.pricing.quote import build_quote
from ratecard.recommend.search import find_recommendations
from ratecard.territory.aggregator import get_territory_aggregator
from ratecard.territory.tree import TerritoryNode

logger = structlog.get_logger()


def configure_logging(production: bool = False) -> None:
    """Configure structlog for production (JSON) or development (console).

    Production mode (*production=True*): JSON rendering at INFO level.
    Development mode: colored console rendering at DEBUG level.  Logs go to
    stderr so command output on stdout stays machine-readable.

    Args:
        production: Enable production mode if ``True``.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if production:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
        log_level = logging.INFO
    else:
        renderer = structlog.dev.ConsoleRenderer()
        log_level = logging.DEBUG

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.bind_contextvars(service="ratecard")


# ---------------------------------------------------------------------------
# Argument types
# ---------------------------------------------------------------------------

def positive_int(value: str) -> int:
    """argparse type: an integer of at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def non_negative_decimal(value: str) -> Decimal:
    """argparse type: a decimal number that is zero or more."""
    try:
        number = Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"expected a number, got {value!r}") from None
    if not number.is_finite() or number < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative number, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for all subcommands.

    Returns:
        A configured :class:`argparse.ArgumentParser`.
    """
    parser = argparse.ArgumentParser(
        prog="ratecard",
        description="Music licensing rate card estimator",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    quote = subparsers.add_parser("quote", help="Price a campaign configuration")
    quote.add_argument(
        "--tier",
        type=ArtistTier,
        choices=list(ArtistTier),
        default=ArtistTier.DEVELOPING,
        help="Artist tier (default: Developing)",
    )
    quote.add_argument(
        "--type",
        type=CampaignType,
        choices=list(CampaignType),
        default=CampaignType.ORGANIC,
        dest="campaign_type",
        help="Campaign type (default: Organic)",
    )
    quote.add_argument(
        "--weeks",
        type=positive_int,
        default=4,
        help="Campaign duration in weeks (default: 4)",
    )
    quote.add_argument(
        "--tracks",
        type=positive_int,
        default=1,
        help="Number of tracks licensed (default: 1)",
    )
    quote.add_argument(
        "--billboard",
        action="store_true",
        help="Track is on the Billboard Hot 100",
    )
    quote.add_argument(
        "--viral",
        action="store_true",
        help="Track is verified as trending",
    )
    quote.add_argument(
        "--brand-followers",
        type=non_negative_decimal,
        default=Decimal("0"),
        help="Brand partner followers in millions (default: 0)",
    )
    quote.add_argument(
        "--artist-followers",
        type=non_negative_decimal,
        default=Decimal("0"),
        help="Artist followers in millions (default: 0)",
    )
    quote.add_argument(
        "--territory",
        action="append",
        dest="territories",
        metavar="ID",
        help="Territory id; repeat for several (default: worldwide)",
    )
    _add_format_argument(quote)

    recommend = subparsers.add_parser("recommend", help="Find campaigns that fit a budget")
    recommend.add_argument(
        "--budget",
        type=non_negative_decimal,
        default=None,
        help="Maximum campaign cost (default: RATECARD_DEFAULT_BUDGET or 100000)",
    )
    _add_format_argument(recommend)

    subparsers.add_parser("territories", help="List territories and their coverage share")

    return parser


def _add_format_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        type=str,
        choices=["table", "json"],
        default="table",
        dest="output_format",
        help="Output format (default: table)",
    )


def config_from_args(args: argparse.Namespace) -> CampaignConfiguration:
    """Build a ``CampaignConfiguration`` from parsed ``quote`` arguments."""
    return CampaignConfiguration(
        artist_tier=args.tier,
        campaign_type=args.campaign_type,
        duration_weeks=args.weeks,
        billboard_hot_100=args.billboard,
        brand_follower_count=args.brand_followers,
        artist_follower_count=args.artist_followers,
        track_volume=args.tracks,
        is_viral=args.viral,
        selected_territories=tuple(args.territories or (WORLDWIDE_ID,)),
    )


# ---------------------------------------------------------------------------
# Output formatting
# ---------------------------------------------------------------------------

def _percent(fraction: Decimal) -> str:
    return f"{fraction * 100:.0f}%"


def format_quote_table(quote: Quote) -> str:
    """Format a quote's breakdown as aligned label/value rows.

    Args:
        quote: The quote to render.

    Returns:
        Multi-line table string.
    """
    config = quote.configuration
    b = quote.breakdown
    rows: list[tuple[str, str]] = [
        ("Artist Tier", str(config.artist_tier)),
        ("Campaign Type", str(config.campaign_type)),
        ("Duration", f"{config.duration_weeks} weeks"),
        ("Track Volume", str(config.track_volume)),
        ("Combined Followers", f"{b.combined_followers}M"),
        ("Follower Base Fee", str(quantize_money(b.follower_base_fee))),
        ("Artist Base Fee", str(quantize_money(b.artist_base_fee))),
        ("Total Base Fee", str(quantize_money(b.total_base_fee))),
        ("Billboard Multiplier", f"{b.billboard_multiplier}x"),
        ("Rate With Billboard", str(quantize_money(b.rate_with_billboard))),
        ("Weekly Rate", str(quantize_money(b.weekly_rate))),
        ("Campaign Multiplier", f"{b.campaign_multiplier}x"),
        ("Gross Price", str(quantize_money(b.gross_price))),
        ("Volume Discount", _percent(b.volume_discount_fraction)),
        ("Virality Discount", _percent(b.virality_discount_fraction)),
        ("Total Discount", str(quantize_money(b.total_discount_amount))),
        ("Price After Discounts", str(quantize_money(b.price_after_discounts))),
        ("Territory", f"{quote.territory_label} ({b.territory_coverage_percent}%)"),
        ("Final Price", str(quantize_money(b.final_price))),
    ]
    width = max(len(label) for label, _ in rows)
    return "\n".join(f"{label.ljust(width)}  {value}" for label, value in rows)


def format_recommendations_table(recommendations: Sequence[Recommendation]) -> str:
    """Format recommendations as a table with one row per strategy.

    Args:
        recommendations: Recommendations from ``find_recommendations``.

    Returns:
        Formatted table string with header row.
    """
    if not recommendations:
        return "No configuration fits this budget."

    headers = ["Strategy", "Price", "Savings", "Description"]
    widths = [14, 12, 12, 50]

    lines: list[str] = []
    header_line = "  ".join(h.ljust(w) for h, w in zip(headers, widths, strict=True))
    lines.append(header_line)
    lines.append("-" * len(header_line))

    for rec in recommendations:
        cells = [
            rec.label,
            str(quantize_money(rec.price)),
            str(quantize_money(rec.savings)),
            rec.description,
        ]
        lines.append("  ".join(c.ljust(w) for c, w in zip(cells, widths, strict=True)))

    return "\n".join(lines)


def format_territory_tree(roots: Sequence[TerritoryNode]) -> str:
    """Render the territory tree as an indented list with percentages."""
    lines: list[str] = []

    def render(node: TerritoryNode, depth: int) -> None:
        lines.append(f"{'  ' * depth}{node.id:<28} {node.name} ({node.percentage}%)")
        for child in node.children:
            render(child, depth + 1)

    for root in roots:
        render(root, 0)
    return "\n".join(lines)


def to_jsonable(value: Quote | Sequence[Recommendation]) -> Any:
    """Convert a quote or recommendation list to JSON-ready data.

    Decimals are rendered as strings so no precision is lost.
    """
    if isinstance(value, Quote):
        return value.model_dump(mode="json")
    return [rec.model_dump(mode="json") for rec in value]


def run(args: argparse.Namespace) -> str:
    """Execute a parsed command and return its output text."""
    if args.command == "quote":
        quote = build_quote(config_from_args(args))
        if args.output_format == "json":
            return json.dumps(to_jsonable(quote), indent=2)
        return format_quote_table(quote)

    if args.command == "recommend":
        budget = args.budget if args.budget is not None else get_settings().default_budget
        recommendations = find_recommendations(budget)
        if args.output_format == "json":
            return json.dumps(to_jsonable(recommendations), indent=2)
        return format_recommendations_table(recommendations)

    return format_territory_tree(get_territory_aggregator().index.roots)


def main(argv: Sequence[str] | None = None) -> None:
    """Parse arguments, run the command, and print its output."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(production=get_settings().production)

    try:
        output = run(args)
    except RateCardError as exc:
        logger.error("command_failed", command=args.command, error=str(exc))
        sys.exit(1)

    print(output)


if __name__ == "__main__":
    main()
