"""Earnings rollups and leaderboards.

Aggregates are recomputed from the live record collection on every call by
replaying the splitter over each record. Nothing is cached, so a deleted
record disappears from every rollup on the next call.
"""

from collections.abc import Iterable

import structlog

from src.domains.calendar.models import DateWindow

from .config import default_config
from .models import (
    CategoryRollup,
    ContributorRanking,
    ContributorShare,
    EarningCategory,
    EarningRecord,
    EarningsSummary,
    TeamTotals,
)
from .splitter import (
    gross_share_of,
    pool_share_of,
    resolve_amount,
    resolve_net,
    resolve_participants,
    resolve_pool,
    share_of,
)

logger = structlog.get_logger()


def filter_records(
    records: Iterable[EarningRecord],
    window: DateWindow | None = None,
    category: EarningCategory | None = None,
) -> list[EarningRecord]:
    return [
        r
        for r in records
        if (window is None or window.contains(r.date))
        and (category is None or r.category == category)
    ]


# ---------------------------------------------------------------------------
# Totals
# ---------------------------------------------------------------------------


def gross_total(records: Iterable[EarningRecord]) -> float:
    return sum(resolve_amount(r) for r in records)


def pool_total(records: Iterable[EarningRecord], pool_rate: float | None = None) -> float:
    return sum(resolve_pool(r, pool_rate) for r in records)


def net_total(records: Iterable[EarningRecord], pool_rate: float | None = None) -> float:
    return sum(resolve_net(r, pool_rate) for r in records)


# ---------------------------------------------------------------------------
# Per-member
# ---------------------------------------------------------------------------


def per_member_net(
    records: Iterable[EarningRecord], user_id: str, pool_rate: float | None = None
) -> float:
    return sum(share_of(r, user_id, pool_rate) for r in records)


def per_member_pool(
    records: Iterable[EarningRecord], user_id: str, pool_rate: float | None = None
) -> float:
    return sum(pool_share_of(r, user_id, pool_rate) for r in records)


def earnings_summary(
    records: Iterable[EarningRecord],
    user_id: str,
    window: DateWindow | None = None,
    pool_rate: float | None = None,
) -> EarningsSummary:
    """Member's gross share, pool share and ``net = max(0, gross - pool)``."""
    scoped = filter_records(records, window)
    gross = sum(gross_share_of(r, user_id) for r in scoped)
    pool = per_member_pool(scoped, user_id, pool_rate)
    return EarningsSummary(gross=gross, pool=pool, net=max(0.0, gross - pool))


def _contribution_order(records: list[EarningRecord]) -> dict[str, int]:
    """Rank of each member by their first contribution (date, then record order)."""
    order: dict[str, int] = {}
    indexed = sorted(enumerate(records), key=lambda pair: (pair[1].date, pair[0]))
    for _, record in indexed:
        for member in resolve_participants(record):
            if member not in order:
                order[member] = len(order)
    return order


def top_contributors(
    records: Iterable[EarningRecord], n: int, pool_rate: float | None = None
) -> list[ContributorShare]:
    """The ``n`` members with the highest net share.

    Ties go to the member who contributed first, so the ordering is fully
    deterministic for a given record list.
    """
    scoped = list(records)
    order = _contribution_order(scoped)
    totals = {member: per_member_net(scoped, member, pool_rate) for member in order}
    ranked = sorted(order, key=lambda member: (-totals[member], order[member]))
    return [ContributorShare(member=m, net=totals[m]) for m in ranked[: max(n, 0)]]


# ---------------------------------------------------------------------------
# Leaderboards
# ---------------------------------------------------------------------------


def category_breakdown(
    records: Iterable[EarningRecord],
    window: DateWindow | None = None,
    top_n: int | None = None,
    pool_rate: float | None = None,
) -> list[CategoryRollup]:
    """One rollup per earning category, in enumeration order."""
    top_n = default_config.top_participants if top_n is None else top_n
    scoped = filter_records(records, window)

    breakdown: list[CategoryRollup] = []
    for category in EarningCategory:
        in_category = filter_records(scoped, category=category)
        breakdown.append(
            CategoryRollup(
                category=category,
                gross=gross_total(in_category),
                pool=pool_total(in_category, pool_rate),
                net=net_total(in_category, pool_rate),
                count=len(in_category),
                top_participants=top_contributors(in_category, top_n, pool_rate),
            )
        )

    logger.debug(
        "category_breakdown_computed",
        records=len(scoped),
        categories_with_records=sum(1 for c in breakdown if c.count),
    )
    return breakdown


def contributor_ranking(
    members: Iterable[str],
    records: Iterable[EarningRecord],
    window: DateWindow | None = None,
    pool_rate: float | None = None,
) -> list[ContributorRanking]:
    """Members sorted by net share, highest first; equal nets keep roster order."""
    scoped = filter_records(records, window)
    ranking = [
        ContributorRanking(
            member=member,
            net=per_member_net(scoped, member, pool_rate),
            pool_share=per_member_pool(scoped, member, pool_rate),
            record_count=sum(1 for r in scoped if member in resolve_participants(r)),
        )
        for member in dict.fromkeys(members)
    ]
    ranking.sort(key=lambda row: -row.net)
    return ranking


def team_totals(
    members: Iterable[str],
    records: Iterable[EarningRecord],
    window: DateWindow | None = None,
    pool_rate: float | None = None,
) -> TeamTotals:
    """Sum of the roster's net and pool shares inside ``window``."""
    roster = list(dict.fromkeys(members))
    scoped = filter_records(records, window)
    return TeamTotals(
        net=sum(per_member_net(scoped, m, pool_rate) for m in roster),
        pool=sum(per_member_pool(scoped, m, pool_rate) for m in roster),
        members=len(roster),
    )
