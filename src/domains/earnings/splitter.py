"""Compensation splitter.

Splits one earning record into the development pool cut and the net amount,
then divides both evenly across the record's participants. Every function
here is a pure function of a single record; nothing is rounded; display
formatting is left to the caller.
"""

import structlog

from .config import default_config
from .models import EarningRecord, EarningSplit

logger = structlog.get_logger()


def resolve_amount(record: EarningRecord) -> float:
    """Gross amount, with negative values normalized to zero."""
    if record.amount < 0:
        logger.warning(
            "earning_amount_normalized",
            record_id=record.id,
            amount=record.amount,
        )
        return 0.0
    return record.amount


def resolve_pool(record: EarningRecord, pool_rate: float | None = None) -> float:
    """Explicit pool cut when present and non-negative, else ``amount * pool_rate``."""
    if record.pool_amount is not None and record.pool_amount >= 0:
        return record.pool_amount
    rate = default_config.pool_rate if pool_rate is None else pool_rate
    return resolve_amount(record) * rate


def resolve_net(record: EarningRecord, pool_rate: float | None = None) -> float:
    return max(resolve_amount(record) - resolve_pool(record, pool_rate), 0.0)


def resolve_participants(record: EarningRecord) -> list[str]:
    """Distinct participants in first-seen order; the owner alone when none are listed."""
    seen: list[str] = []
    for member in record.participants:
        if member and member not in seen:
            seen.append(member)
    return seen or [record.user_id]


def share_of(record: EarningRecord, user_id: str, pool_rate: float | None = None) -> float:
    participants = resolve_participants(record)
    if user_id not in participants:
        return 0.0
    return resolve_net(record, pool_rate) / len(participants)


def pool_share_of(record: EarningRecord, user_id: str, pool_rate: float | None = None) -> float:
    participants = resolve_participants(record)
    if user_id not in participants:
        return 0.0
    return resolve_pool(record, pool_rate) / len(participants)


def gross_share_of(record: EarningRecord, user_id: str) -> float:
    participants = resolve_participants(record)
    if user_id not in participants:
        return 0.0
    return resolve_amount(record) / len(participants)


def split_earning(record: EarningRecord, pool_rate: float | None = None) -> EarningSplit:
    """Full split of a single record: pool, net and the even per-participant shares."""
    participants = resolve_participants(record)
    pool = resolve_pool(record, pool_rate)
    net = resolve_net(record, pool_rate)
    return EarningSplit(
        record_id=record.id,
        gross=resolve_amount(record),
        pool=pool,
        net=net,
        participants=participants,
        per_participant_share=net / len(participants),
        per_participant_pool=pool / len(participants),
    )
