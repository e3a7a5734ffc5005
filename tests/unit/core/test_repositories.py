"""Tests for repository ordering and evaluation upserts."""

from datetime import datetime, timezone

import pytest

from clarify.core.database import base
from clarify.core.repositories import EvaluationRepository, OptionRepository
from clarify.core.schemas import CriterionCreate, DecisionCreate, OptionCreate

OWNER = "alice"
FROZEN = datetime(2026, 1, 1, tzinfo=timezone.utc)


class _FrozenDatetime(datetime):
    @classmethod
    def now(cls, tz=None):
        return FROZEN


@pytest.fixture
def frozen_clock(monkeypatch):
    monkeypatch.setattr(base, "datetime", _FrozenDatetime)
    monkeypatch.setattr(base, "_last_timestamp", None)


@pytest.fixture
async def decision(decision_service):
    return await decision_service.create_decision(OWNER, DecisionCreate(title="Commute"))


def test_clock_is_strictly_increasing(frozen_clock):
    stamps = [base._utcnow() for _ in range(5)]

    assert stamps[0] == FROZEN
    assert all(earlier < later for earlier, later in zip(stamps, stamps[1:]))


async def test_options_listed_in_insertion_order_within_one_tick(
    frozen_clock, session, decision
):
    repository = OptionRepository(session)
    names = ["delta", "alpha", "charlie", "bravo", "echo"]
    for name in names:
        await repository.create(OptionCreate(name=name), decision_id=decision.id)

    options = await repository.list_for_decision(decision.id)

    assert [o.name for o in options] == names
    assert len({o.created_at for o in options}) == len(names)


async def test_upsert_updates_row_inserted_concurrently(
    session, decision_service, decision, monkeypatch
):
    option = await decision_service.add_option(decision.id, OWNER, OptionCreate(name="Car"))
    criterion = await decision_service.add_criterion(
        decision.id, OWNER, CriterionCreate(name="Cost", weight=3)
    )
    decision_id, option_id, criteria_id = decision.id, option.id, criterion.id

    repository = EvaluationRepository(session)
    first = await repository.upsert(
        decision_id, option_id, criteria_id,
        pros=[{"text": "Fast", "impactScore": 1}], cons=[],
    )
    first_id = first.id

    # The first lookup misses the row, as if another request inserted it
    # between the read and the write.
    lookup = repository.get_for_pair
    calls = []

    async def stale_then_real(*args):
        calls.append(args)
        if len(calls) == 1:
            return None
        return await lookup(*args)

    monkeypatch.setattr(repository, "get_for_pair", stale_then_real)

    evaluation = await repository.upsert(
        decision_id, option_id, criteria_id,
        pros=[{"text": "Faster", "impactScore": 4}],
        cons=[{"text": "Fuel", "impactScore": 2}],
    )

    assert len(calls) == 2
    assert evaluation.id == first_id
    assert evaluation.pros == [{"text": "Faster", "impactScore": 4}]
    assert evaluation.cons == [{"text": "Fuel", "impactScore": 2}]

    evaluations = await EvaluationRepository(session).list_for_decision(decision_id)
    assert [e.id for e in evaluations] == [first_id]
