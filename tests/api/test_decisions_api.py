"""HTTP tests for the decision endpoints."""

import uuid

import pytest

API = "/api/v1/decisions"
OWNER = {"X-Owner-Id": "alice"}
OTHER = {"X-Owner-Id": "mallory"}


# --- Helpers ---


async def _create_decision(client, data=None, headers=OWNER):
    resp = await client.post(f"{API}/", json=data or {"title": "Pick a city"}, headers=headers)
    assert resp.status_code == 201
    return resp.json()


async def _add_option(client, decision_id, name):
    resp = await client.post(
        f"{API}/{decision_id}/options", json={"name": name}, headers=OWNER
    )
    assert resp.status_code == 201
    return resp.json()


async def _add_criterion(client, decision_id, name, weight):
    resp = await client.post(
        f"{API}/{decision_id}/criteria",
        json={"name": name, "weight": weight},
        headers=OWNER,
    )
    assert resp.status_code == 201
    return resp.json()


async def _save_evaluation(client, decision_id, option_id, criteria_id, pros=(), cons=()):
    return await client.post(
        f"{API}/{decision_id}/evaluations",
        json={
            "optionId": option_id,
            "criteriaId": criteria_id,
            "pros": [{"text": f"pro {i}", "impactScore": s} for i, s in enumerate(pros)],
            "cons": [{"text": f"con {i}", "impactScore": s} for i, s in enumerate(cons)],
        },
        headers=OWNER,
    )


# --- Decisions ---


async def test_health(client):
    resp = await client.get("/health")
    assert resp.json() == {"status": "healthy"}


async def test_create_and_get_decision(client, sample_decision_data):
    created = await _create_decision(client, sample_decision_data)

    assert created["title"] == "Which laptop to buy"
    assert created["tags"] == ["hardware", "personal"]
    assert created["owner_id"] == "alice"

    resp = await client.get(f"{API}/{created['id']}", headers=OWNER)
    assert resp.status_code == 200
    body = resp.json()
    assert body["decision"]["id"] == created["id"]
    assert body["options"] == []
    assert body["criteria"] == []
    assert body["evaluations"] == []


async def test_create_requires_title(client):
    resp = await client.post(f"{API}/", json={"title": "   "}, headers=OWNER)
    assert resp.status_code == 422


async def test_list_is_scoped_to_owner_newest_first(client):
    await _create_decision(client, {"title": "First"})
    await _create_decision(client, {"title": "Second"})
    await _create_decision(client, {"title": "Theirs"}, headers=OTHER)

    resp = await client.get(f"{API}/", headers=OWNER)
    body = resp.json()

    assert body["total"] == 2
    assert [d["title"] for d in body["items"]] == ["Second", "First"]


async def test_other_owner_gets_404(client):
    created = await _create_decision(client)

    resp = await client.get(f"{API}/{created['id']}", headers=OTHER)
    assert resp.status_code == 404

    resp = await client.delete(f"{API}/{created['id']}", headers=OTHER)
    assert resp.status_code == 404


async def test_update_decision(client):
    created = await _create_decision(client)

    resp = await client.patch(
        f"{API}/{created['id']}",
        json={"description": "Moving in spring", "tags": ["move"]},
        headers=OWNER,
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["title"] == "Pick a city"
    assert body["description"] == "Moving in spring"
    assert body["tags"] == ["move"]


async def test_update_decision_with_put(client):
    created = await _create_decision(client)

    resp = await client.put(
        f"{API}/{created['id']}", json={"title": "Pick a country"}, headers=OWNER
    )

    assert resp.status_code == 200
    assert resp.json()["title"] == "Pick a country"

    resp = await client.put(f"{API}/{created['id']}", json={"title": "X"}, headers=OTHER)
    assert resp.status_code == 404


async def test_delete_cascades(client, session):
    created = await _create_decision(client)
    option = await _add_option(client, created["id"], "Lisbon")
    criterion = await _add_criterion(client, created["id"], "Cost", 3)
    await _save_evaluation(client, created["id"], option["id"], criterion["id"], pros=[2])

    resp = await client.delete(f"{API}/{created['id']}", headers=OWNER)
    assert resp.status_code == 204

    resp = await client.get(f"{API}/{created['id']}", headers=OWNER)
    assert resp.status_code == 404

    from sqlalchemy import func, select

    from clarify.core.models import Criterion, Evaluation, Option

    for model in (Option, Criterion, Evaluation):
        count = (await session.execute(select(func.count()).select_from(model))).scalar()
        assert count == 0


# --- Options, criteria, evaluations ---


async def test_criterion_weight_out_of_range(client):
    created = await _create_decision(client)
    resp = await client.post(
        f"{API}/{created['id']}/criteria", json={"name": "Cost", "weight": 6}, headers=OWNER
    )
    assert resp.status_code == 422


async def test_option_on_missing_decision(client):
    resp = await client.post(
        f"{API}/{uuid.uuid4()}/options", json={"name": "X"}, headers=OWNER
    )
    assert resp.status_code == 404


async def test_evaluation_is_upserted(client):
    created = await _create_decision(client)
    option = await _add_option(client, created["id"], "Lisbon")
    criterion = await _add_criterion(client, created["id"], "Cost", 3)

    first = await _save_evaluation(client, created["id"], option["id"], criterion["id"], pros=[2])
    second = await _save_evaluation(
        client, created["id"], option["id"], criterion["id"], pros=[4], cons=[1]
    )

    assert first.status_code == 201
    assert second.status_code == 201
    assert first.json()["id"] == second.json()["id"]
    assert second.json()["pros"] == [{"text": "pro 0", "impactScore": 4}]

    detail = (await client.get(f"{API}/{created['id']}", headers=OWNER)).json()
    assert len(detail["evaluations"]) == 1
    assert detail["evaluations"][0]["optionId"] == option["id"]


async def test_evaluation_rejects_foreign_option(client):
    first = await _create_decision(client)
    second = await _create_decision(client, {"title": "Other"})
    foreign_option = await _add_option(client, second["id"], "Elsewhere")
    criterion = await _add_criterion(client, first["id"], "Cost", 3)

    resp = await _save_evaluation(client, first["id"], foreign_option["id"], criterion["id"])

    assert resp.status_code == 400
    assert resp.json()["detail"] == "Invalid option or criterion"


async def test_evaluation_impact_out_of_range(client):
    created = await _create_decision(client)
    option = await _add_option(client, created["id"], "Lisbon")
    criterion = await _add_criterion(client, created["id"], "Cost", 3)

    resp = await _save_evaluation(client, created["id"], option["id"], criterion["id"], pros=[0])
    assert resp.status_code == 422


# --- Analysis ---


async def test_analyze_end_to_end(client):
    created = await _create_decision(client)
    lisbon = await _add_option(client, created["id"], "Lisbon")
    berlin = await _add_option(client, created["id"], "Berlin")
    cost = await _add_criterion(client, created["id"], "Cost", 4)
    await _add_criterion(client, created["id"], "Weather", 2)

    await _save_evaluation(client, created["id"], lisbon["id"], cost["id"], pros=[5], cons=[1])
    await _save_evaluation(client, created["id"], berlin["id"], cost["id"], cons=[3])

    resp = await client.post(f"{API}/{created['id']}/analyze", headers=OWNER)

    assert resp.status_code == 200
    body = resp.json()
    assert body["decision"]["title"] == "Pick a city"
    assert [c["name"] for c in body["criteria"]] == ["Cost", "Weather"]

    first, second = body["results"]
    assert first["optionId"] == lisbon["id"]
    assert first["score"] == 56
    assert first["risk"] == "Low"
    assert first["confidence"] == 50
    assert first["details"][0]["criteriaName"] == "Cost"
    assert first["details"][0]["weightNorm"] == pytest.approx(0.8)

    assert second["name"] == "Berlin"
    assert second["score"] == 28
    assert second["risk"] == "High"

    assert body["recommended"]["name"] == "Lisbon"


async def test_analyze_without_criteria(client):
    created = await _create_decision(client)
    await _add_option(client, created["id"], "Lisbon")

    resp = await client.post(f"{API}/{created['id']}/analyze", headers=OWNER)

    assert resp.status_code == 400
    assert "at least one option and one criterion" in resp.json()["detail"]


async def test_analyze_other_owner(client):
    created = await _create_decision(client)
    resp = await client.post(f"{API}/{created['id']}/analyze", headers=OTHER)
    assert resp.status_code == 404


# --- Suggestions ---


async def test_apply_suggestion(client):
    created = await _create_decision(client)
    await _add_option(client, created["id"], "Lisbon")

    resp = await client.post(
        f"{API}/{created['id']}/apply-suggestion",
        json={
            "criteria": [{"name": "Cost"}],
            "evaluations": [
                {
                    "optionName": "Lisbon",
                    "criteriaName": "Cost",
                    "pros": [{"text": "Cheap rent", "impactScore": 4}],
                    "cons": [],
                }
            ],
        },
        headers=OWNER,
    )

    assert resp.status_code == 200
    assert resp.json()["stats"] == {"criteriaCount": 1, "evaluationCount": 1}

    analysis = (await client.post(f"{API}/{created['id']}/analyze", headers=OWNER)).json()
    # Default weight 3: 0.6 * 0.7 * 100
    assert analysis["recommended"]["score"] == 42


async def test_apply_suggestion_requires_both_lists(client):
    created = await _create_decision(client)
    resp = await client.post(
        f"{API}/{created['id']}/apply-suggestion",
        json={"criteria": [{"name": "Cost"}], "evaluations": []},
        headers=OWNER,
    )
    assert resp.status_code == 400


async def test_apply_ai_path(client):
    created = await _create_decision(client)
    await _add_option(client, created["id"], "Lisbon")

    resp = await client.post(
        f"{API}/{created['id']}/apply-ai",
        json={
            "criteria": [{"name": "Cost", "weight": 5}],
            "evaluations": [{"optionName": "Lisbon", "criteriaName": "Cost"}],
        },
        headers=OWNER,
    )

    assert resp.status_code == 200
    assert resp.json()["stats"] == {"criteriaCount": 1, "evaluationCount": 1}
