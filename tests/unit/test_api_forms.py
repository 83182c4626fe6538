"""Tests for the form endpoints."""

from __future__ import annotations

import pytest

from tests.fixtures.factories import OTHER_MANAGER_ID, create_record


async def open_form(client, interview_type: str = "STANDARD") -> dict:
    response = await client.post("/forms", json={"interviewType": interview_type})
    assert response.status_code == 201
    return response.json()


async def send(client, session_id: str, event: dict) -> dict:
    response = await client.post(f"/forms/{session_id}/events", json=event)
    assert response.status_code == 200, response.text
    return response.json()


@pytest.mark.asyncio
async def test_new_form_view(http_client):
    form = await open_form(http_client)

    assert form["stepLabel"] == "Step 1 of 4"
    assert form["isFirstStage"] is True
    assert [tab["active"] for tab in form["stages"]] == [True, False, False, False]
    assert [s["id"] for s in form["sections"]] == [
        "s-intro-icebreak",
        "s-intro-conditions",
        "s-intro-notice",
    ]
    notice = form["sections"][2]
    assert notice["consent"] is False
    assert notice["noticeChecks"] == [False, False, False]
    assert form["sections"][0]["consent"] is None
    assert form["aiSummaryBlocks"] == []


@pytest.mark.asyncio
async def test_depth_form(http_client):
    form = await open_form(http_client, "DEPTH")

    assert form["state"]["interviewType"] == "DEPTH"
    assert form["stages"][0]["id"] == "d-background"


@pytest.mark.asyncio
async def test_events_update_view(http_client):
    sid = (await open_form(http_client))["sessionId"]

    await send(
        http_client, sid, {"type": "edit_answer", "questionId": "s-q-intro-1", "text": "Hi"}
    )
    result = await send(
        http_client, sid, {"type": "set_consent", "sectionId": "s-intro-notice", "checked": True}
    )

    form = result["form"]
    assert result["closed"] is False
    question = form["sections"][0]["questions"][0]
    assert question["answer"] == "Hi"
    assert question["answered"] is True
    assert question["expanded"] is False
    assert form["sections"][2]["noticeChecks"] == [True, True, True]


@pytest.mark.asyncio
async def test_sushi_toggle_changes_sections(http_client):
    sid = (await open_form(http_client))["sessionId"]

    await send(http_client, sid, {"type": "jump", "stageId": "s-experience"})
    result = await send(
        http_client,
        sid,
        {"type": "update_basic_info", "changes": {"hasSushiExperience": True}},
    )

    assert [s["id"] for s in result["form"]["sections"]] == ["s-exp-sushi", "s-exp-general"]
    assert result["form"]["stepLabel"] == "Step 2 of 4"


@pytest.mark.asyncio
async def test_unknown_event_type_is_rejected(http_client):
    sid = (await open_form(http_client))["sessionId"]

    response = await http_client.post(f"/forms/{sid}/events", json={"type": "teleport"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_invalid_notice_index_is_rejected(http_client):
    sid = (await open_form(http_client))["sessionId"]

    response = await http_client.post(
        f"/forms/{sid}/events",
        json={"type": "set_notice", "sectionId": "s-intro-notice", "index": 9, "checked": True},
    )

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_save_without_name_is_blocked(http_client, store):
    sid = (await open_form(http_client))["sessionId"]

    response = await http_client.post(f"/forms/{sid}/save", json={"close": True})

    assert response.status_code == 422
    assert response.json()["error"]["message"] == "지원자명을 입력해주세요."
    assert store.records == {}


@pytest.mark.asyncio
async def test_save_and_continue(http_client, store):
    sid = (await open_form(http_client))["sessionId"]
    await send(http_client, sid, {"type": "update_basic_info", "changes": {"name": "김민수"}})

    response = await http_client.post(f"/forms/{sid}/save", json={"close": False})

    data = response.json()
    assert data["closed"] is False
    assert data["message"] == "임시 저장되었습니다."
    assert data["record"]["id"] in store.records
    assert (await http_client.get(f"/forms/{sid}")).status_code == 200


@pytest.mark.asyncio
async def test_cancel_discards_form(http_client, store):
    sid = (await open_form(http_client))["sessionId"]

    response = await http_client.delete(f"/forms/{sid}")

    assert response.json() == {"status": "cancelled", "session_id": sid}
    assert (await http_client.get(f"/forms/{sid}")).status_code == 404
    assert store.records == {}


@pytest.mark.asyncio
async def test_open_record_for_editing(http_client, store):
    store.records["rec-1"] = create_record(answers={"s-q-intro-1": "note"}, ai_summary="### 강점")

    response = await http_client.post("/forms/from-record/rec-1")

    form = response.json()
    assert response.status_code == 201
    assert form["state"]["recordId"] == "rec-1"
    assert form["sections"][0]["questions"][0]["expanded"] is True
    assert form["aiSummaryBlocks"][0]["kind"] == "heading"


@pytest.mark.asyncio
async def test_open_foreign_record_blocked(http_client, store):
    store.records["rec-1"] = create_record(user_id=OTHER_MANAGER_ID)

    response = await http_client.post("/forms/from-record/rec-1")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_other_user_cannot_use_session(http_client, auth_holder, other_manager):
    sid = (await open_form(http_client))["sessionId"]
    auth_holder["auth"] = other_manager

    response = await http_client.get(f"/forms/{sid}")

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_analyze_renders_summary(http_client, store, summarizer):
    sid = (await open_form(http_client))["sessionId"]
    await send(http_client, sid, {"type": "update_basic_info", "changes": {"name": "김민수"}})

    response = await http_client.post(f"/forms/{sid}/analyze")

    form = response.json()
    assert response.status_code == 200
    assert [b["kind"] for b in form["aiSummaryBlocks"]] == [
        "heading",
        "bullet",
        "rule",
        "paragraph",
    ]
    assert form["aiSummaryBlocks"][1]["spans"][0] == {"text": "성실함", "bold": True}
    summarizer.assert_awaited_once()
    assert len(store.records) == 1
