from datetime import UTC, datetime

import pytest

from core.pydantic_schemas import ApiResponse, error, ok
from features.chat.schemas import ChatRecord


def test_ok_helper_returns_success_envelope():
    envelope = ok("Chat response generated", data={"ai": "hello"})

    assert envelope.model_dump() == {
        "code": 200,
        "success": True,
        "message": "Chat response generated",
        "data": {"ai": "hello"},
        "meta": None,
    }


def test_error_helper_requires_error_code():
    envelope = error(404, "Chat not found")

    assert envelope.code == 404
    assert envelope.success is False
    assert envelope.message == "Chat not found"


def test_error_helper_rejects_success_code():
    with pytest.raises(ValueError, match="Error responses must"):
        error(200, "should fail")


def test_typed_envelope_serialises_payload_aliases():
    record = ChatRecord(
        user_id="u1",
        user="hi",
        ai="hello",
        mode="QUICK_CHAT",
        timestamp=datetime(2026, 1, 1, tzinfo=UTC),
    )

    payload = ApiResponse[ChatRecord](code=200, success=True, message="ok", data=record, meta={"limit": 5})
    dumped = payload.model_dump(mode="json", by_alias=True)

    assert dumped["data"]["userId"] == "u1"
    assert dumped["data"]["isFavorite"] is False
    assert dumped["data"]["timestamp"].startswith("2026-01-01T00:00:00")
    assert dumped["meta"] == {"limit": 5}


def test_typed_envelope_validates_alias_keyed_payload():
    envelope = ApiResponse[ChatRecord].model_validate(
        {
            "code": 200,
            "success": True,
            "message": "ok",
            "data": {"userId": "u1", "user": "hi", "ai": "hello", "mode": "QUICK_CHAT"},
        }
    )

    assert isinstance(envelope.data, ChatRecord)
    assert envelope.data.user_id == "u1"
