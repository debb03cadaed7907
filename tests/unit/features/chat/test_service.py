"""Unit tests for the chat service."""

from __future__ import annotations

import pytest

from config.text import PERSONAS
from core.exceptions import ConfigurationError, DatabaseError, NotFoundError, ValidationError
from core.pydantic_schemas import Source, StudyItem
from features.chat.repositories import InMemoryChatHistoryRepository
from features.chat.schemas import ChatSettings
from features.chat.service import (
    IMAGE_MODE,
    IMAGE_SUCCESS_TEXT,
    STUDY_FAILURE_TEXT,
    STUDY_SUCCESS_TEXT,
    ChatService,
)

from tests.stubs import StubImageProvider, StubTextProvider


class FailingRepository(InMemoryChatHistoryRepository):
    async def save(self, record):
        raise DatabaseError("store offline", operation="save")


def _service(provider=None, repository=None, image_provider=None) -> ChatService:
    return ChatService(
        provider=provider or StubTextProvider(),
        repository=repository or InMemoryChatHistoryRepository(),
        image_provider=image_provider,
    )


@pytest.mark.anyio("asyncio")
async def test_send_message_composes_prompt_and_persists_record():
    provider = StubTextProvider(text="Here you go")
    service = _service(provider)
    settings = ChatSettings(persona="FUNNY", creativity=0.3, active_mode="CREATIVE")

    record = await service.send_message(user_id="u1", prompt="  Tell me a story  ", settings=settings)

    call = provider.calls[0]
    assert call["prompt"] == "Tell me a story"
    assert call["use_grounding"] is False
    assert call["temperature"] == 0.3
    assert "Creative Mode" in call["system_instruction"]
    assert PERSONAS["FUNNY"] in call["system_instruction"]

    assert record.ai == "Here you go"
    assert record.mode == "CREATIVE"
    assert record.persona == "FUNNY"
    assert await service.list_history("u1") == [record]


@pytest.mark.anyio("asyncio")
async def test_deep_search_mode_enables_grounding_and_keeps_sources():
    sources = [Source(uri="https://a.example", title="A")]
    provider = StubTextProvider(sources=sources)
    service = _service(provider)

    record = await service.send_message(
        user_id="u1",
        prompt="Latest news",
        settings=ChatSettings(active_mode="DEEP_SEARCH"),
    )

    assert provider.calls[0]["use_grounding"] is True
    assert record.sources == sources


@pytest.mark.parametrize(
    "settings",
    [
        ChatSettings(active_mode="TIME_TRAVEL"),
        ChatSettings(persona="GRUMPY"),
        ChatSettings(creativity=1.5),
        ChatSettings(creativity=-0.1),
    ],
)
@pytest.mark.anyio("asyncio")
async def test_invalid_settings_are_rejected(settings):
    provider = StubTextProvider()
    service = _service(provider)

    with pytest.raises(ValidationError):
        await service.send_message(user_id="u1", prompt="hi", settings=settings)

    assert provider.calls == []


@pytest.mark.anyio("asyncio")
async def test_empty_prompt_is_rejected():
    with pytest.raises(ValidationError):
        await _service().send_message(user_id="u1", prompt="   ")


@pytest.mark.anyio("asyncio")
async def test_study_material_records_items():
    provider = StubTextProvider()
    service = _service(provider)

    record = await service.generate_study_material(user_id="u1", prompt="Cell biology")

    assert provider.calls[0]["kind"] == "structured"
    assert '"Cell biology"' in provider.calls[0]["system_instruction"]
    assert record.is_structured_study is True
    assert record.ai == STUDY_SUCCESS_TEXT
    assert record.structured_data[0].question == "Q"


@pytest.mark.anyio("asyncio")
async def test_study_material_failure_is_recorded_not_raised():
    provider = StubTextProvider(
        items=[StudyItem(type="error", question="Error generating study material.", answer="retry")]
    )

    record = await _service(provider).generate_study_material(user_id="u1", prompt="???")

    assert record.ai == STUDY_FAILURE_TEXT
    assert record.structured_data[0].is_error


@pytest.mark.anyio("asyncio")
async def test_storage_failure_keeps_the_reply():
    record = await _service(repository=FailingRepository()).send_message(user_id="u1", prompt="hi")

    assert record.ai == "Stub reply"


@pytest.mark.anyio("asyncio")
async def test_generate_image_records_successful_images():
    image_provider = StubImageProvider()
    service = _service(image_provider=image_provider)

    record = await service.generate_image(user_id="u1", prompt="A red fox")

    assert record is not None
    assert record.is_image is True
    assert record.image_url == "data:image/png;base64,QUJD"
    assert record.ai == IMAGE_SUCCESS_TEXT
    assert record.mode == IMAGE_MODE
    assert image_provider.prompts == ["A red fox"]


@pytest.mark.anyio("asyncio")
async def test_generate_image_without_result_records_nothing():
    service = _service(image_provider=StubImageProvider(result=None))

    assert await service.generate_image(user_id="u1", prompt="A red fox") is None
    assert await service.list_history("u1") == []


@pytest.mark.anyio("asyncio")
async def test_generate_image_requires_image_provider():
    with pytest.raises(ConfigurationError):
        await _service().generate_image(user_id="u1", prompt="A red fox")


@pytest.mark.anyio("asyncio")
async def test_toggle_favorite_flips_flag():
    service = _service()
    record = await service.send_message(user_id="u1", prompt="hi")

    first = await service.toggle_favorite("u1", record.id)
    second = await service.toggle_favorite("u1", record.id)

    assert first.is_favorite is True
    assert second.is_favorite is False


@pytest.mark.anyio("asyncio")
async def test_toggle_favorite_unknown_chat_raises():
    with pytest.raises(NotFoundError):
        await _service().toggle_favorite("u1", "missing")


@pytest.mark.anyio("asyncio")
async def test_delete_chat_removes_record():
    service = _service()
    kept = await service.send_message(user_id="u1", prompt="keep")
    dropped = await service.send_message(user_id="u1", prompt="drop")

    await service.delete_chat("u1", dropped.id)

    assert [record.id for record in await service.list_history("u1")] == [kept.id]
    with pytest.raises(NotFoundError):
        await service.delete_chat("u1", dropped.id)


@pytest.mark.anyio("asyncio")
async def test_list_history_rejects_non_positive_limit():
    with pytest.raises(ValidationError):
        await _service().list_history("u1", limit=0)
