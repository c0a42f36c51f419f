"""
Strong's lexicon translation service.

Translates English lexicon definitions to Brazilian Portuguese through the AI
gateway, one definition at a time or in prompt-sized chunks, and persists
batch results.

Dependencies: sqlalchemy, bible_portal.boundary.ai_gateway, bible_portal.boundary.db
System role: Lexicon translation orchestration
"""

import asyncio
import json
import logging
import re
from typing import Any, Awaitable, Callable

from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bible_portal.boundary.ai_gateway import AIGatewayClient
from bible_portal.boundary.db.CRUD.strongs_crud import strongs_crud
from bible_portal.core.exceptions import (
    GatewayConfigurationError,
    GatewayError,
    GatewayRateLimitError,
    ValidationError,
)
from bible_portal.core.lexicon import clean_definition
from bible_portal.models.strongs import BatchTranslateItem, TranslationRecord

logger = logging.getLogger(__name__)

PROMPT_FIELD_MAX_CHARS = 200

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")

DEFINITION_TRANSLATOR_PROMPT = """Você é um tradutor especializado em termos bíblicos e teológicos.
Traduza o texto do inglês para português brasileiro de forma precisa e clara.
Mantenha termos técnicos teológicos quando apropriado.
Responda APENAS com a tradução no formato JSON:
{"definition": "tradução da definição", "usage": "tradução do uso"}"""

LEXICON_TRANSLATOR_PROMPT = (
    "Você é um tradutor especializado em léxico bíblico hebraico e grego. "
    "Traduza com precisão teológica para português brasileiro. "
    "Responda APENAS com JSON válido."
)

BATCH_PROMPT_TEMPLATE = """Traduza estas entradas do léxico Strong's para português brasileiro. Para cada entrada, forneça:
1. A palavra traduzida para português
2. Uma definição concisa em português (máximo 15 palavras)
3. Uma descrição de uso em português (máximo 20 palavras)

Entradas:
{entries}

Responda APENAS em formato JSON válido como este exemplo:
{{
  "translations": [
    {{"id": "H1", "word": "pai", "definition": "pai, antepassado", "usage": "pai de família, ancestral"}},
    {{"id": "G26", "word": "amor", "definition": "amor divino, ágape", "usage": "amor sacrificial de Deus"}}
  ]
}}"""


def extract_json_object(content: str | None) -> dict[str, Any] | None:
    """
    Parse the outermost `{...}` span of a model reply.

    Returns:
        dict | None: Parsed object, or None when absent or invalid
    """
    if not content:
        return None
    match = _JSON_OBJECT.search(content)
    if match is None:
        return None
    try:
        parsed = json.loads(match.group(0))
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) else None


def format_batch_line(item: BatchTranslateItem) -> str:
    """Render one entry as `<id>: <word> - <definition> | Usage: <usage>`."""
    entry = item.entry
    word = entry.Gk_word or entry.Hb_word or entry.transliteration
    definition = clean_definition(
        entry.strongs_def or entry.outline_usage, max_length=PROMPT_FIELD_MAX_CHARS
    )
    usage = clean_definition(entry.outline_usage, max_length=PROMPT_FIELD_MAX_CHARS)
    return f"{item.id}: {word} - {definition} | Usage: {usage}"


class StrongsTranslationService:
    """
    Translates lexicon entries via the AI gateway.

    Attributes:
        gateway: Shared gateway client
        db: Session used to persist batch results (optional for single calls)
    """

    def __init__(
        self,
        gateway: AIGatewayClient,
        db: AsyncSession | None = None,
        batch_size: int = 10,
        temperature: float = 0.3,
        chunk_delay_seconds: float = 0.5,
        rate_limit_backoff_seconds: float = 2.0,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        """
        Initialize translation service.

        Args:
            gateway: Gateway client
            db: AsyncSession for upserting batch results
            batch_size: Default entries per prompt
            temperature: Sampling temperature for batch prompts
            chunk_delay_seconds: Pause after each answered chunk
            rate_limit_backoff_seconds: Pause after a rate-limited chunk
            sleep: Awaitable sleep (injected in tests)
        """
        self.gateway = gateway
        self.db = db
        self.batch_size = batch_size
        self.temperature = temperature
        self.chunk_delay_seconds = chunk_delay_seconds
        self.rate_limit_backoff_seconds = rate_limit_backoff_seconds
        self._sleep = sleep

    async def translate_definition(
        self,
        definition: str | None,
        usage: str | None,
    ) -> dict[str, Any]:
        """
        Translate one definition/usage pair.

        A reply without a parseable JSON object yields the untranslated input.

        Raises:
            ValidationError: If both fields are empty
            GatewayError: If the gateway call fails
        """
        if not definition and not usage:
            raise ValidationError("No text to translate", field="definition")

        text = f"Definition: {definition or 'N/A'}\n\nUsage: {usage or 'N/A'}"
        content = await self.gateway.complete(
            [
                {"role": "system", "content": DEFINITION_TRANSLATOR_PROMPT},
                {"role": "user", "content": text},
            ]
        )

        translated = extract_json_object(content)
        if translated is None:
            logger.warning("Translation reply had no JSON object; returning input")
            return {"definition": definition, "usage": usage}

        fields = {key: translated.get(key) for key in ("definition", "usage")}
        if not all(value is None or isinstance(value, str) for value in fields.values()):
            logger.warning(
                "Translation reply had non-text fields; returning input",
                extra={"field_types": {key: type(value).__name__ for key, value in fields.items()}},
            )
            return {"definition": definition, "usage": usage}
        return fields

    async def translate_batch(
        self,
        items: list[BatchTranslateItem],
        batch_size: int | None = None,
    ) -> list[TranslationRecord]:
        """
        Translate entries chunk by chunk and upsert the results.

        Rate-limited chunks are skipped after a back-off; other chunk failures
        are logged and skipped. Replies are matched back to the chunk by id.

        Args:
            items: Entries to translate
            batch_size: Entries per prompt (service default when None)

        Returns:
            list[TranslationRecord]: Translations matched to a requested id

        Raises:
            GatewayConfigurationError: If no API key is configured
        """
        batch_size = batch_size or self.batch_size
        logger.info("Processing batch translation", extra={"entry_count": len(items)})
        results: list[TranslationRecord] = []

        for offset in range(0, len(items), batch_size):
            chunk = items[offset:offset + batch_size]
            prompt = BATCH_PROMPT_TEMPLATE.format(
                entries="\n".join(format_batch_line(item) for item in chunk)
            )
            try:
                content = await self.gateway.complete(
                    [
                        {"role": "system", "content": LEXICON_TRANSLATOR_PROMPT},
                        {"role": "user", "content": prompt},
                    ],
                    temperature=self.temperature,
                )
            except GatewayConfigurationError:
                raise
            except GatewayRateLimitError:
                logger.warning("Rate limit hit, backing off", extra={"offset": offset})
                await self._sleep(self.rate_limit_backoff_seconds)
                continue
            except GatewayError as e:
                logger.error(
                    "Translation chunk failed",
                    extra={"offset": offset, "status_code": e.status_code, "error": e.message},
                )
                continue

            results.extend(self._match_translations(chunk, content))
            await self._sleep(self.chunk_delay_seconds)

        if results:
            await self._persist(results)
        return results

    def _match_translations(
        self,
        chunk: list[BatchTranslateItem],
        content: str,
    ) -> list[TranslationRecord]:
        parsed = extract_json_object(content)
        translations = parsed.get("translations") if parsed else None
        if not isinstance(translations, list):
            logger.error("Translation reply had no translations list")
            return []

        by_id = {item.id: item for item in chunk}
        records = []
        for translation in translations:
            if not isinstance(translation, dict):
                continue
            translation_id = translation.get("id")
            item = by_id.get(translation_id) if isinstance(translation_id, str) else None
            if item is None:
                continue
            try:
                record = TranslationRecord(
                    strongs_id=item.id,
                    original_word=item.entry.original_word,
                    portuguese_word=translation.get("word") or "",
                    portuguese_definition=translation.get("definition") or "",
                    portuguese_usage=translation.get("usage") or "",
                    transliteration=item.entry.transliteration or "",
                    part_of_speech=item.entry.part_of_speech or "",
                )
            except SchemaValidationError as e:
                logger.warning(
                    "Skipping malformed translation",
                    extra={"strongs_id": item.id, "error_count": e.error_count()},
                )
                continue
            records.append(record)
        return records

    async def _persist(self, records: list[TranslationRecord]) -> None:
        if self.db is None:
            return
        try:
            await strongs_crud.upsert_many(self.db, [record.model_dump() for record in records])
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Database upsert error", extra={"error": str(e)})
            return
        logger.info("Saved translations to database", extra={"count": len(records)})
