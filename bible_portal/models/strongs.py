"""
Strong's lexicon schemas.

Request/response schemas for dictionary import, translation and lookup.

Dependencies: pydantic
System role: Lexicon API contracts
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class StrongsImportRequest(BaseModel):
    """Request schema for dictionary import."""

    model_config = ConfigDict(populate_by_name=True)

    dictionary_text: str = Field(
        alias="dictionaryText",
        description="Markdown-like text extracted from the dictionary PDF",
    )


class LexiconEntrySample(BaseModel):
    """One parsed entry echoed back after import."""

    strongs_id: str
    original_word: str
    definition: str
    usage: str | None = None
    transliteration: str | None = None
    part_of_speech: str | None = None


class StrongsImportResponse(BaseModel):
    """Response schema for dictionary import."""

    success: bool = True
    imported: int = Field(description="Rows written")
    total: int = Field(description="Entries parsed")
    errors: list[str] | None = Field(default=None, description="Per-batch failures")
    sample: list[LexiconEntrySample] = Field(default_factory=list)


class TranslateRequest(BaseModel):
    """Request schema for single-definition translation."""

    definition: str | None = None
    usage: str | None = None


class TranslateResponse(BaseModel):
    """Translated definition and usage."""

    definition: str | None = None
    usage: str | None = None


class SourceLexiconEntry(BaseModel):
    """English lexicon entry as stored in the lexicon JSON."""

    model_config = ConfigDict(extra="allow")

    Gk_word: str | None = None
    Hb_word: str | None = None
    transliteration: str = ""
    strongs_def: str = ""
    part_of_speech: str = ""
    outline_usage: str = ""

    @property
    def original_word(self) -> str:
        return self.Gk_word or self.Hb_word or ""


class BatchTranslateItem(BaseModel):
    """One entry of a batch translation request."""

    id: str = Field(description="Strong's ID such as H1 or G26")
    entry: SourceLexiconEntry


class BatchTranslateRequest(BaseModel):
    """Request schema for batch translation."""

    model_config = ConfigDict(populate_by_name=True)

    entries: list[BatchTranslateItem] = Field(min_length=1)
    batch_size: int | None = Field(default=None, gt=0, alias="batchSize")


class TranslationRecord(BaseModel):
    """Translated row upserted into strongs_translations."""

    strongs_id: str
    original_word: str
    portuguese_word: str
    portuguese_definition: str
    portuguese_usage: str
    transliteration: str
    part_of_speech: str


class BatchTranslateResponse(BaseModel):
    """Response schema for batch translation."""

    success: bool = True
    translated: int
    total_requested: int
    results: list[TranslationRecord]


class StrongsTranslationResponse(BaseModel):
    """Persisted translation row."""

    model_config = ConfigDict(from_attributes=True)

    strongs_id: str
    portuguese_word: str
    portuguese_definition: str | None = None
    portuguese_usage: str | None = None
    original_word: str | None = None
    transliteration: str | None = None
    part_of_speech: str | None = None
    updated_at: datetime | None = None


class LexiconLookupResponse(BaseModel):
    """Cleaned lexicon entry served from the in-memory cache."""

    model_config = ConfigDict(extra="allow")

    strongs_id: str
    strongs_def: str = ""
    outline_usage: str = ""
    transliteration: str | None = None
    part_of_speech: str | None = None
