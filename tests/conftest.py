"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory async database, SSE body builders, sample dictionary text
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import json

import pytest


def _sse_frame(content: str | None = None, **payload) -> str:
    """Render one chat-completion `data:` frame (content delta when given)."""
    if content is not None:
        payload = {"choices": [{"delta": {"content": content}}]}
    return f"data: {json.dumps(payload, ensure_ascii=False)}\n"


SSE_DONE = "data: [DONE]\n"


@pytest.fixture
def sse_frame():
    """Builder for single `data:` frames."""
    return _sse_frame


@pytest.fixture
def sse_body() -> bytes:
    """Multi-frame SSE body with comments, CRLF, blank lines and non-ASCII text."""
    text = (
        ": keep-alive\n"
        + _sse_frame("No princípio ")
        + "\n"
        + _sse_frame("criou Deus ").replace("\n", "\r\n")
        + "event: ping\n"
        + _sse_frame("os céus e a terra — בְּרֵאשִׁית")
        + _sse_frame(role="assistant")
        + SSE_DONE
    )
    return text.encode("utf-8")


@pytest.fixture
def sample_dictionary_text() -> str:
    """Two-entry dictionary with a Greek section marker between them."""
    return "\n".join(
        [
            "## Page 1",
            "",
            "# 01 'ab ; n m",
            "אָב",
            "1) pai, antepassado",
            "2) chefe de família",
            "",
            "### Images",
            "# Léxico Grego",
            "",
            "# 01 'alpha",
            "Α",
            "primeira letra do alfabeto grego",
        ]
    )


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from bible_portal.boundary.db.base import Base

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()
