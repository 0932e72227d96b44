"""BoardService: открытие, чтение с содержимым и очистка устаревших досок"""
import logging

import pytest
from sqlalchemy import select, func

from app.db.models.board import Board as BoardModel
from app.db.repositories import board_repository
from app.domains.boards.entities import Board, HOUR_MS
from app.domains.boards.services import BoardService
from app.domains.drawings.services import DrawingService
from app.domains.notes.services import NoteService

MINUTE_MS = 60 * 1000


async def count_boards(session) -> int:
    result = await session.execute(select(func.count(BoardModel.row_id)))
    return result.scalar()


@pytest.fixture
def board_service(test_db, clock):
    return BoardService(test_db, clock, ttl_hours=24)


@pytest.fixture
def note_service(test_db, clock):
    return NoteService(test_db, clock)


@pytest.fixture
def drawing_service(test_db, clock):
    return DrawingService(test_db, clock)


async def test_get_or_create_creates_board_with_equal_timestamps(board_service, clock):
    board = await board_service.get_or_create_board("B1")

    assert board.id == "B1"
    assert board.created_at == clock.now_ms()
    assert board.last_accessed_at == clock.now_ms()


async def test_get_or_create_twice_keeps_created_at_and_refreshes_access(board_service, clock):
    first = await board_service.get_or_create_board("B1")
    clock.advance(5000)
    second = await board_service.get_or_create_board("B1")

    assert second.id == first.id
    assert second.created_at == first.created_at
    assert second.last_accessed_at == first.last_accessed_at + 5000


async def test_get_or_create_never_duplicates_board(board_service, test_db, clock):
    for _ in range(3):
        await board_service.get_or_create_board("B1")
        clock.advance(1)

    assert await count_boards(test_db) == 1


async def test_get_board_missing_returns_none_without_side_effects(board_service, test_db):
    assert await board_service.get_board("nope") is None
    assert await count_boards(test_db) == 0


async def test_get_board_does_not_refresh_access_time(board_service, clock):
    created = await board_service.get_or_create_board("B1")
    clock.advance(HOUR_MS)

    board = await board_service.get_board("B1")

    assert board.last_accessed_at == created.last_accessed_at


async def test_get_board_includes_notes_and_drawings(board_service, note_service, drawing_service):
    await board_service.get_or_create_board("B1")
    for i in range(3):
        await note_service.create_note("B1", f"note {i}", i, i, "yellow")
    for _ in range(2):
        await drawing_service.create_drawing("B1", [{"x": 0, "y": 0}, {"x": 1, "y": 1}], "#000", 2)
    await note_service.create_note("other", "elsewhere", 0, 0, "red")

    board = await board_service.get_board("B1")

    assert len(board.notes) == 3
    assert len(board.drawings) == 2
    assert {note.board_id for note in board.notes} == {"B1"}


async def test_cleanup_removes_board_older_than_ttl_with_children(
    board_service, note_service, drawing_service, clock
):
    await board_service.get_or_create_board("old")
    await note_service.create_note("old", "bye", 0, 0, "yellow")
    await drawing_service.create_drawing("old", [{"x": 1, "y": 1}], "#f00", 1)

    clock.advance(24 * HOUR_MS + 1)
    deleted = await board_service.cleanup_old_boards()

    assert deleted == 1
    assert await board_service.get_board("old") is None
    assert await note_service.get_notes("old") == []
    assert await drawing_service.get_drawings("old") == []


async def test_cleanup_retains_recently_accessed_board(board_service, note_service, clock):
    await board_service.get_or_create_board("fresh")
    await note_service.create_note("fresh", "keep", 0, 0, "yellow")

    clock.advance(23 * HOUR_MS + 59 * MINUTE_MS)
    deleted = await board_service.cleanup_old_boards()

    assert deleted == 0
    board = await board_service.get_board("fresh")
    assert len(board.notes) == 1


async def test_cleanup_keeps_board_exactly_at_cutoff(board_service, clock):
    await board_service.get_or_create_board("edge")

    clock.advance(24 * HOUR_MS)

    assert await board_service.cleanup_old_boards() == 0
    assert await board_service.get_board("edge") is not None


async def test_cleanup_accepts_explicit_now(board_service, clock):
    await board_service.get_or_create_board("old")

    deleted = await board_service.cleanup_old_boards(now=clock.now_ms() + 25 * HOUR_MS)

    assert deleted == 1


async def test_cleanup_only_removes_stale_boards(board_service, note_service, clock):
    await board_service.get_or_create_board("old")
    clock.advance(20 * HOUR_MS)
    await board_service.get_or_create_board("recent")
    await note_service.create_note("recent", "still here", 0, 0, "green")
    clock.advance(5 * HOUR_MS)

    assert await board_service.cleanup_old_boards() == 1
    assert await board_service.get_board("old") is None
    recent = await board_service.get_board("recent")
    assert len(recent.notes) == 1


async def test_cleanup_is_noop_when_repeated(board_service, clock):
    await board_service.get_or_create_board("old")
    clock.advance(48 * HOUR_MS)

    assert await board_service.cleanup_old_boards() == 1
    assert await board_service.cleanup_old_boards() == 0


async def test_touching_board_postpones_cleanup(board_service, clock):
    await board_service.get_or_create_board("B1")
    clock.advance(20 * HOUR_MS)
    await board_service.get_or_create_board("B1")
    clock.advance(20 * HOUR_MS)

    assert await board_service.cleanup_old_boards() == 0


async def test_get_or_create_without_on_conflict_support(board_service, test_db, clock, monkeypatch):
    monkeypatch.setattr(board_repository, "_UPSERT_INSERTS", {})

    first = await board_service.get_or_create_board("B1")
    clock.advance(5000)
    second = await board_service.get_or_create_board("B1")

    assert first.created_at == first.last_accessed_at == clock.now_ms() - 5000
    assert second.created_at == first.created_at
    assert second.last_accessed_at == clock.now_ms()
    assert await count_boards(test_db) == 1


async def test_board_creation_logged_once_within_same_millisecond(board_service, caplog):
    with caplog.at_level(logging.INFO, logger="app.domains.boards.services"):
        await board_service.get_or_create_board("B1")
        await board_service.get_or_create_board("B1")

    created = [r.getMessage() for r in caplog.records if r.getMessage() == "Board B1 created"]
    assert created == ["Board B1 created"]


async def test_upsert_reports_whether_board_was_inserted(test_db, clock):
    repository = board_repository.BoardRepository(test_db)

    _, created = await repository.upsert(Board.create_board("B1", clock.now_ms()))
    _, created_again = await repository.upsert(Board.create_board("B1", clock.now_ms()))

    assert created is True
    assert created_again is False
