"""Разовый запуск очистки устаревших досок (для cron или другого планировщика)"""
import asyncio
import logging

from app.core.config import settings
from app.core.db import SessionLocal, engine
from app.domains.boards.services import BoardService

logger = logging.getLogger(__name__)


async def run_cleanup() -> int:
    try:
        async with SessionLocal() as session:
            return await BoardService(session).cleanup_old_boards()
    finally:
        await engine.dispose()


def main():
    logging.basicConfig(level=settings.log_level)
    deleted_count = asyncio.run(run_cleanup())
    logger.info(f"Deleted {deleted_count} stale boards")
    print(deleted_count)


if __name__ == "__main__":
    main()
