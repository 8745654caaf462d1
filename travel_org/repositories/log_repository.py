"""감사 로그 레포지토리 (Audit log repository)."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from travel_org.models.log import Log


class LogRepository:
    """logs 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Logs use an integer key, so this repository does not extend BaseRepository.
    """

    async def add(self, db: AsyncSession, level: str, message: str) -> Log:
        """로그 행을 추가합니다 (Insert a log row)."""
        log: Log = Log(level=level, message=message)
        db.add(log)
        await db.flush()
        return log

    async def get_latest(self, db: AsyncSession, count: int) -> list[Log]:
        """최신 로그를 개수만큼 조회합니다 (Newest rows first, at most count)."""
        result = await db.execute(
            select(Log).order_by(Log.timestamp.desc(), Log.id.desc()).limit(count)
        )
        return list(result.scalars().all())

    async def count(self, db: AsyncSession) -> int:
        """전체 로그 개수 (Total row count)."""
        return int((await db.execute(select(func.count()).select_from(Log))).scalar() or 0)


# 싱글턴 인스턴스: Singleton instance
log_repository: LogRepository = LogRepository()
