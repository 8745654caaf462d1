"""감사 로그 서비스 — 상태 변경 및 인증 이벤트 기록.

Audit Log Service — Records state changes and authentication events in the
logs table and serves them to administrators.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from travel_org.models.log import Log
from travel_org.repositories.log_repository import log_repository
from travel_org.schemas.log import LogCountResponse, LogResponse
from travel_org.utils.exceptions import BadRequestError

LEVEL_INFORMATION: str = "Information"
LEVEL_WARNING: str = "Warning"
LEVEL_ERROR: str = "Error"


class LogService:
    """감사 로그 기록 및 조회 서비스.

    Writes run inside a savepoint so a failing audit insert is rolled back
    on its own and the surrounding request carries on.
    """

    async def _write(self, db: AsyncSession, level: str, message: str, persist: bool) -> None:
        try:
            async with db.begin_nested():
                await log_repository.add(db, level, message[:4000])
            if persist:
                # 오류 응답 전에 로그를 확정: Commit now; the caller is about to raise
                await db.commit()
        except SQLAlchemyError:
            pass  # 로그 실패가 요청 처리에 영향주지 않도록: Never break request on log failure

    async def information(self, db: AsyncSession, message: str) -> None:
        """Information 레벨 로그 (Information level row)."""
        await self._write(db, LEVEL_INFORMATION, message, persist=False)

    async def warning(self, db: AsyncSession, message: str, persist: bool = False) -> None:
        """Warning 레벨 로그.

        Warning level row. persist=True commits immediately, used on failure
        paths where the request transaction will not be committed.
        """
        await self._write(db, LEVEL_WARNING, message, persist=persist)

    async def error(self, db: AsyncSession, message: str, persist: bool = False) -> None:
        """Error 레벨 로그 (Error level row)."""
        await self._write(db, LEVEL_ERROR, message, persist=persist)

    async def get_logs(self, db: AsyncSession, count: int) -> list[LogResponse]:
        """최신 로그를 조회합니다.

        Return the newest `count` rows, newest first.

        Raises:
            BadRequestError: count가 0 이하일 때 (count <= 0)
        """
        if count <= 0:
            raise BadRequestError("Count must be greater than zero")
        logs: list[Log] = await log_repository.get_latest(db, count)
        return [
            LogResponse(id=log.id, timestamp=log.timestamp, level=log.level, message=log.message)
            for log in logs
        ]

    async def get_count(self, db: AsyncSession) -> LogCountResponse:
        """전체 로그 개수 (Total number of rows)."""
        return LogCountResponse(count=await log_repository.count(db))


# 싱글턴 인스턴스: Singleton instance
log_service: LogService = LogService()
