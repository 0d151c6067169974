import re
from typing import Any, Dict, List, Optional, Sequence

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from sharebnb.logger import get_logger

logger = get_logger(__name__)

_PLACEHOLDER = re.compile(r"\$(\d+)")


class Database:
    """Thin async client running raw parameterized SQL.

    Statements use positional ``$1``, ``$2``... placeholders; ``params[n - 1]``
    is bound to ``$n``. Each call runs in its own transaction.
    """

    def __init__(self, url: Optional[str], echo: bool = False, engine: Optional[AsyncEngine] = None):
        self.engine = engine or create_async_engine(url, echo=echo)

    @staticmethod
    def _bind(sql: str, params: Sequence[Any]):
        bound = {}

        def replace(match):
            idx = int(match.group(1))
            if idx < 1 or idx > len(params):
                raise IndexError(f"No parameter for placeholder ${idx} ({len(params)} given)")
            bound[f"p{idx}"] = params[idx - 1]
            return f":p{idx}"

        return text(_PLACEHOLDER.sub(replace, sql)), bound

    async def query(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        statement, bound = self._bind(sql, params)
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(statement, bound)
                if not result.returns_rows:
                    return []
                return [dict(row) for row in result.mappings().all()]
        except SQLAlchemyError as e:
            logger.error(f"Query failed: {e.__class__.__name__}")
            raise

    async def create_tables(self):
        from sharebnb.models import Base

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema initialized")

    async def dispose(self):
        await self.engine.dispose()


async def get_database(request: Request) -> Database:
    return request.app.state.database
