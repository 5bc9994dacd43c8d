"""PostgreSQL transaction manager."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.repository import TransactionManager


class PostgresTransactionManager(TransactionManager):
    """Commits the request's session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        with logfire.span("transaction.commit"):
            await self.session.commit()
