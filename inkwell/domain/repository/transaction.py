"""Transaction boundary interface."""

from abc import ABC, abstractmethod


class TransactionManager(ABC):
    """Commits the writes made by the current request.

    Repositories of one request share a transaction. Use cases commit once
    every step of a mutation has succeeded; anything not committed is
    rolled back when the request scope closes its session.
    """

    @abstractmethod
    async def commit(self) -> None:
        pass
