"""In-memory transaction manager for testing."""

from inkwell.domain.repository import TransactionManager


class InMemoryTransactionManager(TransactionManager):
    """Counts commits; in-memory writes apply immediately."""

    def __init__(self) -> None:
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1
