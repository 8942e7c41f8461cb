"""Dependency Injection container - initialized at app startup."""

from collections.abc import Callable

from loguru import logger

from app.services.governance import GovernanceService
from gov_client import GovernanceClient


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, client_factory: Callable[[], GovernanceClient] | None = None, force: bool = False) -> None:
        """Initialize all dependencies. Call once at app startup.

        ``force`` rebuilds the wiring, e.g. to swap in a client factory with
        a mock transport.
        """
        if self._initialized and not force:
            return

        self.governance = GovernanceService(client_factory=client_factory or GovernanceClient)

        self._initialized = True
        logger.debug("Container initialized")


# Global container instance
container = Container()
