# Local application imports
from .base_container import BaseContainer
from .providers import (
    AssetTagProvider,
    AuthProvider,
    DatabaseProvider,
    ExtractionProvider,
    NotificationProvider,
    RepositoryProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Subscription registry (NotificationProvider)
    4. Use cases and services - depend on repositories and the registry
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → registry → use cases
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        NotificationProvider.register(self)

        AuthProvider.register(self)
        ExtractionProvider.register(self)
        AssetTagProvider.register(self)


# Global container instance (singleton pattern)
_container: DIContainer | None = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
