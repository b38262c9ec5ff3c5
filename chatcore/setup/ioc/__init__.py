"""IoC container (dishka)."""

from chatcore.setup.ioc.container import (
    AppProvider,
    InMemoryStorageProvider,
    create_container,
)

__all__ = ["AppProvider", "InMemoryStorageProvider", "create_container"]
