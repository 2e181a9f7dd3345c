"""Wiring of the prettifier's stores and service.

Each binding is a factory keyed by the type it provides. Instances are
built on first ``resolve`` and cached, so the reference table and the
style store are read at most once per container.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Lazily built, cached bindings from port types to instances.

    Usage:
        container = Container.create_default(config)
        service = container.resolve(ItineraryService)

        # Swap a store before the service is first resolved
        container.register(ReferenceTablePort, lambda: ReferenceTable(records))

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _instances: Dict[type[Any], Any] = field(default_factory=dict, repr=False)

    def register(self, port_type: type[Any], factory: Callable[[], Any]) -> None:
        """Bind ``port_type`` to ``factory``, dropping any cached instance."""
        self._factories[port_type] = factory
        self._instances.pop(port_type, None)

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def resolve(self, port_type: type[Any]) -> Any:
        """Return the cached instance for ``port_type``, building it if needed.

        Raises:
            KeyError: If the type is not registered.
        """
        if not self.is_registered(port_type):
            raise KeyError(f"Type not registered: {port_type}")
        if port_type not in self._instances:
            self._instances[port_type] = self._factories[port_type]()
        return self._instances[port_type]

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default bindings.

        The reference table and style store are read from the paths in
        ``config.data``; the service is wired to both.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.reference import ReferenceTable
        from .adapters.styles import StyleStore
        from .ports.reference import ReferenceTablePort
        from .ports.styles import StyleStorePort
        from .services import ItineraryService

        config = config or get_config()
        container = cls(config=config)
        data = config.data

        container.register(
            ReferenceTablePort,
            lambda: ReferenceTable.from_path(data.lookup_path, encoding=data.encoding),
        )
        container.register(
            StyleStorePort,
            lambda: StyleStore.from_path(data.settings_path, encoding=data.encoding),
        )

        def create_itinerary_service() -> ItineraryService:
            return ItineraryService(
                reference_table=container.resolve(ReferenceTablePort),
                style_store=container.resolve(StyleStorePort),
            )

        container.register(ItineraryService, create_itinerary_service)

        return container
