"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from pipeline.orchestrator import RiveParser

from .config import Settings, get_settings


class CoreModule(Module):
    """Core dependencies."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        """Provide settings singleton (environment-backed unless overridden)."""
        return self.settings or get_settings()

    @singleton
    @provider
    def provide_parser(self, settings: Settings) -> RiveParser:
        """Provide parser bound to the container's settings."""
        return RiveParser(settings=settings)


def create_container(settings: Settings | None = None) -> Injector:
    """Create configured injector."""
    return Injector([CoreModule(settings)])
