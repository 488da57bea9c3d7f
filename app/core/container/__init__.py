# ============================================================================
# SCOPE: GLOBAL
# Description: Main dependency injection container (singleton).
#              Composes the domain sub-containers.
# ============================================================================
"""
Dependency Injection Container.

Centralized container for creating and managing application dependencies.
Wires concrete implementations to the ports the use cases depend on.
"""

from __future__ import annotations

import logging

from app.config.settings import Settings

from .base import BaseContainer
from .interviews import InterviewsContainer

logger = logging.getLogger(__name__)


class DependencyContainer:
    """
    Dependency Injection Container (Facade).

    Single Responsibility: Compose and delegate to domain-specific containers.
    """

    def __init__(self, settings: Settings | None = None):
        self._base = BaseContainer(settings)
        self._interviews = InterviewsContainer(self._base)
        logger.info("DependencyContainer initialized")

    @property
    def settings(self) -> Settings:
        return self._base.settings

    @property
    def base(self) -> BaseContainer:
        return self._base

    @property
    def interviews(self) -> InterviewsContainer:
        return self._interviews


# ============================================================
# GLOBAL CONTAINER INSTANCE
# ============================================================

_container: DependencyContainer | None = None


def get_container(settings: Settings | None = None) -> DependencyContainer:
    """
    Get global container instance (singleton).

    Args:
        settings: Optional settings (only used on first call)

    Returns:
        DependencyContainer instance
    """
    global _container

    if _container is None:
        logger.info("Initializing global DependencyContainer")
        _container = DependencyContainer(settings)
    elif settings is not None and settings is not _container.settings:
        logger.warning(
            "Container already initialized, ignoring new settings. "
            "Call reset_container() first to change settings."
        )

    return _container


def reset_container() -> None:
    """
    Reset global container instance.

    Useful for testing or reconfiguration.
    """
    global _container
    logger.info("Resetting global DependencyContainer")
    _container = None


__all__ = [
    "BaseContainer",
    "DependencyContainer",
    "InterviewsContainer",
    "get_container",
    "reset_container",
]
