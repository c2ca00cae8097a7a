"""
Partsman configuration.

Usage in settings.py:
    PARTSMAN = {
        "ID_ALLOCATOR": "partsman.adapters.sequence.SequenceIdAllocator",
        "FIRST_ID": 1,
        "SEARCH_LIMIT": 50,
    }
"""

import importlib
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from django.apps import apps
from django.conf import settings

from partsman.exceptions import CatalogError
from partsman.protocols.catalog import IdAllocator

if TYPE_CHECKING:
    from partsman.catalog import Catalog

logger = logging.getLogger(__name__)


@dataclass
class PartsmanSettings:
    """Partsman configuration settings."""

    ID_ALLOCATOR: str = "partsman.adapters.sequence.SequenceIdAllocator"
    FIRST_ID: int = 1
    SEARCH_LIMIT: int = 50


def get_partsman_settings() -> PartsmanSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "PARTSMAN", {})
    return PartsmanSettings(**user_settings)


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_partsman_settings(), name)


partsman_settings = _LazySettings()


def build_id_allocator() -> IdAllocator:
    """
    Instantiate the configured IdAllocator.

    Loads the class from PARTSMAN["ID_ALLOCATOR"] (dotted path) and starts
    it at PARTSMAN["FIRST_ID"].

    Raises:
        CatalogError: INVALID_ID_ALLOCATOR if the class does not implement
            the IdAllocator protocol.
    """
    allocator_path = partsman_settings.ID_ALLOCATOR
    module_path, cls_name = allocator_path.rsplit(".", 1)
    module = importlib.import_module(module_path)
    cls = getattr(module, cls_name)
    allocator = cls(start=partsman_settings.FIRST_ID)
    if not isinstance(allocator, IdAllocator):
        raise CatalogError("INVALID_ID_ALLOCATOR", path=allocator_path)
    return allocator


def build_catalog() -> "Catalog":
    """Return a new, empty Catalog with its own part and product id sequences."""
    from partsman.catalog import Catalog

    return Catalog(part_ids=build_id_allocator(), product_ids=build_id_allocator())


def get_catalog() -> "Catalog":
    """Return the catalog owned by the application root (PartsmanConfig)."""
    return apps.get_app_config("partsman").catalog


def reset_catalog() -> "Catalog":
    """Discard the current catalog and start an empty one (for tests)."""
    config = apps.get_app_config("partsman")
    config.catalog = build_catalog()
    logger.debug("Catalog reset")
    return config.catalog
