"""
Django Partsman - in-memory parts & products inventory.

Usage:
    from partsman import InventoryService, CatalogError
    from partsman.conf import get_catalog

    service = InventoryService(get_catalog())
    result = service.save_part(part)
    if not result.valid:
        print(result.message)
"""


def __getattr__(name):
    if name == "InventoryService":
        from partsman.service import InventoryService

        return InventoryService
    elif name == "Catalog":
        from partsman.catalog import Catalog

        return Catalog
    elif name == "CatalogError":
        from partsman.exceptions import CatalogError

        return CatalogError
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["Catalog", "CatalogError", "InventoryService"]
__version__ = "0.1.0"
