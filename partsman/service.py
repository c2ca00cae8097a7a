"""
Partsman public API.

    service = InventoryService(get_catalog())

SAVE (validate, then commit):
    service.save_part(candidate)       - Add or update a part
    service.save_product(candidate)    - Add or update a product

DELETE:
    service.delete_part(part_id)       - Remove a part
    service.delete_product(product_id) - Remove a product without parts

CONVENIENCE:
    service.search_parts(query)        - Search parts by id or name
    service.search_products(query)     - Search products by id or name
"""

import logging

from partsman.catalog import Catalog
from partsman.exceptions import CatalogError
from partsman.models import Part, Product
from partsman.protocols.catalog import ValidationResult
from partsman.signals import part_deleted, part_saved, product_deleted, product_saved
from partsman.validation import validate_part, validate_part_in_products, validate_product

logger = logging.getLogger(__name__)


class InventoryService:
    """
    Flows the screens run against the catalog.

    A candidate with ``id=None`` is new and gets the next id from the
    catalog; a candidate with an id replaces the stored record. When a
    candidate fails validation the catalog is left untouched and the
    failing result is returned.
    """

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog

    # ======================================================================
    # SAVE
    # ======================================================================

    def save_part(self, candidate: Part) -> ValidationResult:
        """
        Validate and store a part.

        An update is also refused when the new price would push a stored
        product's parts cost above that product's price.

        Returns:
            ValidationResult (valid=False leaves the catalog unchanged)

        Raises:
            CatalogError: PART_NOT_FOUND if updating an id that is gone
        """
        result = validate_part(candidate)
        if result.valid and candidate.id is not None:
            # Stored products see the new price through their associations.
            result = validate_part_in_products(
                candidate, self.catalog.products_using_part(candidate.id)
            )
        if not result.valid:
            logger.debug("Part %r rejected: %s", candidate.name, result.message)
            return result

        created = candidate.id is None
        if created:
            candidate.id = self.catalog.next_part_id()
            self.catalog.add_part(candidate)
        else:
            self.catalog.update_part(candidate)

        part_saved.send(sender=Catalog, instance=candidate, created=created)
        return result

    def save_product(self, candidate: Product) -> ValidationResult:
        """
        Validate and store a product.

        Associated parts must already be attached to the candidate.

        Returns:
            ValidationResult (valid=False leaves the catalog unchanged)

        Raises:
            CatalogError: PRODUCT_NOT_FOUND if updating an id that is gone,
                PART_NOT_IN_CATALOG if a part isn't in the catalog
        """
        result = validate_product(candidate)
        if not result.valid:
            logger.debug("Product %r rejected: %s", candidate.name, result.message)
            return result

        created = candidate.id is None
        if created:
            candidate.id = self.catalog.next_product_id()
            try:
                self.catalog.add_product(candidate)
            except CatalogError:
                candidate.id = None
                raise
        else:
            self.catalog.update_product(candidate)

        product_saved.send(sender=Catalog, instance=candidate, created=created)
        return result

    # ======================================================================
    # DELETE
    # ======================================================================

    def delete_part(self, part_id: int) -> bool:
        """Remove a part. Returns False if there was no such part."""
        removed = self.catalog.remove_part(part_id)
        if removed:
            part_deleted.send(sender=Catalog, part_id=part_id)
        return removed

    def delete_product(self, product_id: int) -> bool:
        """
        Remove a product.

        Returns:
            False if there was no such product

        Raises:
            CatalogError: PRODUCT_HAS_PARTS if parts are still associated
        """
        product = self.catalog.lookup_product(product_id)
        if product is None:
            return False
        if not self.catalog.can_delete_product(product):
            raise CatalogError("PRODUCT_HAS_PARTS", product_id=product_id)

        removed = self.catalog.remove_product(product_id)
        if removed:
            product_deleted.send(sender=Catalog, product_id=product_id)
        return removed

    # ======================================================================
    # CONVENIENCE
    # ======================================================================

    def search_parts(self, query: str | None = None) -> list[Part]:
        return self.catalog.search_parts(query)

    def search_products(self, query: str | None = None) -> list[Product]:
        return self.catalog.search_products(query)
