"""
In-memory catalog of parts and products.

The catalog is the only owner of Part and Product instances. It keeps
them keyed by id, in insertion order, for the lifetime of the process.
There is no persistence: a fresh catalog is empty.

One instance is built by the application root (see PartsmanConfig.ready)
and handed to whoever needs it:

    catalog = get_catalog()
    part.id = catalog.next_part_id()
    catalog.add_part(part)
"""

import logging

from partsman.exceptions import CatalogError
from partsman.models import Part, Product
from partsman.protocols.catalog import IdAllocator

logger = logging.getLogger(__name__)


class Catalog:
    """Repository for the live sets of parts and products."""

    def __init__(self, part_ids: IdAllocator, product_ids: IdAllocator) -> None:
        self._parts: dict[int, Part] = {}
        self._products: dict[int, Product] = {}
        self._part_ids = part_ids
        self._product_ids = product_ids

    def __repr__(self) -> str:
        return f"<Catalog parts={len(self._parts)} products={len(self._products)}>"

    # ======================================================================
    # IDS
    # ======================================================================

    def next_part_id(self) -> int:
        return self._part_ids.next_id()

    def next_product_id(self) -> int:
        return self._product_ids.next_id()

    def peek_part_id(self) -> int:
        """Id the next new part will get (for "auto-generated" labels)."""
        return self._part_ids.peek()

    def peek_product_id(self) -> int:
        return self._product_ids.peek()

    # ======================================================================
    # PARTS
    # ======================================================================

    def add_part(self, part: Part) -> None:
        """
        Store a new part.

        Raises:
            CatalogError: ID_REQUIRED if the part has no id,
                DUPLICATE_PART_ID if the id is taken.
        """
        if part.id is None:
            raise CatalogError("ID_REQUIRED", entity="part")
        if part.id in self._parts:
            logger.warning("Refusing to add part %s: id already in use", part.id)
            raise CatalogError("DUPLICATE_PART_ID", part_id=part.id)
        self._parts[part.id] = part
        self._part_ids.advance_past(part.id)
        logger.info("Added part %s (%s)", part.id, part.name)

    def lookup_part(self, part_id: int) -> Part | None:
        return self._parts.get(part_id)

    def update_part(self, part: Part) -> None:
        """
        Replace the stored part that has the same id.

        Products associated with the old part are re-pointed to the new one.

        Raises:
            CatalogError: PART_NOT_FOUND if no part has this id.
        """
        if part.id not in self._parts:
            logger.warning("Refusing to update part %s: not in catalog", part.id)
            raise CatalogError("PART_NOT_FOUND", part_id=part.id)
        self._parts[part.id] = part
        for product in self._products.values():
            product.associated_parts = [
                part if associated.id == part.id else associated
                for associated in product.associated_parts
            ]
        logger.info("Updated part %s (%s)", part.id, part.name)

    def remove_part(self, part_id: int) -> bool:
        if self._parts.pop(part_id, None) is None:
            logger.debug("Part %s not removed: not in catalog", part_id)
            return False
        logger.info("Removed part %s", part_id)
        return True

    def get_parts(self) -> list[Part]:
        return list(self._parts.values())

    def parts_count(self) -> int:
        return len(self._parts)

    # ======================================================================
    # PRODUCTS
    # ======================================================================

    def add_product(self, product: Product) -> None:
        """
        Store a new product.

        Raises:
            CatalogError: ID_REQUIRED, DUPLICATE_PRODUCT_ID, or
                PART_NOT_IN_CATALOG if an associated part isn't stored here.
        """
        if product.id is None:
            raise CatalogError("ID_REQUIRED", entity="product")
        if product.id in self._products:
            logger.warning("Refusing to add product %s: id already in use", product.id)
            raise CatalogError("DUPLICATE_PRODUCT_ID", product_id=product.id)
        self._check_associated_parts(product)
        self._products[product.id] = product
        self._product_ids.advance_past(product.id)
        logger.info("Added product %s (%s)", product.id, product.name)

    def lookup_product(self, product_id: int) -> Product | None:
        return self._products.get(product_id)

    def update_product(self, product: Product) -> None:
        """
        Replace the stored product that has the same id.

        Raises:
            CatalogError: PRODUCT_NOT_FOUND if no product has this id,
                PART_NOT_IN_CATALOG if an associated part isn't stored here.
        """
        if product.id not in self._products:
            logger.warning("Refusing to update product %s: not in catalog", product.id)
            raise CatalogError("PRODUCT_NOT_FOUND", product_id=product.id)
        self._check_associated_parts(product)
        self._products[product.id] = product
        logger.info("Updated product %s (%s)", product.id, product.name)

    def remove_product(self, product_id: int) -> bool:
        if self._products.pop(product_id, None) is None:
            logger.debug("Product %s not removed: not in catalog", product_id)
            return False
        logger.info("Removed product %s", product_id)
        return True

    def products_using_part(self, part_id: int) -> list[Product]:
        """Stored products with at least one association to this part id."""
        return [
            product
            for product in self._products.values()
            if product.lookup_associated_part(part_id) is not None
        ]

    def can_delete_product(self, product: Product) -> bool:
        """A product can only be deleted once it has no associated parts."""
        return not product.associated_parts

    def get_products(self) -> list[Product]:
        return list(self._products.values())

    def products_count(self) -> int:
        return len(self._products)

    def _check_associated_parts(self, product: Product) -> None:
        for part in product.associated_parts:
            if part.id not in self._parts:
                logger.warning(
                    "Product %s references part %s, which is not in the catalog",
                    product.id,
                    part.id,
                )
                raise CatalogError(
                    "PART_NOT_IN_CATALOG", product_id=product.id, part_id=part.id
                )

    # ======================================================================
    # SEARCH
    # ======================================================================

    def search_parts(self, query: str | None = None, limit: int | None = None) -> list[Part]:
        """
        Search parts.

        Args:
            query: All decimal digits matches the id exactly; anything else is a
                case-insensitive substring of the name. Empty returns all.
            limit: Maximum results (default PARTSMAN["SEARCH_LIMIT"])
        """
        return self._search(self._parts, query, limit)

    def search_products(self, query: str | None = None, limit: int | None = None) -> list[Product]:
        """Search products. Same matching rules as search_parts()."""
        return self._search(self._products, query, limit)

    @staticmethod
    def _search(entities: dict, query: str | None, limit: int | None) -> list:
        from partsman.conf import partsman_settings

        if limit is None:
            limit = partsman_settings.SEARCH_LIMIT

        query = (query or "").strip()
        if not query:
            return list(entities.values())[:limit]
        if query.isdecimal():
            try:
                found = entities.get(int(query))
            except ValueError:
                # More digits than int() accepts; no id can match.
                return []
            return [found] if found is not None else []

        needle = query.casefold()
        return [e for e in entities.values() if needle in e.name.casefold()][:limit]
