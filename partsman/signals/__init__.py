"""
Partsman signals.

All signals are sent by InventoryService with the Catalog class as sender,
after the catalog has been changed.

Signals:
    part_saved:
        Sent after a part is added or updated.

        Kwargs:
            sender: Catalog class
            instance: The Part that was stored
            created: bool (True for a new part, False for an update)

        Example handler::

            from partsman.signals import part_saved

            def on_part_saved(sender, instance, created, **kwargs):
                logger.info("Part %s saved (new=%s)", instance.id, created)

            part_saved.connect(on_part_saved)

    product_saved:
        Sent after a product is added or updated.

        Kwargs:
            sender: Catalog class
            instance: The Product that was stored
            created: bool

    part_deleted:
        Sent after a part is removed from the catalog.

        Kwargs:
            sender: Catalog class
            part_id: int

    product_deleted:
        Sent after a product is removed from the catalog.

        Kwargs:
            sender: Catalog class
            product_id: int
"""

from django.dispatch import Signal

part_saved = Signal()
product_saved = Signal()
part_deleted = Signal()
product_deleted = Signal()
