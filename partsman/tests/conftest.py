"""Pytest fixtures for Partsman tests."""

from decimal import Decimal

import pytest

from partsman.conf import reset_catalog
from partsman.models import InHouse, Outsourced, Part, Product
from partsman.service import InventoryService


@pytest.fixture(autouse=True)
def catalog():
    """Start every test with an empty application catalog."""
    return reset_catalog()


@pytest.fixture
def service(catalog):
    return InventoryService(catalog)


@pytest.fixture
def bolt():
    """An unsaved in-house part."""
    return Part(
        id=None,
        name="Bolt",
        price=Decimal("5.00"),
        stock=5,
        min=0,
        max=10,
        source=InHouse(machine_id=101),
    )


@pytest.fixture
def sprocket():
    """An unsaved outsourced part."""
    return Part(
        id=None,
        name="Sprocket",
        price=Decimal("10.00"),
        stock=20,
        min=5,
        max=50,
        source=Outsourced(company_name="Acme Gears"),
    )


@pytest.fixture
def stored_bolt(service, bolt):
    """Bolt saved in the catalog."""
    service.save_part(bolt)
    return bolt


@pytest.fixture
def stored_sprocket(service, sprocket):
    """Sprocket saved in the catalog."""
    service.save_part(sprocket)
    return sprocket


@pytest.fixture
def gearbox(stored_bolt, stored_sprocket):
    """An unsaved product built from bolt + sprocket (cost 15.00)."""
    product = Product(
        id=None,
        name="Gearbox",
        price=Decimal("40.00"),
        stock=3,
        min=1,
        max=10,
    )
    product.add_associated_part(stored_bolt)
    product.add_associated_part(stored_sprocket)
    return product


@pytest.fixture
def stored_gearbox(service, gearbox):
    """Gearbox saved in the catalog."""
    service.save_product(gearbox)
    return gearbox
