"""
Screens for the inventory.

Every view is a thin caller of InventoryService: forms parse the input,
the service validates and commits, and the view re-renders from the
catalog's current state.
"""

import logging

from django.http import Http404
from django.shortcuts import redirect, render
from django.views import View

from partsman.conf import get_catalog
from partsman.exceptions import CatalogError
from partsman.forms import PartForm, ProductForm
from partsman.service import InventoryService

logger = logging.getLogger(__name__)


def _get_part_or_404(catalog, part_id):
    part = catalog.lookup_part(part_id)
    if part is None:
        raise Http404(f"Part {part_id} not found")
    return part


def _get_product_or_404(catalog, product_id):
    product = catalog.lookup_product(product_id)
    if product is None:
        raise Http404(f"Product {product_id} not found")
    return product


class InventoryView(View):
    """Main screen: parts and products tables, each with its own search."""

    template_name = "partsman/inventory.html"

    def get(self, request):
        catalog = get_catalog()
        part_q = request.GET.get("part_q", "").strip()
        product_q = request.GET.get("product_q", "").strip()

        parts = catalog.search_parts(part_q)
        products = catalog.search_products(product_q)

        return render(
            request,
            self.template_name,
            {
                "parts": parts,
                "products": products,
                "part_q": part_q,
                "product_q": product_q,
                "part_not_found": bool(part_q) and not parts,
                "product_not_found": bool(product_q) and not products,
            },
        )


class PartFormView(View):
    """Add Part (no id) and Modify Part (with id) screens."""

    template_name = "partsman/part_form.html"

    def get(self, request, part_id=None):
        catalog = get_catalog()
        if part_id is None:
            form = PartForm()
        else:
            form = PartForm(initial=PartForm.initial_for(_get_part_or_404(catalog, part_id)))
        return self._render(request, catalog, form, part_id)

    def post(self, request, part_id=None):
        catalog = get_catalog()
        if part_id is not None:
            _get_part_or_404(catalog, part_id)

        form = PartForm(request.POST)
        if not form.is_valid():
            return self._render(request, catalog, form, part_id)

        candidate = form.to_part(part_id)
        try:
            result = InventoryService(catalog).save_part(candidate)
        except CatalogError as e:
            logger.warning("Saving part %s failed: %s", part_id, e)
            return self._render(request, catalog, form, part_id, validation_error=e.message)

        if not result.valid:
            return self._render(request, catalog, form, part_id, validation_error=result.message)
        return redirect("partsman:inventory")

    def _render(self, request, catalog, form, part_id, validation_error=None):
        return render(
            request,
            self.template_name,
            {
                "form": form,
                "part_id": part_id,
                "auto_id": catalog.peek_part_id() if part_id is None else None,
                "validation_error": validation_error,
            },
        )


class ProductFormView(View):
    """Add Product (no id) and Modify Product (with id) screens."""

    template_name = "partsman/product_form.html"

    def get(self, request, product_id=None):
        catalog = get_catalog()
        if product_id is None:
            form = ProductForm(catalog=catalog)
        else:
            product = _get_product_or_404(catalog, product_id)
            form = ProductForm(
                initial=ProductForm.initial_for(product, catalog),
                catalog=catalog,
            )
        return self._render(request, catalog, form, product_id)

    def post(self, request, product_id=None):
        catalog = get_catalog()
        if product_id is not None:
            _get_product_or_404(catalog, product_id)

        if "add_part" in request.POST or "remove_part" in request.POST:
            form = ProductForm.edit_parts(request.POST, catalog)
            return self._render(request, catalog, form, product_id)

        form = ProductForm(request.POST, catalog=catalog)
        if not form.is_valid():
            return self._render(request, catalog, form, product_id)

        candidate = form.to_product(product_id)
        try:
            result = InventoryService(catalog).save_product(candidate)
        except CatalogError as e:
            logger.warning("Saving product %s failed: %s", product_id, e)
            return self._render(request, catalog, form, product_id, validation_error=e.message)

        if not result.valid:
            return self._render(request, catalog, form, product_id, validation_error=result.message)
        return redirect("partsman:inventory")

    def _render(self, request, catalog, form, product_id, validation_error=None):
        part_q = request.GET.get("part_q", "").strip()
        available_parts = catalog.search_parts(part_q)
        return render(
            request,
            self.template_name,
            {
                "form": form,
                "product_id": product_id,
                "auto_id": catalog.peek_product_id() if product_id is None else None,
                "available_parts": available_parts,
                "associated_parts": form.selected_parts(),
                "part_q": part_q,
                "part_not_found": bool(part_q) and not available_parts,
                "validation_error": validation_error,
            },
        )


class PartDeleteView(View):
    """GET asks for confirmation, POST deletes."""

    template_name = "partsman/confirm_delete.html"

    def get(self, request, part_id):
        part = _get_part_or_404(get_catalog(), part_id)
        return render(request, self.template_name, {"entity": part, "entity_type": "part"})

    def post(self, request, part_id):
        if not InventoryService(get_catalog()).delete_part(part_id):
            raise Http404(f"Part {part_id} not found")
        return redirect("partsman:inventory")


class ProductDeleteView(View):
    """
    GET asks for confirmation, POST deletes.

    A product that still has associated parts can't be deleted; both GET
    and POST answer with a notice instead.
    """

    template_name = "partsman/confirm_delete.html"
    blocked_template_name = "partsman/delete_blocked.html"

    def get(self, request, product_id):
        catalog = get_catalog()
        product = _get_product_or_404(catalog, product_id)
        if not catalog.can_delete_product(product):
            return self._blocked(request, product, CatalogError("PRODUCT_HAS_PARTS"))
        return render(request, self.template_name, {"entity": product, "entity_type": "product"})

    def post(self, request, product_id):
        catalog = get_catalog()
        product = _get_product_or_404(catalog, product_id)
        try:
            InventoryService(catalog).delete_product(product_id)
        except CatalogError as e:
            return self._blocked(request, product, e)
        return redirect("partsman:inventory")

    def _blocked(self, request, product, error):
        return render(
            request,
            self.blocked_template_name,
            {"entity": product, "message": error.message},
            status=409,
        )
