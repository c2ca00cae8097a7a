"""
Forms for the part and product screens.

Forms only turn raw text into typed values. A form that fails to parse
never reaches validation; a form that parses becomes a candidate Part or
Product, which InventoryService then validates. The two kinds of failure
are reported separately.
"""

from django import forms
from django.utils.translation import gettext_lazy as _

from partsman.catalog import Catalog
from partsman.models import InHouse, Outsourced, Part, Product


class PartKind:
    IN_HOUSE = "in_house"
    OUTSOURCED = "outsourced"

    choices = [
        (IN_HOUSE, _("In-House")),
        (OUTSOURCED, _("Outsourced")),
    ]


class _StockForm(forms.Form):
    """Fields shared by parts and products."""

    # Left optional so that a blank name is reported by validation.
    name = forms.CharField(label=_("Name"), required=False, max_length=200)
    stock = forms.IntegerField(
        label=_("Inventory"),
        required=False,
        help_text=_("Blank means 0"),
    )
    price = forms.DecimalField(label=_("Price/Cost"), max_digits=12, decimal_places=2)
    min = forms.IntegerField(label=_("Min"))
    max = forms.IntegerField(label=_("Max"))

    def clean_stock(self):
        stock = self.cleaned_data.get("stock")
        return 0 if stock is None else stock

    @staticmethod
    def stock_initial(entity: Part | Product) -> dict:
        return {
            "name": entity.name,
            "stock": entity.stock,
            "price": entity.price,
            "min": entity.min,
            "max": entity.max,
        }


class PartForm(_StockForm):
    kind = forms.ChoiceField(
        label=_("Source"),
        choices=PartKind.choices,
        initial=PartKind.IN_HOUSE,
        widget=forms.RadioSelect,
    )
    machine_id = forms.IntegerField(label=_("Machine ID"), required=False)
    company_name = forms.CharField(label=_("Company Name"), required=False, max_length=200)

    field_order = ["kind", "name", "stock", "price", "max", "min", "machine_id", "company_name"]

    def clean(self):
        cleaned = super().clean()
        if cleaned.get("kind") == PartKind.IN_HOUSE and cleaned.get("machine_id") is None:
            if "machine_id" not in self.errors:
                self.add_error("machine_id", _("In-house parts need a machine ID."))
        return cleaned

    @classmethod
    def initial_for(cls, part: Part) -> dict:
        initial = cls.stock_initial(part)
        match part.source:
            case InHouse(machine_id=machine_id):
                initial.update(kind=PartKind.IN_HOUSE, machine_id=machine_id)
            case Outsourced(company_name=company_name):
                initial.update(kind=PartKind.OUTSOURCED, company_name=company_name)
        return initial

    def to_part(self, part_id: int | None = None) -> Part:
        """Build a candidate part from cleaned data."""
        data = self.cleaned_data
        if data["kind"] == PartKind.IN_HOUSE:
            source = InHouse(machine_id=data["machine_id"])
        else:
            source = Outsourced(company_name=data["company_name"])
        return Part(
            id=part_id,
            name=data["name"],
            price=data["price"],
            stock=data["stock"],
            min=data["min"],
            max=data["max"],
            source=source,
        )


class ProductForm(_StockForm):
    """
    Product fields plus the ordered list of associated part ids.

    The list travels as one hidden ``parts`` input per association, so a
    part associated twice is submitted twice. The screen edits it with
    ``add_part`` (a part id) and ``remove_part`` (a list position) buttons;
    see edit_parts().
    """

    parts = forms.TypedMultipleChoiceField(
        label=_("Associated parts"),
        coerce=int,
        required=False,
        widget=forms.MultipleHiddenInput,
    )

    def __init__(self, *args, catalog: Catalog, **kwargs):
        super().__init__(*args, **kwargs)
        self.catalog = catalog
        self.fields["parts"].choices = [
            (part.id, f"{part.name} ({part.price})") for part in catalog.get_parts()
        ]

    @classmethod
    def initial_for(cls, product: Product, catalog: Catalog) -> dict:
        initial = cls.stock_initial(product)
        # Parts removed from the catalog since association can't be re-selected.
        initial["parts"] = [
            part.id
            for part in product.associated_parts
            if catalog.lookup_part(part.id) is not None
        ]
        return initial

    @classmethod
    def edit_parts(cls, data, catalog: Catalog) -> "ProductForm":
        """
        Apply an add_part / remove_part button press to submitted data.

        Returns an unbound form showing the raw field values and the edited
        part list. Nothing is parsed or validated, and nothing is saved.
        """
        parts = data.getlist("parts")
        if "add_part" in data:
            part_id = data["add_part"]
            # A decimal query is an exact id lookup: zero or one hit.
            found = catalog.search_parts(part_id) if part_id.isdecimal() else []
            if found:
                parts.append(str(found[0].id))
        elif "remove_part" in data:
            position = data["remove_part"]
            if position.isdecimal() and int(position) < len(parts):
                del parts[int(position)]

        initial = {name: data.get(name, "") for name in ("name", "stock", "price", "min", "max")}
        initial["parts"] = parts
        return cls(initial=initial, catalog=catalog)

    def selected_parts(self) -> list[Part]:
        """Catalog parts currently on the form, in order and with repeats."""
        selected = []
        for value in self["parts"].value() or []:
            try:
                part = self.catalog.lookup_part(int(value))
            except (TypeError, ValueError):
                continue
            if part is not None:
                selected.append(part)
        return selected

    def to_product(self, product_id: int | None = None) -> Product:
        """Build a candidate product with its selected parts attached."""
        data = self.cleaned_data
        product = Product(
            id=product_id,
            name=data["name"],
            price=data["price"],
            stock=data["stock"],
            min=data["min"],
            max=data["max"],
        )
        for part_id in data["parts"]:
            part = self.catalog.lookup_part(part_id)
            if part is not None:
                product.add_associated_part(part)
        return product
