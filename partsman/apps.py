from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class PartsmanConfig(AppConfig):
    name = "partsman"
    verbose_name = _("Parts & Products Inventory")

    # The process-wide catalog; built empty in ready(), discarded on exit.
    catalog = None

    def ready(self):
        from partsman.conf import build_catalog

        self.catalog = build_catalog()
