from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class SolrCursorConfig(AppConfig):
    name = "solrcursor.contrib.django"
    label = "solrcursor"
    verbose_name = _("Solr Cursor")
