"""Initialisation for the searchable app, which is called at Django setup
time.

"""

from django.apps import AppConfig


class SearchableConfig(AppConfig):
    name = 'searchable'
    verbose_name = 'Attribute search'

    def ready(self):
        from .registry import autodiscover
        autodiscover()
