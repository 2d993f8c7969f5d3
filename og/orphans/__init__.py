from django.apps import AppConfig


class OrphansConfig(AppConfig):
    name = 'og.orphans'

    def ready(self):
        from . import receivers  # noqa: F401
