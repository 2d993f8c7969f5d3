from django.apps import AppConfig


class BaseConfig(AppConfig):
    name = 'og.base'

    def ready(self):
        from . import checks  # noqa: F401
