from django.apps import AppConfig


class GroupsConfig(AppConfig):
    name = 'og.groups'

    def ready(self):
        from django.apps import apps
        from django.conf import settings

        from og.groups.registry import registry
        from . import receivers  # noqa: F401

        registry.load(settings.OG_GROUP_TYPES)
        registry.register_admin_link_templates(apps.get_models())
