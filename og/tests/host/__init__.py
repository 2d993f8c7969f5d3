from django.apps import AppConfig


class HostConfig(AppConfig):
    """Stand-in for the site's own models, used by the tests"""
    name = 'og.tests.host'
    label = 'host'
