from config.settings import *  # noqa

INSTALLED_APPS += ("og.tests.host.HostConfig", )

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    }
}

HUEY = {
    "immediate": True,
}

INFLUXDB_DISABLED = True

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

OG_GROUP_TYPES = {
    "group": [
        ("host.node", "club"),
        ("host.community", "community"),
    ],
    "group_content": [
        ("host.node", "article"),
        ("host.node", "page"),
        ("host.post", "post"),
    ],
}
OG_STRICT_ACCESS_ENTITY_TYPES = ["host.node", "host.post"]
OG_NODE_ACCESS_STRICT = False
OG_DELETE_ORPHANS = False
OG_DELETE_ORPHANS_PLUGIN_ID = "immediate"
OG_GROUP_MANAGER_FULL_ACCESS = True
OG_DEFAULT_ROLE = "member"
OG_ORPHANS_BATCH_SIZE = 2
