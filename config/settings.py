"""
Django settings for og.

For more information on this file, see
https://docs.djangoproject.com/en/dev/topics/settings/

For the full list of settings and their values, see
https://docs.djangoproject.com/en/dev/ref/settings/
"""

# Build paths inside the project like this: os.path.join(BASE_DIR, ...)
import os

import redis
import sentry_sdk
from dotenv import load_dotenv
from sentry_sdk.integrations.django import DjangoIntegration
from sentry_sdk.integrations.redis import RedisIntegration

from config.options import get_options

load_dotenv()

options = get_options()

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

MODE = options["MODE"]

if MODE not in (
    "dev",
    "prod",
):
    raise Exception(f"MODE must be one of dev|prod, not {MODE}")

is_dev = MODE == "dev"

DEBUG = is_dev


def parse_list(value):
    return [s.strip() for s in value.split(",") if s.strip()] if value else []


# Organic groups

# (entity type, bundle) pairs, e.g. ("host.node", "club")
OG_GROUP_TYPES = {
    "group": [],
    "group_content": [],
}
# delete group content that is left without any group when its group is deleted
OG_DELETE_ORPHANS = options["OG_DELETE_ORPHANS"] == "true"
# one of og.orphans.strategies.STRATEGIES
OG_DELETE_ORPHANS_PLUGIN_ID = options["OG_DELETE_ORPHANS_PLUGIN_ID"]
# undecided access turns into a denial for the listed entity types
OG_NODE_ACCESS_STRICT = options["OG_NODE_ACCESS_STRICT"] == "true"
OG_STRICT_ACCESS_ENTITY_TYPES = parse_list(options["OG_STRICT_ACCESS_ENTITY_TYPES"])
# group owners can do anything in their group
OG_GROUP_MANAGER_FULL_ACCESS = options["OG_GROUP_MANAGER_FULL_ACCESS"] == "true"
# role given to the owner of a new group
OG_DEFAULT_ROLE = options["OG_DEFAULT_ROLE"]
OG_ORPHANS_BATCH_SIZE = int(options["OG_ORPHANS_BATCH_SIZE"])
OG_ORPHANS_CRON_MINUTES = int(options["OG_ORPHANS_CRON_MINUTES"])
# batch items left unprocessed for longer are picked up by the periodic task
OG_ORPHANS_BATCH_GRACE_MINUTES = int(options["OG_ORPHANS_BATCH_GRACE_MINUTES"])

DEFAULT_AUTO_FIELD = "django.db.models.AutoField"

# Django configuration
INSTALLED_APPS = (
    # core Django
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.staticfiles",
    "django.contrib.messages",
    # Application
    "og.base.BaseConfig",
    "og.groups.GroupsConfig",
    "og.orphans.OrphansConfig",
    "og.utils",
    # Django packages
    "rest_framework",
    "huey.contrib.djhuey",
)

AUTHENTICATION_BACKENDS = (
    "django.contrib.auth.backends.ModelBackend",
    "og.access.backends.OgAccessBackend",
)

REST_FRAMEWORK = {
    "DEFAULT_PERMISSION_CLASSES": ("rest_framework.permissions.AllowAny",),
    "DEFAULT_AUTHENTICATION_CLASSES": (
        "rest_framework.authentication.SessionAuthentication",
    ),
    "EXCEPTION_HANDLER": "og.utils.misc.custom_exception_handler",
}

MIDDLEWARE = (
    "django.middleware.http.ConditionalGetMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
)

ROOT_URLCONF = "config.urls"

WSGI_APPLICATION = "config.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.contrib.auth.context_processors.auth",
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

DATABASES = {
    "default": {
        "ENGINE": options["DATABASE_ENGINE"],
        "NAME": options["DATABASE_NAME"],
        "USER": options["DATABASE_USER"],
        "PASSWORD": options["DATABASE_PASSWORD"],
        "HOST": options["DATABASE_HOST"],
        "PORT": options["DATABASE_PORT"],
        "CONN_MAX_AGE": int(options["DATABASE_CONN_MAX_AGE"]),
    }
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "INFO",
    },
}

REDIS_HOST = options["REDIS_HOST"]
REDIS_PORT = options["REDIS_PORT"]
REDIS_SOCKET = options["REDIS_SOCKET"]

REDIS_DB = options["REDIS_DB"]

if REDIS_SOCKET:
    REDIS_URL = f"unix://{REDIS_SOCKET}?db={REDIS_DB}"
elif REDIS_HOST:
    REDIS_URL = f"redis://{REDIS_HOST}:{REDIS_PORT}/{REDIS_DB}"
else:
    REDIS_URL = None

if REDIS_URL:
    CACHES = {
        "default": {
            "BACKEND": "django_redis.cache.RedisCache",
            "LOCATION": REDIS_URL,
            "OPTIONS": {
                "CLIENT_CLASS": "django_redis.client.DefaultClient",
                # Will use HiredisParser if hiredis available
                "PARSER_CLASS": "redis.connection.DefaultParser",
            },
        }
    }
else:
    CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        }
    }

# Internationalization
# https://docs.djangoproject.com/en/dev/topics/i18n/

LANGUAGE_CODE = "en-us"

TIME_ZONE = "UTC"

USE_I18N = True

USE_TZ = True

STATIC_URL = "/static/"
STATIC_ROOT = os.path.join(BASE_DIR, "og", "static")

if is_dev:
    SESSION_COOKIE_SECURE = False
    CSRF_COOKIE_SECURE = False
else:
    SESSION_COOKIE_SECURE = True
    CSRF_COOKIE_SECURE = True

HOSTNAME = options["SITE_URL"]

ALLOWED_HOSTS = parse_list(options["ALLOWED_HOSTS"])

INFLUXDB_HOST = options["INFLUXDB_HOST"]

INFLUXDB_DISABLED = not INFLUXDB_HOST

INFLUXDB_PORT = options["INFLUXDB_PORT"]
INFLUXDB_USER = options["INFLUXDB_USER"]
INFLUXDB_PASSWORD = options["INFLUXDB_PASSWORD"]
INFLUXDB_DATABASE = options["INFLUXDB_NAME"]
INFLUXDB_TIMEOUT = 5
INFLUXDB_USE_THREADING = True

SENTRY_DSN = options["SENTRY_DSN"]
SENTRY_ENVIRONMENT = options["SENTRY_ENVIRONMENT"]
SENTRY_RELEASE = options["SENTRY_RELEASE"]

if SENTRY_DSN:
    sentry_sdk.init(
        dsn=SENTRY_DSN,
        integrations=[DjangoIntegration(), RedisIntegration()],
        traces_sample_rate=0.1,
        send_default_pii=False,
        release=SENTRY_RELEASE,
        environment=SENTRY_ENVIRONMENT,
    )

SECRET_KEY = options["SECRET_KEY"]

WORKER_IMMEDIATE = options["WORKER_IMMEDIATE"] == "true"
WORKER_COUNT = int(options["WORKER_COUNT"])

if WORKER_IMMEDIATE or not REDIS_URL:
    HUEY = {
        "immediate": True,
    }
else:
    pool = redis.ConnectionPool.from_url(REDIS_URL)
    HUEY = {
        "immediate": False,
        "connection": {
            "connection_pool": pool,
        },
        "consumer": {
            "workers": WORKER_COUNT,
            "worker_type": "thread",
        },
    }

# NB: Keep this as the last line, and keep
# local_settings.py out of version control
try:
    from .local_settings import *  # noqa
except ImportError:
    pass
