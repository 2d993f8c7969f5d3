import os
import subprocess
from typing import Literal

from dotenv import dotenv_values

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def get_defaults(filename: Literal['options.env']):
    return dotenv_values(os.path.join(BASE_DIR, 'config', filename))


def get_git_rev():
    release = None
    with open(os.path.devnull, "w+") as null:
        try:
            release = (
                subprocess.Popen(
                    ["git", "rev-parse", "HEAD"],
                    stdout=subprocess.PIPE,
                    stderr=null,
                    stdin=null,
                ).communicate()[0].strip().decode("utf-8")
            )
        except (OSError, IOError):
            pass

    if release:
        return release

    revision_file = os.path.join(BASE_DIR, 'og', 'COMMIT')
    if os.path.exists(revision_file):
        with open(revision_file, 'r') as f:
            return f.read().strip()


def get_options():
    options = {}
    defaults = get_defaults('options.env')

    for key, default in defaults.items():
        value = os.environ.get(key, default)
        # allow secrets to be passed in via a file, e.g. docker secrets
        filename = os.environ.get(key + "_FILE", None)
        if filename:
            with open(filename) as f:
                value = f.read().strip()
        options[key] = value if value else None

    # some more complex defaults that depend on other values

    if options['SENTRY_RELEASE_USE_GIT_REV'] and not options['SENTRY_RELEASE']:
        rev = get_git_rev()
        if rev:
            options['SENTRY_RELEASE'] = rev

    return options
