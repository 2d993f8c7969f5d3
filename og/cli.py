import os

import click
from click import pass_context
from django.core import management
import django
from django.core.management import execute_from_command_line
from dotenv import load_dotenv


def setup(env_files=()):
    for env_file in reversed(env_files):
        # in reversed order so that the last one passed on the command line
        # has the highest priority, which means applied first
        # (actual env vars still have higher priority)
        load_dotenv(env_file)
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
    django.setup()


@click.group()
@click.option('env_files', '--env', help='path to env file', multiple=True)
def cli(env_files):
    setup(env_files)


@cli.command(help='run a huey worker (processes the orphan queues)')
def worker():
    management.call_command("run_huey")


@cli.command(help='alias for django "check" command')
def check():
    management.call_command("check")


@cli.command(help='alias for django "migrate" command')
def migrate():
    management.call_command("migrate")


@cli.command(name='drain-orphan-queues', help='discard all pending orphan deletion work')
def drain_orphan_queues():
    management.call_command("og_drain_orphan_queues")


@cli.command(
    help='run a django manage.py command', context_settings=dict(
        ignore_unknown_options=True,
        allow_extra_args=True,
    )
)
@pass_context
def manage(ctx):
    print('running manage', ctx.args)
    execute_from_command_line(['', *ctx.args])


run = cli

if __name__ == '__main__':
    run()
