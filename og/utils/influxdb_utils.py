"""Batched stats writes to influxdb.

Points are collected in memory and flushed once per request (web) or once per
minute (huey worker, see og.utils.tasks).
"""
import logging
from threading import Thread

from django.conf import settings
from django.core.signals import request_finished
from django.dispatch import receiver
from influxdb import InfluxDBClient

logger = logging.getLogger(__name__)


def get_client():
    return InfluxDBClient(
        settings.INFLUXDB_HOST,
        settings.INFLUXDB_PORT,
        settings.INFLUXDB_USER,
        settings.INFLUXDB_PASSWORD,
        settings.INFLUXDB_DATABASE,
        timeout=settings.INFLUXDB_TIMEOUT,
        ssl=getattr(settings, "INFLUXDB_SSL", False),
        verify_ssl=getattr(settings, "INFLUXDB_VERIFY_SSL", False),
    )


def send_points(client, points):
    try:
        client.write_points(points)
    except Exception:
        if getattr(settings, "INFLUXDB_FAIL_SILENTLY", True):
            logger.exception("Error while writing %d stats points", len(points))
        else:
            raise


def actually_write_points(points):
    if getattr(settings, "INFLUXDB_DISABLED", False):
        return

    client = get_client()
    if getattr(settings, "INFLUXDB_USE_THREADING", False):
        Thread(target=send_points, args=(client, points)).start()
    else:
        send_points(client, points)


batch = []


def write_points(points):
    batch.extend(points)


def pending_points():
    return list(batch)


@receiver(request_finished)
def on_request_finished(sender, **kwargs):
    flush_stats()


def flush_stats():
    if len(batch) > 0:
        points = list(batch)
        batch.clear()
        actually_write_points(points)
