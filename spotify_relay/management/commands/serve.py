# spotify_relay/management/commands/serve.py
import logging

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Run the relay on HOST:PORT from settings (development server)."

    def add_arguments(self, parser):
        parser.add_argument("--host", default=None)
        parser.add_argument("--port", type=int, default=None)

    def handle(self, *args, **options):
        host = options["host"] or settings.HOST
        port = options["port"] or settings.PORT
        logger.info("[STARTUP] Spotify relay listening on %s:%s", host, port)
        call_command("runserver", f"{host}:{port}", use_reloader=False)
