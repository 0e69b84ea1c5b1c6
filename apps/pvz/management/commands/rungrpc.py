"""
Run only the gRPC reporting server.

Usage:
    python manage.py rungrpc --port 3000
"""

import signal
import threading

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from apps.pvz.supervisor import GrpcService, run_until_shutdown


class Command(BaseCommand):
    help = 'Run the read-only gRPC PVZService'

    def add_arguments(self, parser):
        parser.add_argument('--port', type=int, default=settings.GRPC_PORT)

    def handle(self, *args, **options):
        shutdown = threading.Event()

        def request_shutdown(signum, frame):
            shutdown.set()

        signal.signal(signal.SIGINT, request_shutdown)
        signal.signal(signal.SIGTERM, request_shutdown)

        service = GrpcService(shutdown, port=options['port'], max_workers=settings.GRPC_MAX_WORKERS)
        try:
            errors = run_until_shutdown([service], shutdown, settings.SHUTDOWN_GRACE_SECONDS)
        except OSError as e:
            raise CommandError(f"Cannot start gRPC server: {e}")

        if errors:
            raise CommandError(f'gRPC server failed: {errors[0]}')
        self.stdout.write(self.style.SUCCESS('gRPC server stopped.'))
