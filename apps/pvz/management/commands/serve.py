"""
Run the HTTP API and the gRPC reporting server together.

Usage:
    python manage.py serve
    python manage.py serve --http-port 8080 --grpc-port 3000 --skip-migrations

SIGINT/SIGTERM, or either listener failing, stops both listeners with a
bounded drain (SHUTDOWN_GRACE_SECONDS).
"""

import signal
import threading

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError

from apps.pvz.supervisor import HttpService, GrpcService, run_until_shutdown


class Command(BaseCommand):
    help = 'Run the HTTP and gRPC servers until interrupted'

    def add_arguments(self, parser):
        parser.add_argument('--http-host', default=settings.HTTP_HOST)
        parser.add_argument('--http-port', type=int, default=settings.HTTP_PORT)
        parser.add_argument('--grpc-port', type=int, default=settings.GRPC_PORT)
        parser.add_argument(
            '--skip-migrations',
            action='store_true',
            help='Do not apply migrations before starting',
        )

    def handle(self, *args, **options):
        if settings.MIGRATE_ON_STARTUP and not options['skip_migrations']:
            self.stdout.write('Applying migrations...')
            call_command('migrate', interactive=False, verbosity=options['verbosity'])

        shutdown = threading.Event()

        def request_shutdown(signum, frame):
            self.stdout.write(f'Received signal {signum}, shutting down...')
            shutdown.set()

        signal.signal(signal.SIGINT, request_shutdown)
        signal.signal(signal.SIGTERM, request_shutdown)

        services = [
            HttpService(shutdown, host=options['http_host'], port=options['http_port']),
            GrpcService(shutdown, port=options['grpc_port'], max_workers=settings.GRPC_MAX_WORKERS),
        ]
        try:
            errors = run_until_shutdown(services, shutdown, settings.SHUTDOWN_GRACE_SECONDS)
        except OSError as e:
            raise CommandError(f"Cannot start listeners: {e}")

        if errors:
            raise CommandError(f'Stopped after listener failure: {errors[0]}')
        self.stdout.write(self.style.SUCCESS('Servers stopped.'))
