"""
Supervision of the HTTP and gRPC listeners.

Each listener runs in its own thread and shares one shutdown event with
the others. A signal, or any listener dying, sets the event; every
listener is then drained within a bounded grace period.
"""

import logging
import threading
from typing import List, Optional

from django.core.servers.basehttp import (
    ThreadedWSGIServer,
    WSGIRequestHandler,
    get_internal_wsgi_application,
)

from apps.pvz.grpc_api import create_server

logger = logging.getLogger(__name__)


class SupervisedService:
    """A listener bound to the shared shutdown event."""

    name = 'service'

    def __init__(self, shutdown: threading.Event):
        self.shutdown = shutdown
        self.error: Optional[BaseException] = None
        self._thread: Optional[threading.Thread] = None

    def start(self):
        self._bind()
        self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
        self._thread.start()

    def _run(self):
        try:
            self._serve()
        except Exception as e:
            self.error = e
            logger.exception("%s listener failed", self.name)
        finally:
            # A listener that stops, for any reason, stops the whole process
            self.shutdown.set()

    def stop(self, grace: float):
        self._drain(grace)
        if self._thread is not None:
            self._thread.join(grace)
            if self._thread.is_alive():
                logger.warning("%s listener did not stop within %.1fs", self.name, grace)

    def _bind(self):
        raise NotImplementedError

    def _serve(self):
        raise NotImplementedError

    def _drain(self, grace: float):
        raise NotImplementedError


class HttpService(SupervisedService):
    """Django WSGI application on a thread-per-request server."""

    name = 'http'

    def __init__(self, shutdown, *, host: str, port: int):
        super().__init__(shutdown)
        self.host = host
        self.port = port
        self._httpd = None

    def _bind(self):
        self._httpd = ThreadedWSGIServer((self.host, self.port), WSGIRequestHandler)
        self._httpd.set_app(get_internal_wsgi_application())
        logger.info("HTTP server listening on %s:%s", self.host, self.port)

    def _serve(self):
        self._httpd.serve_forever()

    def _drain(self, grace: float):
        if self._httpd is None:
            return
        if self._thread is not None and self._thread.is_alive():
            self._httpd.shutdown()
        self._httpd.server_close()
        logger.info("HTTP server stopped")


class GrpcService(SupervisedService):
    """Read-only PVZService."""

    name = 'grpc'

    def __init__(self, shutdown, *, port: int, max_workers: int):
        super().__init__(shutdown)
        self.port = port
        self.max_workers = max_workers
        self._server = None

    def _bind(self):
        self._server, bound_port = create_server(port=self.port, max_workers=self.max_workers)
        if not bound_port:
            raise OSError(f"Cannot bind gRPC port {self.port}")
        self._server.start()
        logger.info("gRPC server listening on port %s", bound_port)

    def _serve(self):
        self._server.wait_for_termination()

    def _drain(self, grace: float):
        if self._server is None:
            return
        self._server.stop(grace).wait(grace)
        logger.info("gRPC server stopped")


def run_until_shutdown(services: List[SupervisedService], shutdown: threading.Event, grace: float):
    """
    Start services, block until shutdown is requested, then drain them all.

    Returns:
        Errors raised by listeners, empty on a clean stop
    """
    started = []
    try:
        for service in services:
            service.start()
            started.append(service)
        # Short waits keep the main thread responsive to signals
        while not shutdown.wait(0.5):
            pass
    finally:
        shutdown.set()
        for service in reversed(started):
            service.stop(grace)

    return [service.error for service in services if service.error is not None]
