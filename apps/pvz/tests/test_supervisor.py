import threading

import pytest

from apps.pvz.supervisor import SupervisedService, run_until_shutdown


class FakeService(SupervisedService):
    """Listener that records its lifecycle without binding sockets."""

    def __init__(self, shutdown, name, log, fail_on_start=False, stop_on_start=False):
        super().__init__(shutdown)
        self.name = name
        self.log = log
        self.fail_on_start = fail_on_start
        self.stop_on_start = stop_on_start

    def start(self):
        if self.fail_on_start:
            raise OSError(f'{self.name}: address in use')
        self.log.append(('start', self.name))
        if self.stop_on_start:
            self.error = RuntimeError(f'{self.name} died')
            self.shutdown.set()

    def stop(self, grace):
        self.log.append(('stop', self.name))


class TestRunUntilShutdown:

    def test_stops_in_reverse_order(self):
        shutdown = threading.Event()
        log = []
        services = [
            FakeService(shutdown, 'http', log),
            FakeService(shutdown, 'grpc', log, stop_on_start=True),
        ]

        errors = run_until_shutdown(services, shutdown, grace=0.1)

        assert log == [('start', 'http'), ('start', 'grpc'), ('stop', 'grpc'), ('stop', 'http')]
        assert [str(e) for e in errors] == ['grpc died']

    def test_clean_stop_on_signal(self):
        shutdown = threading.Event()
        shutdown.set()
        log = []

        errors = run_until_shutdown([FakeService(shutdown, 'http', log)], shutdown, grace=0.1)

        assert errors == []
        assert log == [('start', 'http'), ('stop', 'http')]

    def test_start_failure_stops_started_services(self):
        shutdown = threading.Event()
        log = []
        services = [
            FakeService(shutdown, 'http', log),
            FakeService(shutdown, 'grpc', log, fail_on_start=True),
        ]

        with pytest.raises(OSError):
            run_until_shutdown(services, shutdown, grace=0.1)

        assert shutdown.is_set()
        assert log == [('start', 'http'), ('stop', 'http')]
