"""gRPC server factory."""

from concurrent import futures
from typing import Tuple

import grpc

from .servicer import PVZServicer, build_handler


def create_server(*, port: int, max_workers: int = 10, host: str = '[::]') -> Tuple[grpc.Server, int]:
    """
    Build an unstarted gRPC server serving PVZService.

    Returns:
        (server, bound_port); bound_port differs from port when port is 0
    """
    server = grpc.server(futures.ThreadPoolExecutor(max_workers=max_workers))
    server.add_generic_rpc_handlers((build_handler(PVZServicer()),))
    bound_port = server.add_insecure_port(f'{host}:{port}')
    return server, bound_port
