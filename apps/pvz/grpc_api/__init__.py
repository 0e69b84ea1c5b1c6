"""Read-only gRPC reporting interface (`pvz.v1.PVZService`)."""

from .messages import PVZ, GetPVZListRequest, GetPVZListResponse, SERVICE_NAME
from .servicer import PVZServicer, build_handler
from .server import create_server

__all__ = [
    'PVZ',
    'GetPVZListRequest',
    'GetPVZListResponse',
    'SERVICE_NAME',
    'PVZServicer',
    'build_handler',
    'create_server',
]
