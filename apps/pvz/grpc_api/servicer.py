"""PVZService implementation."""

import logging
import time

import grpc
from django.db import close_old_connections
from google.protobuf import timestamp_pb2

from apps.pvz.services import list_all_pickup_points

from .messages import GetPVZListRequest, GetPVZListResponse, SERVICE_NAME

logger = logging.getLogger(__name__)


class PVZServicer:
    """Serves the unfiltered pickup point list to reporting clients."""

    def GetPVZList(self, request, context):
        started = time.monotonic()
        peer = context.peer() or 'unknown'

        # gRPC worker threads live outside Django's request cycle
        close_old_connections()
        try:
            pickup_points = list(list_all_pickup_points())
        except Exception:
            logger.exception(
                "gRPC GetPVZList from %s failed after %.1f ms",
                peer, (time.monotonic() - started) * 1000,
            )
            context.abort(grpc.StatusCode.INTERNAL, 'failed to list pickup points')
        finally:
            close_old_connections()

        response = GetPVZListResponse()
        for pickup_point in pickup_points:
            registration_date = timestamp_pb2.Timestamp()
            registration_date.FromDatetime(pickup_point.created_at)
            item = response.pvzs.add(id=str(pickup_point.id), city=pickup_point.city)
            item.registration_date.CopyFrom(registration_date)

        logger.info(
            "gRPC GetPVZList from %s returned %d pickup points (%.1f ms)",
            peer, len(response.pvzs), (time.monotonic() - started) * 1000,
        )
        return response


def build_handler(servicer: PVZServicer) -> grpc.GenericRpcHandler:
    """Route PVZService methods to servicer."""
    return grpc.method_handlers_generic_handler(SERVICE_NAME, {
        'GetPVZList': grpc.unary_unary_rpc_method_handler(
            servicer.GetPVZList,
            request_deserializer=GetPVZListRequest.FromString,
            response_serializer=GetPVZListResponse.SerializeToString,
        ),
    })
