import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from marketplace.api.serializers.response_serializers import RpcResponseSerializer
from marketplace.container import ServiceContainer

from .registry import CommandRegistry
from .request import RpcRequest, RpcRequestSerializer


logger = logging.getLogger(__name__)


class RpcView(APIView):
    """
    JSON-RPC endpoint.

    Every request gets its own service container, so no service state is
    shared between requests. Marketplace exceptions raised by commands are
    rendered by ``marketplace_exception_handler`` through ``rpc_error``.
    """

    permission_classes = [AllowAny]

    def get_registry(self) -> CommandRegistry:
        return CommandRegistry.default(ServiceContainer())

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        self.rpc_id = None

    @extend_schema(
        summary="Execute an RPC command",
        description="Run a marketplace command, e.g. `getcategory`, `updatepaymentinformation` or `help`.",
        request=RpcRequestSerializer,
        responses={
            200: RpcResponseSerializer,
            400: OpenApiResponse(response=RpcResponseSerializer, description="Invalid request or parameters"),
            404: OpenApiResponse(response=RpcResponseSerializer, description="Unknown method or missing entity"),
        },
    )
    def post(self, request):
        if isinstance(request.data, dict):
            self.rpc_id = request.data.get("id")

        rpc_request = RpcRequest.from_data(request.data)
        command = self.get_registry().get(rpc_request.method)

        logger.info(f"RPC {rpc_request.method} called with {len(rpc_request.params)} params")
        result = command.execute(rpc_request)

        return Response(self.rpc_result(command.serialize(result)), status=status.HTTP_200_OK)

    def rpc_result(self, result):
        return {"jsonrpc": "2.0", "id": self.rpc_id, "result": result}

    def rpc_error(self, error):
        return {"jsonrpc": "2.0", "id": getattr(self, "rpc_id", None), "error": error}
