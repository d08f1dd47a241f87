"""DRF exception handler that renders marketplace exceptions."""

import logging

from rest_framework.response import Response
from rest_framework.views import exception_handler

from marketplace.exceptions import MarketplaceException


logger = logging.getLogger(__name__)


def marketplace_exception_handler(exc, context):
    """
    Render MarketplaceException subclasses with their own status code.

    Views that speak JSON-RPC (they define ``rpc_error``) get the error wrapped
    in a JSON-RPC envelope; other views get ``{"error": {...}}``. Everything
    else is left to DRF's default handler.
    """
    if not isinstance(exc, MarketplaceException):
        return exception_handler(exc, context)

    view = context.get("view")
    logger.info(f"{type(exc).__name__} in {type(view).__name__ if view else 'unknown view'}: {exc.message}")

    if hasattr(view, "rpc_error"):
        data = view.rpc_error(exc.to_dict())
    else:
        data = {"error": exc.to_dict()}
    return Response(data, status=exc.status_code)
