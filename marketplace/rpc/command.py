"""
RPC command base class.

A command is a thin adapter between one JSON-RPC method and one service
call: it reads positional parameters, calls the service and shapes the result
with its response serializer. It holds no business rules of its own.
"""

import logging
from typing import Any, Optional, Type

from rest_framework import serializers

from marketplace.exceptions import ValidationException

from .request import RpcRequest


_MISSING = object()


class RpcCommand:
    name: str = ""
    response_serializer_class: Optional[Type[serializers.BaseSerializer]] = None
    many = False

    def __init__(self):
        self.log = logging.getLogger(self.__class__.__module__ + "." + self.__class__.__name__)

    def execute(self, request: RpcRequest) -> Any:
        raise NotImplementedError

    def help(self) -> str:
        return f"{self.name}"

    def serialize(self, result: Any) -> Any:
        if self.response_serializer_class is None or result is None:
            return result
        return self.response_serializer_class(result, many=self.many).data

    def param(self, request: RpcRequest, index: int, default: Any = _MISSING) -> Any:
        """Return positional parameter ``index``; missing required ones raise ValidationException."""
        if index < len(request.params) and request.params[index] is not None:
            return request.params[index]
        if default is not _MISSING:
            return default
        raise ValidationException(
            "Request body is not valid",
            [{"field": f"params.{index}", "message": "This parameter is required."}],
        )

    def id_param(self, request: RpcRequest, index: int) -> int:
        """Return positional parameter ``index`` as a row id; anything but a JSON integer is rejected."""
        value = self.param(request, index)
        # bool is an int subclass but never a valid id
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        raise ValidationException(
            "Request body is not valid",
            [{"field": f"params.{index}", "message": "Expected a numeric id"}],
        )
