from dataclasses import dataclass, field
from typing import Any, List

from rest_framework import serializers

from marketplace.validation import validate_request


class RpcRequestSerializer(serializers.Serializer):
    """JSON-RPC 2.0 request envelope"""

    jsonrpc = serializers.CharField(required=False, default="2.0")
    method = serializers.CharField(help_text="Command name, e.g. getcategory")
    params = serializers.ListField(required=False, default=list, help_text="Positional command parameters")
    id = serializers.JSONField(required=False, allow_null=True, help_text="Request id echoed in the response")


@dataclass
class RpcRequest:
    method: str
    params: List[Any] = field(default_factory=list)
    id: Any = None

    @classmethod
    def from_data(cls, data: Any) -> "RpcRequest":
        validate_request(RpcRequestSerializer, data)
        return cls(method=data["method"], params=list(data.get("params") or []), id=data.get("id"))
