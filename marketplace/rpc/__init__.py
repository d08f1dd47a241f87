"""
JSON-RPC command layer.

``RpcView`` receives ``{"method", "params", "id"}`` envelopes, resolves the
command through ``CommandRegistry`` and returns the serialized result.
"""
