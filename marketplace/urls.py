from django.urls import path

from .rpc.views import RpcView


app_name = "marketplace"

urlpatterns = [
    path("rpc/", RpcView.as_view(), name="rpc"),
]
