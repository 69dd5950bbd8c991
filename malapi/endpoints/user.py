"""User information endpoint."""

from __future__ import annotations

from ..models import UserInfo
from ..runtime.runner import RestEndpointSpec
from .common import ModelAdapter, fields_query

# The API only serves the authenticated user's own profile
USER_INFO = RestEndpointSpec(
    id="user_info",
    method="GET",
    build_path=lambda p: "/users/@me",
    build_query=fields_query,
    requires_user=True,
)

user_info = ModelAdapter(UserInfo)
