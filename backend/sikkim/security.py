"""
Sikkim Tourism Backend — Admin Token Gate
===========================================

What:  FastAPI dependency protecting the admin endpoints.
How:   Reads the token from the X-ADMIN-TOKEN header, falling back to the
       `admin_token` query parameter, and compares it to the configured
       secret with plain string equality.
Who:   Attached to protected routes via `dependencies=[Depends(require_admin)]`.
When:  Before the request body is parsed and before a database session opens.

Limitations:
    - Single shared secret, no per-user identity.
    - Equality is not constant-time.
    - The query-parameter form leaks the token into access logs and browser
      history; prefer the header.
"""

import logging
from typing import Optional

from fastapi import Depends, Header, Query, Request

from sikkim.config import Settings
from sikkim.exceptions import AuthorizationError
from sikkim.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

ADMIN_TOKEN_HEADER = "X-ADMIN-TOKEN"
ADMIN_TOKEN_QUERY = "admin_token"


def get_app_settings(request: Request) -> Settings:
    """The Settings instance the running application was built with."""
    return request.app.state.settings


async def require_admin(
    header_token: Optional[str] = Header(default=None, alias=ADMIN_TOKEN_HEADER),
    query_token: Optional[str] = Query(default=None, alias=ADMIN_TOKEN_QUERY),
    settings: Settings = Depends(get_app_settings),
) -> None:
    """
    Reject the request unless the supplied token equals `settings.admin_token`.

    Raises:
        AuthorizationError: token absent or different (→ 401 {"error": "unauthorized"})
    """
    token = header_token or query_token
    if not token or token != settings.admin_token:
        logger.warning(
            "[%s] Rejected admin request (%s)",
            request_id_var.get(""),
            "no token" if not token else "token mismatch",
        )
        raise AuthorizationError()
