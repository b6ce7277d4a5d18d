"""
Admin authentication helpers.

All mutating routes are protected by a single shared secret configured
through ``ADMIN_TOKEN``.  Clients send it as a bearer credential; the
comparison is done in constant time on the UTF‑8 bytes of both values.
"""

import hmac
import logging
from typing import Any, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from fastapi.security.utils import get_authorization_scheme_param

from .errors import AuthenticationRequired, InvalidCredential

logger = logging.getLogger(__name__)


def tokens_match(supplied: Any, expected: str) -> bool:
    """Compare ``supplied`` with ``expected`` in constant time.

    Anything that is not a string, or cannot be encoded as UTF‑8,
    never matches.
    """
    if not isinstance(supplied, str):
        return False
    try:
        supplied_bytes = supplied.encode("utf-8")
        expected_bytes = expected.encode("utf-8")
    except UnicodeEncodeError:
        return False
    if len(supplied_bytes) != len(expected_bytes):
        return False
    return hmac.compare_digest(supplied_bytes, expected_bytes)


security = HTTPBearer(auto_error=False)


def require_admin(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """Dependency that lets the request through only with the admin token.

    A request without an ``Authorization`` header, or with an empty
    bearer credential, gets HTTP 401.  A header that is not a bearer
    credential, or carries the wrong token, gets HTTP 403.
    """
    if credentials is None:
        header = request.headers.get("authorization")
        scheme, token = get_authorization_scheme_param(header)
        if scheme.lower() == "bearer" and not token.strip():
            raise AuthenticationRequired()
        if header:
            logger.warning("Rejected malformed Authorization header from %s", client_address(request))
            raise InvalidCredential()
        raise AuthenticationRequired()
    if not tokens_match(credentials.credentials, request.app.state.settings.admin_token):
        logger.warning("Rejected invalid admin token from %s", client_address(request))
        raise InvalidCredential()
    return credentials.credentials


def client_address(request: Request) -> str:
    if request.client is None:
        return "unknown"
    return request.client.host
