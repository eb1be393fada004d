"""
Role based authorization for API Gateway events.

The caller's identity is taken from the authorizer claims that API Gateway
attaches to the request context after validating the Cognito token.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Mapping, Optional, Union

from lifecycle.errors import AuthenticationError, AuthorizationError

if TYPE_CHECKING:
    from lifecycle.context import ContextContainer

GROUPS_CLAIM = 'cognito:groups'


class AuthRole(str, Enum):
    """Roles mapped one to one onto Cognito user pool groups."""
    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"


RoleLike = Union[AuthRole, str]


@dataclass
class UserClaims:
    """User claims forwarded by the API Gateway authorizer."""

    user_id: str
    username: Optional[str] = None
    email: Optional[str] = None
    roles: List[str] = field(default_factory=list)
    custom_claims: Dict[str, Any] = field(default_factory=dict)

    def has_role(self, role: RoleLike) -> bool:
        """Check if user has specific role."""
        return _role_value(role) in self.roles

    def has_any_role(self, roles: Iterable[RoleLike]) -> bool:
        """Check if user has any of the specified roles."""
        return any(self.has_role(role) for role in roles)


def _role_value(role: RoleLike) -> str:
    return role.value if isinstance(role, AuthRole) else str(role)


def _parse_groups(raw_groups: Any) -> List[str]:
    # REST API authorizers flatten list claims into "[admin editor]" or "admin,editor"
    if raw_groups is None:
        return []
    if isinstance(raw_groups, (list, tuple)):
        return [str(group) for group in raw_groups if group]
    return [group for group in re.split(r'[\s,]+', str(raw_groups).strip('[]')) if group]


def _authorizer_claims(event: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
    authorizer = (event.get('requestContext') or {}).get('authorizer') or {}

    # HTTP API (payload v2) JWT authorizer
    jwt_claims = (authorizer.get('jwt') or {}).get('claims')
    if jwt_claims:
        return jwt_claims

    # REST API Cognito authorizer
    return authorizer.get('claims') or None


def extract_user_claims(event: Mapping[str, Any]) -> Optional[UserClaims]:
    """Extract the authenticated user from an API Gateway event."""
    claims = _authorizer_claims(event)
    if not claims or not claims.get('sub'):
        return None

    return UserClaims(
        user_id=claims['sub'],
        username=claims.get('cognito:username') or claims.get('username'),
        email=claims.get('email'),
        roles=_parse_groups(claims.get(GROUPS_CLAIM)),
        custom_claims={key: value for key, value in claims.items() if key.startswith('custom:')},
    )


async def check_access(context: 'ContextContainer', event: Mapping[str, Any], roles: Iterable[RoleLike]) -> None:
    """
    Require the caller to hold at least one of ``roles``.

    Args:
        context: Context container of the current invocation
        event: API Gateway event
        roles: Roles of which the caller needs at least one

    Raises:
        AuthorizationError: If ``roles`` is empty or the caller holds none of them
        AuthenticationError: If the event carries no authorizer claims
    """
    required_roles = [_role_value(role) for role in roles]
    if not required_roles:
        raise AuthorizationError('No role satisfies an empty role requirement')

    user_claims = extract_user_claims(event)
    if user_claims is None:
        raise AuthenticationError()

    if not user_claims.has_any_role(required_roles):
        context.logger.info('Access denied', extra={
            'user_id': user_claims.user_id,
            'required_roles': required_roles,
            'user_roles': user_claims.roles,
        })
        raise AuthorizationError(
            f"User {user_claims.user_id} holds none of the roles {required_roles}",
            required_roles=required_roles,
        )
