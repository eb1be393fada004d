"""
Security patterns for Lambda handlers.

Authorization is role based: API Gateway authenticates the caller and forwards
its Cognito groups as authorizer claims, and handlers check those groups
against the roles an operation requires.
"""

from .auth import AuthRole, UserClaims, check_access, extract_user_claims

__all__ = [
    "AuthRole",
    "UserClaims",
    "check_access",
    "extract_user_claims",
]
