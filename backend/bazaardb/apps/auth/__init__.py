"""
Auth module.

Issues bearer tokens for the operator account.
"""

from .router import router as auth_router  # noqa: F401
