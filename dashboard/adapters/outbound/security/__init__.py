# dashboard/adapters/outbound/security/__init__.py

from dashboard.adapters.outbound.security.password_hasher import PasswordHasher
from dashboard.adapters.outbound.security.token_manager import TokenManager

__all__ = ["PasswordHasher", "TokenManager"]
