"""Auth module public exports."""

from tradesafe.auth.credentials import AuthState, ClientCredentials, Session
from tradesafe.auth.token_manager import TokenManager

__all__ = ["AuthState", "ClientCredentials", "Session", "TokenManager"]
