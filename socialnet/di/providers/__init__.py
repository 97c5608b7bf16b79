from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .service_provider import ServiceProvider
from .auth_provider import AuthProvider
from .user_provider import UserProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "ServiceProvider",
    "AuthProvider",
    "UserProvider",
]
