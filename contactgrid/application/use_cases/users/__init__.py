from .login_user import LoginUserUseCase
from .logout_user import LogoutUserUseCase
from .register_user import RegisterUserUseCase
from .resolve_session import ResolveSessionUseCase, ensure_same_user

__all__ = [
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "RegisterUserUseCase",
    "ResolveSessionUseCase",
    "ensure_same_user",
]
