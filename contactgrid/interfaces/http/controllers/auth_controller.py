# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, request

from contactgrid.application.use_cases.users.login_user import LoginUserUseCase
from contactgrid.application.use_cases.users.logout_user import LogoutUserUseCase
from contactgrid.application.use_cases.users.register_user import RegisterUserUseCase
from contactgrid.application.use_cases.users.resolve_session import ResolveSessionUseCase
from contactgrid.infrastructure.audit import AuditAction, audit_log
from contactgrid.interfaces.http.contract import contract_endpoint, parse_body, render
from contactgrid.interfaces.http.dto.auth import (
    AuthResponseDTO,
    LoginRequestDTO,
    LogoutResponseDTO,
    RegisterRequestDTO,
)
from contactgrid.interfaces.http.session import (
    clear_session_cookies,
    extract_session_token,
    issue_session_cookies,
)
from contactgrid.shared.errors import AppError
from contactgrid.shared.logging import logger


def _get_client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        resolve_session_use_case: ResolveSessionUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._resolve_session = resolve_session_use_case

    @contract_endpoint(AuthResponseDTO.failure)
    def register(self) -> tuple[Response, int]:
        dto = parse_body(RegisterRequestDTO)
        ip_address = _get_client_ip()

        try:
            user, token = self._register_use_case.execute(
                dto.first_name, dto.last_name, dto.login, dto.password
            )
        except AppError as exc:
            audit_log(
                AuditAction.REGISTER_FAILED,
                ip_address=ip_address,
                details={"login": dto.login, "error": exc.code},
                success=False,
            )
            raise

        audit_log(
            AuditAction.REGISTER,
            user_id=user.id,
            ip_address=ip_address,
            details={"login": dto.login},
            success=True,
        )

        response, status = render(AuthResponseDTO.success(user))
        issue_session_cookies(response, user, token)
        logger.info(f"auth.register: ok user_id={user.id}")
        return response, status

    @contract_endpoint(AuthResponseDTO.failure)
    def login(self) -> tuple[Response, int]:
        dto = parse_body(LoginRequestDTO)
        ip_address = _get_client_ip()

        try:
            user, token = self._login_use_case.execute(dto.login, dto.password)
        except AppError as exc:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"login": dto.login, "error": exc.code},
                success=False,
            )
            raise

        audit_log(
            AuditAction.LOGIN_SUCCESS,
            user_id=user.id,
            ip_address=ip_address,
            details={"login": dto.login},
            success=True,
        )

        response, status = render(AuthResponseDTO.success(user))
        issue_session_cookies(response, user, token)
        logger.info(f"auth.login: ok user_id={user.id}")
        return response, status

    @contract_endpoint(LogoutResponseDTO.failure)
    def logout(self) -> tuple[Response, int]:
        self._logout_use_case.execute(extract_session_token())

        audit_log(AuditAction.LOGOUT, ip_address=_get_client_ip(), success=True)

        response, status = render(LogoutResponseDTO())
        clear_session_cookies(response)
        logger.info("auth.logout: ok")
        return response, status

    @contract_endpoint(AuthResponseDTO.failure)
    def session(self) -> tuple[Response, int]:
        user = self._resolve_session.execute(extract_session_token())
        return render(AuthResponseDTO.success(user))

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/Register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/Login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/Logout", view_func=self.logout, methods=["POST"])
        bp.add_url_rule("/Session", view_func=self.session, methods=["GET"])
        return bp
