# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Helpers for the JSON endpoints that always answer 200 with an ``error`` field."""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import TypeVar

from flask import Response, jsonify, request
from pydantic import BaseModel, ValidationError

from contactgrid.shared.errors import AppError
from contactgrid.shared.errors import ValidationError as RequestValidationError
from contactgrid.shared.errors.validation import raise_validation_error
from contactgrid.shared.logging import logger

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_body(model: type[ModelT]) -> ModelT:
    payload = request.get_json(silent=True, force=True)
    if not isinstance(payload, dict):
        raise RequestValidationError(message="Request body must be a JSON object")
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise_validation_error(exc)


def render(body: BaseModel, status: int = 200) -> tuple[Response, int]:
    return jsonify(body.model_dump(by_alias=True)), status


def contract_endpoint(failure: Callable[[str], BaseModel]):
    """Turn any ``AppError`` raised by the view into ``failure(message)`` with 200."""

    def decorator(f: Callable):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except AppError as exc:
                logger.info(f"{request.path}: rejected code={exc.code}")
                return render(failure(exc.describe()))

        return wrapper

    return decorator


__all__ = ["contract_endpoint", "parse_body", "render"]
