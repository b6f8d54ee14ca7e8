# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import importlib
from typing import Any, Protocol, cast

from flask import Flask

from contactgrid.infrastructure.container import container
from contactgrid.infrastructure.db import init_db
from contactgrid.interfaces.http.controllers.misc_controller import MiscController
from contactgrid.interfaces.http.session import AUTH_TOKEN_HEADER
from contactgrid.shared.config import load_config
from contactgrid.shared.logging import logger, setup_logging
from contactgrid.shared.middleware.error_handler import configure_error_handling
from contactgrid.shared.middleware.request_logger import configure_request_logging


class _CORSCallable(Protocol):
    def __call__(self, app: Flask, **kwargs: Any) -> Any: ...


_flask_cors = importlib.import_module("flask_cors")
CORS = cast(_CORSCallable, _flask_cors.CORS)


_config = load_config()


def create_app() -> Flask:
    init_db()
    setup_logging(debug_mode=_config.debug_logging)

    app = Flask(__name__)
    configure_error_handling(app)
    configure_request_logging(app)

    app.config.update(SECRET_KEY=_config.secret_key)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/*": {"origins": _config.security.allowed_origins}},
        "expose_headers": [AUTH_TOKEN_HEADER, "X-Request-ID"],
    }
    if any(o != "*" for o in _config.security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)
    app.register_blueprint(MiscController().as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.contacts_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")

        resp.headers.setdefault("Referrer-Policy", "no-referrer")

        resp.headers.setdefault("X-Content-Type-Options", "nosniff")

        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")

        resp.headers.setdefault(
            "Permissions-Policy",
            "geolocation=(), microphone=(), camera=(), payment=(), usb=()",
        )

        if _config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp

    logger.info("Flask app initialized")
    return app


app = create_app()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000, debug=True)
