"""
Flask error handlers: domain errors become JSON, nothing leaks a stack trace.
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from ..core.exceptions import BatchError, InvalidStateError, NotFoundError, StoreError, ValidationError

logger = logging.getLogger(__name__)


def _fail(message: str, status: int, **extra):
    body = {"success": False, "message": message}
    body.update(extra)
    return jsonify(body), status


def _validation_error(e: ValidationError):
    return _fail(str(e), 400)


def _not_found(e: NotFoundError):
    return _fail(str(e), 404)


def _invalid_state(e: InvalidStateError):
    return _fail(str(e), 409)


def _batch_error(e: BatchError):
    return _fail(str(e), 502, created=len(e.created), pending=e.pending)


def _store_error(e: StoreError):
    logger.error("Store error: %s", e, exc_info=True)
    return _fail("Lỗi lưu trữ dữ liệu, vui lòng thử lại", 503)


def _unexpected(e: Exception):
    if isinstance(e, HTTPException):
        return e
    logger.exception("Unhandled exception: %s", e)
    return _fail("Lỗi hệ thống", 500)


def register_error_handlers(app: Flask) -> None:
    app.register_error_handler(ValidationError, _validation_error)
    app.register_error_handler(NotFoundError, _not_found)
    app.register_error_handler(InvalidStateError, _invalid_state)
    app.register_error_handler(BatchError, _batch_error)
    app.register_error_handler(StoreError, _store_error)
    app.register_error_handler(Exception, _unexpected)
