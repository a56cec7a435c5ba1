# -*- coding: utf-8 -*-
"""Result types returned across module boundaries, and response bodies.

Expected outcomes ("parameter absent", "bad request") travel as values, not
exceptions. Host failures still raise and are caught by the route handlers.
"""
from collections import namedtuple


class Found(namedtuple('Found', 'value canonical_name stage owner field')):
    """A resolved parameter.

    ``stage`` is "category", "shared" or "generic"; ``owner`` is the element
    (instance or type) the value was read from and ``field`` the Field used.
    """
    ok = True


class NotFound(namedtuple('NotFound', 'key tried')):
    """The key did not resolve. ``tried`` lists the names probed."""
    ok = False


class Invalid(namedtuple('Invalid', 'message')):
    """The request or key is malformed and must be rejected."""
    ok = False


def success_response(message, **extra):
    body = {"success": True, "message": message}
    body.update(extra)
    return body


def failure_response(message, **extra):
    body = {"success": False, "message": message}
    body.update(extra)
    return body
