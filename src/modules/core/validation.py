"""Declarative request validation and the input-error gate.

A ``FieldRule`` binds an ordered chain of ``Check`` objects to one field
of a request location (path ``params`` or JSON ``body``).  Every check of
every rule is evaluated: rules never fail fast, so an absent field
contributes one violation per declared check.

``validate_request`` wires a rule set in front of a DRF view method:

1. build a ``RequestContext`` from the request and the URL kwargs;
2. run each rule, accumulating ``Violation`` records on the context;
3. gate: if any violation exists, answer 400 ``{"errors": [...]}`` and
   stop; otherwise call the handler with the context.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Callable, Dict, Iterable, List, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

logger = structlog.get_logger(__name__)

PARAMS = "params"
BODY = "body"


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

_INT_RE = re.compile(r"^[-+]?[0-9]+$")
_NUMERIC_RE = re.compile(r"^[-+]?([0-9]*[.])?[0-9]+$")


# ---------------------------------------------------------------------------
# Violations and the per-request context
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Violation:
    """One failed check for one field."""

    path: str
    location: str
    msg: str
    value: Any = MISSING

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": "field"}
        if self.value is not MISSING:
            data["value"] = self.value
        data.update(msg=self.msg, path=self.path, location=self.location)
        return data


@dataclass
class RequestContext:
    """Path params, parsed body and accumulated violations of one request."""

    params: Dict[str, Any] = field(default_factory=dict)
    body: Dict[str, Any] = field(default_factory=dict)
    errors: List[Violation] = field(default_factory=list)

    @classmethod
    def from_request(cls, request: Request, params: Mapping) -> RequestContext:
        data = request.data
        # A JSON array or scalar body carries no fields.
        body = dict(data.items()) if isinstance(data, Mapping) else {}
        return cls(params=dict(params), body=body)

    def lookup(self, location: str, name: str) -> Any:
        source = self.params if location == PARAMS else self.body
        return source.get(name, MISSING)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def _as_text(value: Any) -> str:
    """Text form of a scalar; absent, null and structured values read as ''."""
    if value is MISSING or value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float, Decimal)):
        return str(value)
    return ""


def is_int(value: Any) -> bool:
    return bool(_INT_RE.match(_as_text(value)))


def is_numeric(value: Any) -> bool:
    return bool(_NUMERIC_RE.match(_as_text(value)))


def not_empty(value: Any) -> bool:
    return _as_text(value).strip() != ""


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_positive(value: Any) -> bool:
    return Decimal(_as_text(value)) > 0


Predicate = Callable[[Any], bool]


@dataclass(frozen=True)
class Check:
    predicate: Predicate
    message: str

    def passes(self, value: Any) -> bool:
        # A predicate that cannot evaluate the value counts as a failure.
        try:
            return bool(self.predicate(value))
        except (TypeError, ValueError, ArithmeticError):
            return False


class FieldRule:
    """Ordered chain of checks for a single request field.

    Built fluently::

        body("price").is_numeric("Bad").not_empty("Required")
    """

    def __init__(self, location: str, name: str) -> None:
        self.location = location
        self.name = name
        self.checks: List[Check] = []

    def __repr__(self) -> str:
        return f"FieldRule({self.location}.{self.name}, checks={len(self.checks)})"

    def custom(self, predicate: Predicate, message: str) -> FieldRule:
        self.checks.append(Check(predicate, message))
        return self

    def is_int(self, message: str) -> FieldRule:
        return self.custom(is_int, message)

    def is_numeric(self, message: str) -> FieldRule:
        return self.custom(is_numeric, message)

    def not_empty(self, message: str) -> FieldRule:
        return self.custom(not_empty, message)

    def is_boolean(self, message: str) -> FieldRule:
        return self.custom(is_boolean, message)

    def evaluate(self, ctx: RequestContext) -> List[Violation]:
        value = ctx.lookup(self.location, self.name)
        return [
            Violation(path=self.name, location=self.location, msg=check.message, value=value)
            for check in self.checks
            if not check.passes(value)
        ]


def param(name: str) -> FieldRule:
    return FieldRule(PARAMS, name)


def body(name: str) -> FieldRule:
    return FieldRule(BODY, name)


# ---------------------------------------------------------------------------
# Rule evaluation and the input-error gate
# ---------------------------------------------------------------------------


def run_rules(ctx: RequestContext, rules: Iterable[FieldRule]) -> RequestContext:
    """Evaluate every rule in declaration order, accumulating violations."""
    for rule in rules:
        ctx.errors.extend(rule.evaluate(ctx))
    return ctx


def invalid_request_response(violations: Iterable[Violation]) -> Response:
    return Response(
        {"errors": [violation.to_dict() for violation in violations]},
        status=status.HTTP_400_BAD_REQUEST,
    )


def handle_input_errors(ctx: RequestContext) -> Optional[Response]:
    """Return a 400 response when the context holds violations, else ``None``."""
    if not ctx.has_errors:
        return None
    logger.info(
        "request.validation_failed",
        fields=[violation.path for violation in ctx.errors],
        count=len(ctx.errors),
    )
    return invalid_request_response(ctx.errors)


def violations_from_pydantic(
    exc: PydanticValidationError, location: str = BODY
) -> List[Violation]:
    """Translate a pydantic ``ValidationError`` into request violations."""
    violations = []
    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"]) or location
        cause = error.get("ctx", {}).get("error")
        msg = str(cause) if error["type"] == "value_error" and cause else error["msg"]
        value = error.get("input", MISSING)
        if isinstance(value, Mapping):
            value = MISSING
        violations.append(Violation(path=path, location=location, msg=msg, value=value))
    return violations


def validate_request(*rules: FieldRule):
    """Decorate a view method with a rule set followed by the input-error gate.

    The wrapped method is called as ``handler(view, request, ctx)`` only
    when no rule produced a violation.
    """

    def decorator(handler):
        @functools.wraps(handler)
        def wrapper(view, request: Request, *args, **kwargs) -> Response:
            ctx = run_rules(RequestContext.from_request(request, kwargs), rules)
            rejection = handle_input_errors(ctx)
            if rejection is not None:
                return rejection
            return handler(view, request, ctx)

        return wrapper

    return decorator
