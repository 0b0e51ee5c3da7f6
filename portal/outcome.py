"""
Outcome classification for identity responses.

Pure functions: no Streamlit, no network. The controllers act on the
returned Outcome.
"""

from dataclasses import dataclass, field
from typing import Any, Union

from portal.identity import AuthResult, ErrorItem


@dataclass(frozen=True)
class Failure:
    errors: list[ErrorItem] = field(default_factory=list)


@dataclass(frozen=True)
class Authenticated:
    user: Any
    session: Any


@dataclass(frozen=True)
class PendingVerification:
    """Sign-up accepted; the provider wants the email confirmed first."""

    email: str
    user: Any = None


Outcome = Union[Failure, Authenticated, PendingVerification]


def classify_sign_in(result: AuthResult) -> Outcome:
    if result.errors:
        return Failure(list(result.errors))
    return Authenticated(result.user, result.session)


def classify_sign_up(result: AuthResult, email: str) -> Outcome:
    if result.errors:
        return Failure(list(result.errors))
    if result.session is not None:
        return Authenticated(result.user, result.session)
    return PendingVerification(email, result.user)


def coerce_errors(items) -> list[ErrorItem]:
    """Normalise a fault's `items` (models, dicts or strings) into ErrorItems."""
    if not isinstance(items, (list, tuple)):
        return []
    errors = []
    for item in items:
        if isinstance(item, ErrorItem):
            errors.append(item)
        elif isinstance(item, dict):
            errors.append(ErrorItem(**{**item, "message": str(item.get("message", ""))}))
        else:
            errors.append(ErrorItem(message=str(item)))
    return errors
