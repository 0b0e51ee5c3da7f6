"""
Form state for the sign-in and sign-up views.

Each view keeps one FormState in st.session_state under "form:<view>".
The router drops every form on navigation, so inputs and banners never
outlive the view they belong to.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import MutableMapping, Optional

import streamlit as st

from portal.identity import ErrorItem

FORM_PREFIX = "form:"


class Status(Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    AWAITING_VERIFICATION = "awaiting_verification"


@dataclass
class FormState:
    email: str = ""
    password: str = ""
    name: str = ""
    status: Status = Status.IDLE
    errors: list[ErrorItem] = field(default_factory=list)
    success: str = ""

    @property
    def loading(self) -> bool:
        return self.status is Status.IN_FLIGHT

    def begin(self) -> None:
        self.status = Status.IN_FLIGHT
        self.errors = []
        self.success = ""

    def fail(self, errors: list[ErrorItem]) -> None:
        self.status = Status.FAILED
        self.errors = list(errors)
        self.success = ""

    def await_verification(self, message: str) -> None:
        self.status = Status.AWAITING_VERIFICATION
        self.errors = []
        self.success = message

    def succeed(self) -> None:
        self.status = Status.SUCCEEDED


def _state(state: Optional[MutableMapping]) -> MutableMapping:
    return st.session_state if state is None else state


def get_form(view: str, state: Optional[MutableMapping] = None) -> FormState:
    """Return the view's FormState, creating an empty one on first use."""
    state = _state(state)
    key = FORM_PREFIX + view
    if key not in state:
        state[key] = FormState()
    return state[key]


def discard_forms(state: Optional[MutableMapping] = None) -> None:
    state = _state(state)
    for key in [k for k in state.keys() if str(k).startswith(FORM_PREFIX)]:
        del state[key]
