"""
Submission controllers for the sign-in and sign-up views.

Each controller issues exactly one identity call per submit, classifies
the response and applies the effects: form flags, auth store writes and
navigation. Nothing raised by the identity client escapes submit().
"""

import logging
from typing import Callable

from portal.auth import AuthStore
from portal.forms import FormState
from portal.identity import IdentityClient
from portal.outcome import (
    Authenticated,
    Failure,
    Outcome,
    PendingVerification,
    classify_sign_in,
    classify_sign_up,
    coerce_errors,
)
from portal.router import PROFILE_PATH

logger = logging.getLogger(__name__)


def verification_message(email: str) -> str:
    return f"We sent a verification link to {email}"


class _SubmissionController:
    def __init__(
        self,
        client: IdentityClient,
        store: AuthStore,
        navigate: Callable[[str], None],
        form: FormState,
    ):
        self.client = client
        self.store = store
        self.navigate = navigate
        self.form = form

    def _enter(self, action: str, email: str) -> bool:
        """Move the form to InFlight; False if a submission is already running."""
        if self.form.loading:
            logger.debug("Ignoring %s for %s: submission already in flight", action, email)
            return False
        logger.info("%s requested for %s", action, email)
        self.form.begin()
        return True

    def _fault(self, action: str, exc: Exception) -> None:
        logger.warning("%s failed for transport reasons", action, exc_info=exc)
        self.form.fail(coerce_errors(getattr(exc, "items", None)))

    def _apply(self, outcome: Outcome) -> None:
        if isinstance(outcome, Failure):
            logger.info("Rejected with %d error(s)", len(outcome.errors))
            self.form.fail(outcome.errors)
        elif isinstance(outcome, Authenticated):
            self.store.set_user(outcome.user)
            self.store.set_session(outcome.session)
            self.form.succeed()
            self.navigate(PROFILE_PATH)
        elif isinstance(outcome, PendingVerification):
            logger.info("Awaiting email verification for %s", outcome.email)
            self.form.await_verification(verification_message(outcome.email))


class SignInController(_SubmissionController):
    async def submit(self, email: str, password: str) -> None:
        if not self._enter("Sign-in", email):
            return
        try:
            result = await self.client.sign_in_with_email(email, password)
        except Exception as exc:
            self._fault("Sign-in", exc)
            return
        self._apply(classify_sign_in(result))


class SignUpController(_SubmissionController):
    async def submit(self, email: str, password: str, name: str) -> None:
        if not self._enter("Sign-up", email):
            return
        try:
            result = await self.client.sign_up_with_email(email, password, name)
        except Exception as exc:
            self._fault("Sign-up", exc)
            return
        self._apply(classify_sign_up(result, email))
