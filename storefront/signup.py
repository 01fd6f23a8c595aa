"""Signup/login form controller that hands new accounts off to payment."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from uuid import uuid4

import structlog

from storefront.exceptions import SignupStateError, SignupValidationError
from storefront.types import (
    IDLE,
    SUBMITTING,
    Authenticator,
    Failed,
    FormFields,
    Mode,
    PaymentContinuation,
    PurchaseContext,
    SubmissionState,
    Submitting,
    UserIdentity,
)

MIN_PASSWORD_LENGTH = 6
PASSWORD_MISMATCH = "Passwords do not match"
PASSWORD_TOO_SHORT = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
GENERIC_FAILURE = "An error occurred"

_SIGNUP_FIELDS = ("full_name", "username", "phone", "email", "password", "confirm_password")
_LOGIN_FIELDS = ("email", "password")

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SignupView:
    """Render-ready snapshot of an open signup form."""

    heading: str
    subtitle: str | None
    visible_fields: tuple[str, ...]
    submit_label: str
    submit_disabled: bool
    toggle_label: str
    error: str | None


def validate_form(mode: Mode, form: FormFields) -> None:
    """Raise SignupValidationError for the first failing local check."""
    if mode is Mode.SIGN_UP and form.password != form.confirm_password:
        raise SignupValidationError(PASSWORD_MISMATCH)
    if len(form.password) < MIN_PASSWORD_LENGTH:
        raise SignupValidationError(PASSWORD_TOO_SHORT)


def _default_identity_id() -> str:
    return uuid4().hex


def _failure_reason(exc: Exception) -> str:
    """Extract a human-readable reason from a collaborator error."""
    detail = getattr(exc, "detail", None)
    if isinstance(detail, Mapping):
        detail = detail.get("error") or detail.get("detail")
    reason = str(detail) if detail else str(exc)
    return reason.strip() or GENERIC_FAILURE


class SignupFormController:
    """Own signup form state and drive submission through to payment.

    The remote account call is the only suspension point. Closing the form
    while it is pending bumps the submission generation, so the eventual
    result is dropped without touching state or invoking the continuation.
    """

    def __init__(
        self,
        authenticate: Authenticator,
        on_proceed_to_payment: PaymentContinuation,
        on_close: Callable[[], None] | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._authenticate = authenticate
        self._on_proceed_to_payment = on_proceed_to_payment
        self._on_close = on_close
        self._id_factory = id_factory or _default_identity_id
        self._mode = Mode.SIGN_UP
        self._fields = FormFields()
        self._submission: SubmissionState = IDLE
        self._is_open = False
        self._purchase_context: PurchaseContext | None = None
        self._generation = 0

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def fields(self) -> FormFields:
        return self._fields

    @property
    def submission(self) -> SubmissionState:
        return self._submission

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def purchase_context(self) -> PurchaseContext | None:
        return self._purchase_context

    @property
    def is_submitting(self) -> bool:
        return isinstance(self._submission, Submitting)

    @property
    def required_fields(self) -> tuple[str, ...]:
        """Fields the form marks as required in the current mode."""
        return _SIGNUP_FIELDS if self._mode is Mode.SIGN_UP else _LOGIN_FIELDS

    def open(self, purchase_context: PurchaseContext | None = None) -> None:
        """Show the form, keeping any values already entered."""
        if purchase_context is not None:
            self._purchase_context = purchase_context
        if self._is_open:
            return
        self._is_open = True
        logger.info(
            "signup_opened",
            mode=self._mode.value,
            beat_id=self._purchase_context.beat_id if self._purchase_context else None,
        )

    def close(self) -> None:
        """Hide the form from any state; pending results are discarded."""
        self._generation += 1
        if isinstance(self._submission, Submitting):
            self._submission = IDLE
        self._is_open = False
        if self._on_close is not None:
            self._on_close()

    def set_field(self, name: str, value: str) -> None:
        """Update a single form input."""
        self._fields = self._fields.with_value(name, value)

    def toggle_mode(self) -> None:
        """Switch between signup and login without clearing any field."""
        if self.is_submitting:
            raise SignupStateError("Submission already in progress.", "submission_in_progress")
        self._mode = self._mode.toggled()

    async def submit(self) -> None:
        """Validate, call the account collaborator, then continue to payment."""
        if not self._is_open:
            raise SignupStateError("Signup form is not open.", "form_closed")
        if self.is_submitting:
            raise SignupStateError("Submission already in progress.", "submission_in_progress")

        self._submission = SUBMITTING
        self._generation += 1
        generation = self._generation
        mode = self._mode
        form = self._fields

        try:
            validate_form(mode, form)
        except SignupValidationError as exc:
            self._submission = Failed(exc.reason)
            logger.info("signup_rejected", mode=mode.value, reason=exc.reason)
            return

        logger.info("signup_submitted", mode=mode.value)
        try:
            await self._authenticate(mode, form)
        except asyncio.CancelledError:
            if generation == self._generation:
                self._submission = IDLE
            raise
        except Exception as exc:
            if generation != self._generation:
                logger.info("signup_result_discarded", mode=mode.value, outcome="failure")
                return
            reason = _failure_reason(exc)
            self._submission = Failed(reason)
            logger.warning("signup_failed", mode=mode.value, reason=reason)
            return

        if generation != self._generation:
            logger.info("signup_result_discarded", mode=mode.value, outcome="success")
            return

        identity = UserIdentity(
            id=self._id_factory(),
            username=form.username,
            email=form.email,
            full_name=form.full_name,
            phone=form.phone,
        )
        self._submission = IDLE
        self.close()
        logger.info("signup_succeeded", mode=mode.value, user_id=identity.id)
        self._on_proceed_to_payment(identity)

    def view(self) -> SignupView | None:
        """Return what the form should display, or None while hidden."""
        if not self._is_open:
            return None
        is_login = self._mode is Mode.LOG_IN
        context = self._purchase_context
        subtitle = None
        if context is not None:
            subtitle = f'To purchase "{context.title}" by {context.producer_name}'
        if self.is_submitting:
            submit_label = "Processing..."
        else:
            submit_label = "Sign In" if is_login else "Create Account & Continue"
        return SignupView(
            heading="Sign In" if is_login else "Create Account",
            subtitle=subtitle,
            visible_fields=self.required_fields,
            submit_label=submit_label,
            submit_disabled=self.is_submitting,
            toggle_label=(
                "Don't have an account? Sign up"
                if is_login
                else "Already have an account? Sign in"
            ),
            error=self._submission.reason if isinstance(self._submission, Failed) else None,
        )
