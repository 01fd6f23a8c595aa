"""Public storefront exports."""

from storefront.accounts import api_authenticator, simulated_authenticator
from storefront.client import BeatCrestClient
from storefront.signup import SignupFormController, SignupView
from storefront.types import FormFields, Mode, PurchaseContext, UserIdentity

__all__ = [
    "BeatCrestClient",
    "FormFields",
    "Mode",
    "PurchaseContext",
    "SignupFormController",
    "SignupView",
    "UserIdentity",
    "api_authenticator",
    "simulated_authenticator",
]
