"""SSO Application Layer."""

from apps.sso.application.gateway import AuthGateway
from apps.sso.application.outcome import Outcome, OutcomeKind, OutcomeTranslator

__all__ = [
    "AuthGateway",
    "Outcome",
    "OutcomeKind",
    "OutcomeTranslator",
]
