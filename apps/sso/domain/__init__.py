"""SSO Domain Layer."""
