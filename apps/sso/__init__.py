"""SSO Auth gRPC gateway."""
