"""Authentication against the external identity provider."""
