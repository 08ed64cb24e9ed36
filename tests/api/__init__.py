"""HTTP-level tests of the auth and user APIs."""
