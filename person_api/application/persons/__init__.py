"""Use cases for the persons bounded context."""
