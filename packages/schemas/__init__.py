"""Schema models and JSON schema kind classification."""
