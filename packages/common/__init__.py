"""Common utilities for schemascan: configuration, logging and tracing."""
