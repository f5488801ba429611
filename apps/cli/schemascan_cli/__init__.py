"""schemascan command-line interface."""
