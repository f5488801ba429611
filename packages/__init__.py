"""schemascan library packages."""
