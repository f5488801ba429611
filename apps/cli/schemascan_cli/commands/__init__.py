"""schemascan CLI commands package.

- classify: Map a type name onto its JSON schema kind
- describe: Extract a property description from generated component JSON
- options: List the option rows of an endpoint explain document
"""
