"""specval -- Validate OpenAPI/Swagger documents and everything they reference.

This package checks Swagger 2.0 and OpenAPI 3.0/3.1/3.2 documents against
their canonical JSON schemas, follows ``$ref`` pointers into the same
document, neighbouring files, and remote URLs, and validates every resolved
fragment against the schema matching its shape.

Typical workflow::

    specval validate openapi.yaml --strict
    specval validate openapi.yaml --recursive --max-depth 5
    specval report openapi.yaml --format markdown

Or from Python::

    from specval.api import validate_with_references

    result = validate_with_references("openapi.yaml")
    print(result.valid, result.total_documents)

Modules:
    app: Typer application factory and CLI entry point.
    api: High-level validation facade.
    models: Pydantic models shared across the entire package.
    config: XDG-aware configuration and option resolution.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.3.0"
