"""High-level validation API.

These functions tie the loader, validators and reporter together and are
what the CLI commands call. Each takes an optional
:class:`~specval.models.GlobalConfig`; when omitted the built-in defaults
are used, so library callers never touch the user's config files unless
they ask for it via :func:`specval.config.resolve_config`.

Example::

    from specval.api import validate, validate_with_references

    result = validate("openapi.yaml")
    deep = validate_with_references("openapi.yaml")
    print(result.valid, deep.total_documents)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union, overload

from specval.exceptions import SpecvalError
from specval.models import (
    SUPPORTED_VERSIONS,
    GlobalConfig,
    ParsedSpec,
    RecursiveValidationResult,
    ReferenceAnalysis,
    ReportOptions,
    ValidationIssue,
    ValidationOptions,
    ValidationResult,
)
from specval.output import print_data
from specval.parser.loader import parse_spec
from specval.report import generate_report, save_report
from specval.validation.document import validate_spec
from specval.validation.recursive import (
    analyze_references,
    validate_multiple_recursively,
    validate_recursively,
)

logger = logging.getLogger(__name__)


def _options(options: Optional[ValidationOptions], config: GlobalConfig) -> ValidationOptions:
    return options if options is not None else config.validation


@overload
def validate(
    source: str,
    options: Optional[ValidationOptions] = None,
    config: Optional[GlobalConfig] = None,
) -> ValidationResult: ...


@overload
def validate(
    source: list[str],
    options: Optional[ValidationOptions] = None,
    config: Optional[GlobalConfig] = None,
) -> list[ValidationResult]: ...


def validate(
    source: Union[str, list[str]],
    options: Optional[ValidationOptions] = None,
    config: Optional[GlobalConfig] = None,
) -> Union[ValidationResult, list[ValidationResult]]:
    """Parse and validate one document, or each of a list of documents.

    With ``options.recursive`` set, the referenced fragments are validated
    too and their issues are merged into the returned result.

    Args:
        source: A file path, URL or ``-``, or a list of them.
        options: Validation options. Defaults to ``config.validation``.
        config: Configuration supplying defaults and the HTTP timeout.

    Returns:
        A single result for a single source. For a list, one result per
        source in the same order; a source that fails to load or parse
        yields an invalid result instead of raising.

    Raises:
        SpecvalError: For a single source that cannot be loaded, parsed or
            matched to a schema.
    """
    config = config or GlobalConfig()
    options = _options(options, config)

    if isinstance(source, list):
        results: list[ValidationResult] = []
        for item in source:
            try:
                results.append(_validate_single(item, options, config))
            except SpecvalError as exc:
                logger.warning("Failed to validate %s: %s", item, exc)
                results.append(
                    ValidationResult(
                        valid=False,
                        errors=[
                            ValidationIssue(
                                path="/", message=f"Failed to parse specification: {exc}"
                            )
                        ],
                        spec={},
                        version=config.default_version,
                    )
                )
        return results

    return _validate_single(source, options, config)


def _validate_single(
    source: str, options: ValidationOptions, config: GlobalConfig
) -> ValidationResult:
    if options.recursive:
        deep = validate_recursively(source, options, timeout=config.http.timeout)
        return ValidationResult(
            valid=deep.valid,
            errors=deep.errors,
            warnings=deep.warnings,
            spec=deep.spec,
            version=deep.version,
        )

    parsed = parse_spec(source, timeout=config.http.timeout)
    return validate_spec(parsed.spec, parsed.version, options)


def parse(source: str, config: Optional[GlobalConfig] = None) -> ParsedSpec:
    """Load and parse *source* without validating it."""
    config = config or GlobalConfig()
    return parse_spec(source, timeout=config.http.timeout)


def validate_with_references(
    source: str,
    options: Optional[ValidationOptions] = None,
    config: Optional[GlobalConfig] = None,
) -> RecursiveValidationResult:
    """Validate *source* and every fragment its references resolve to."""
    config = config or GlobalConfig()
    options = _options(options, config).model_copy(update={"recursive": True})
    return validate_recursively(source, options, timeout=config.http.timeout)


def validate_multiple_with_references(
    sources: list[str],
    options: Optional[ValidationOptions] = None,
    config: Optional[GlobalConfig] = None,
) -> list[RecursiveValidationResult]:
    """Recursive validation over *sources*; a failing source does not stop the batch."""
    config = config or GlobalConfig()
    options = _options(options, config).model_copy(update={"recursive": True})
    return validate_multiple_recursively(
        sources,
        options,
        timeout=config.http.timeout,
        default_version=config.default_version,
    )


def analyze_document_references(
    source: str, config: Optional[GlobalConfig] = None
) -> ReferenceAnalysis:
    """List the ``$ref`` values in *source* and flag those that recur."""
    config = config or GlobalConfig()
    return analyze_references(source, timeout=config.http.timeout)


def get_supported_versions() -> list[str]:
    """Return every version string the validator accepts."""
    return list(SUPPORTED_VERSIONS)


def generate_validation_report(
    source: str,
    report_options: ReportOptions,
    validation_options: Optional[ValidationOptions] = None,
    config: Optional[GlobalConfig] = None,
) -> str:
    """Validate *source* and render the result as a report."""
    result = validate(source, validation_options, config)
    return generate_report(result, report_options)


def save_validation_report(
    source: str,
    report_options: ReportOptions,
    validation_options: Optional[ValidationOptions] = None,
    config: Optional[GlobalConfig] = None,
) -> Optional[Path]:
    """Validate *source* and write the report to ``report_options.output``.

    Without an output path the report is printed to stdout instead.

    Returns:
        The path the report was written to, or ``None`` when printed.
    """
    report = generate_validation_report(source, report_options, validation_options, config)
    if report_options.output:
        return save_report(report, report_options.output)
    print_data(report)
    return None


class Validator:
    """A validator bound to one configuration.

    Example::

        validator = Validator(GlobalConfig(default_version="3.1"))
        validator.update_config(validation={"strict": True})
        result = validator.validate("openapi.yaml")
    """

    def __init__(self, config: Optional[GlobalConfig] = None) -> None:
        self._config = config.model_copy(deep=True) if config else GlobalConfig()

    def validate(
        self,
        source: Union[str, list[str]],
        options: Optional[ValidationOptions] = None,
    ) -> Union[ValidationResult, list[ValidationResult]]:
        return validate(source, options, self._config)

    def parse(self, source: str) -> ParsedSpec:
        return parse(source, self._config)

    def generate_report(
        self,
        source: str,
        report_options: ReportOptions,
        validation_options: Optional[ValidationOptions] = None,
    ) -> str:
        return generate_validation_report(
            source, report_options, validation_options, self._config
        )

    def get_supported_versions(self) -> list[str]:
        return get_supported_versions()

    def get_config(self) -> GlobalConfig:
        """Return a copy of the bound configuration."""
        return self._config.model_copy(deep=True)

    def update_config(self, **changes: Any) -> GlobalConfig:
        """Merge *changes* into the bound configuration.

        Nested sections are merged key by key, so
        ``update_config(validation={"strict": True})`` leaves the other
        validation options alone.

        Raises:
            pydantic.ValidationError: If the merged configuration is invalid.
        """
        data = self._config.model_dump()
        for key, value in changes.items():
            if isinstance(value, dict) and isinstance(data.get(key), dict):
                data[key] = {**data[key], **value}
            else:
                data[key] = value
        self._config = GlobalConfig.model_validate(data)
        return self.get_config()
