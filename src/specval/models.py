"""Canonical Pydantic models shared across all specval modules.

This is the single source of truth for data shapes in the project. Every other
module imports from here rather than defining its own models. The models fall
into three groups:

**Document models** -- produced by the parser and the reference machinery:
    :class:`SpecFamily`, :class:`FragmentKind`, :class:`HTTPMethod`,
    :class:`SpecMetadata`, :class:`ParsedSpec`, :class:`Reference`,
    :class:`ResolvedReference`, and :class:`ReferenceAnalysis`.

**Validation models** -- produced by the validators and consumed by the CLI
and report layers:
    :class:`ValidationIssue`, :class:`ValidationResult`,
    :class:`PartialValidation`, :class:`RecursiveValidationResult`,
    :class:`ValidationOptions`, :class:`SpecificationSummary`.

**Configuration models** -- serialised as JSON in the user's config directory:
    :class:`ReportOptions`, :class:`OutputConfig`, :class:`HttpConfig`, and
    :class:`GlobalConfig`.

All models use Pydantic v2. Issue paths follow the schema evaluator's JSON
Pointer style (``/info/title``); reference paths use dot notation
(``paths./pets.get.responses.200.$ref``).
"""

from __future__ import annotations

import enum
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from specval.exceptions import UnsupportedVersionError


SUPPORTED_VERSIONS: tuple[str, ...] = (
    "2.0",
    "3.0.0",
    "3.0.1",
    "3.0.2",
    "3.0.3",
    "3.0.4",
    "3.1.0",
    "3.1.1",
    "3.2.0",
)
"""Version strings specval is tested against, in release order."""


# --- Document Models ---


class SpecFamily(str, enum.Enum):
    """Schema bucket a document version belongs to.

    Patch releases share one schema: ``3.0.0`` through ``3.0.4`` all map to
    :attr:`OPENAPI_3_0`, and so on. Swagger ``2.0`` is its own bucket.
    """

    SWAGGER_2_0 = "2.0"
    OPENAPI_3_0 = "3.0"
    OPENAPI_3_1 = "3.1"
    OPENAPI_3_2 = "3.2"

    @classmethod
    def from_version(cls, version: str) -> SpecFamily:
        """Collapse a version string to its schema bucket.

        Args:
            version: A version string such as ``"3.0.3"``, ``"3.1"`` or
                ``"2.0"``.

        Returns:
            The matching :class:`SpecFamily`.

        Raises:
            UnsupportedVersionError: If the version belongs to no bucket.
        """
        version = str(version)
        for family in (cls.OPENAPI_3_0, cls.OPENAPI_3_1, cls.OPENAPI_3_2):
            if version.startswith(family.value):
                return family
        if version == cls.SWAGGER_2_0.value:
            return cls.SWAGGER_2_0
        raise UnsupportedVersionError(f"Unsupported OpenAPI version: {version}")


class FragmentKind(str, enum.Enum):
    """Structural role of a document or of a fragment reached through ``$ref``.

    ``SPECIFICATION`` denotes a whole document; every other member names the
    OpenAPI object a partial document is validated as.
    """

    SPECIFICATION = "specification"
    SCHEMA = "schema"
    PARAMETER = "parameter"
    RESPONSE = "response"
    PATHITEM = "pathitem"
    REQUESTBODY = "requestbody"
    HEADER = "header"
    EXAMPLE = "example"
    LINK = "link"
    CALLBACK = "callback"
    SECURITYSCHEME = "securityscheme"


class HTTPMethod(str, enum.Enum):
    """HTTP methods recognised as operation keys of a path-item object."""

    GET = "get"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"
    HEAD = "head"
    OPTIONS = "options"
    TRACE = "trace"


class SpecMetadata(BaseModel):
    """Metadata lifted from a document's *Info Object*."""

    title: Optional[str] = None
    version: Optional[str] = None
    description: Optional[str] = None
    contact: Optional[dict[str, Any]] = None
    license: Optional[dict[str, Any]] = None


class ParsedSpec(BaseModel):
    """A loaded document together with its detected version.

    The raw tree in :attr:`spec` is shared with the validators and must not be
    mutated. Version-specific fields (``host`` for Swagger 2.0, ``servers`` and
    ``components`` for OpenAPI 3.x) should only be read after checking
    :attr:`family`.
    """

    spec: dict[str, Any]
    version: str = Field(description="Detected version string, e.g. '3.0.3' or '2.0'")
    source: str = Field(description="File path, URL, or '-' the document came from")
    metadata: SpecMetadata = Field(default_factory=SpecMetadata)

    @property
    def family(self) -> SpecFamily:
        """The schema bucket of :attr:`version`."""
        return SpecFamily.from_version(self.version)

    @property
    def is_swagger2(self) -> bool:
        """Whether this is a Swagger 2.0 document."""
        return self.family is SpecFamily.SWAGGER_2_0


class Reference(BaseModel):
    """A single ``$ref`` occurrence found in a document tree."""

    path: str = Field(description="Dot-joined location of the $ref key")
    value: str = Field(description="The raw reference string")


class ResolvedReference(BaseModel):
    """The outcome of resolving one reference.

    ``content`` is ``None`` when :attr:`is_circular` is set. ``version`` is
    only populated when the resolved content is itself a full document that
    declares a version; otherwise the fragment inherits the root's version.
    """

    path: str
    content: Any = None
    version: Optional[str] = None
    is_circular: bool = False
    depth: int = 0


class ReferenceAnalysis(BaseModel):
    """Result of a reference-only scan of a document.

    ``circular_references`` lists every reference value that occurs more than
    once in the document. This is a textual recurrence check, not a graph
    cycle check.
    """

    references: list[Reference] = Field(default_factory=list)
    circular_references: list[str] = Field(default_factory=list)
    total_references: int = 0


# --- Validation Models ---


class ValidationIssue(BaseModel):
    """One error or warning reported against a document.

    Whether an issue is an error or a warning is decided by the keyword that
    produced it: ``required`` and ``type`` violations are errors, everything
    else is a warning.
    """

    model_config = ConfigDict(populate_by_name=True)

    path: str
    message: str
    data: Any = None
    schema_path: Optional[str] = Field(default=None, alias="schemaPath")


class ValidationResult(BaseModel):
    """Outcome of validating one document or fragment.

    ``valid`` is always ``len(errors) == 0``; warnings never affect it.
    Build instances through :meth:`from_issues` to keep that true.
    """

    valid: bool
    errors: list[ValidationIssue] = Field(default_factory=list)
    warnings: list[ValidationIssue] = Field(default_factory=list)
    spec: Any = None
    version: str

    @classmethod
    def from_issues(
        cls,
        errors: list[ValidationIssue],
        warnings: list[ValidationIssue],
        spec: Any,
        version: str,
    ) -> ValidationResult:
        """Build a result whose ``valid`` flag is derived from *errors*."""
        return cls(
            valid=not errors,
            errors=errors,
            warnings=warnings,
            spec=spec,
            version=version,
        )


class PartialValidation(BaseModel):
    """Validation outcome for one fragment reached through a reference."""

    path: str
    result: ValidationResult
    is_circular: bool = False


class RecursiveValidationResult(ValidationResult):
    """Validation outcome for a root document plus its referenced fragments.

    ``errors`` and ``warnings`` hold the root's issues followed by every
    partial's issues in encounter order. ``total_documents`` counts the root
    plus every partial validation.
    """

    partial_validations: list[PartialValidation] = Field(default_factory=list)
    circular_references: list[str] = Field(default_factory=list)
    total_documents: int = 0
    valid_documents: int = 0


class ValidationOptions(BaseModel):
    """Switches that control what :func:`~specval.validation.document.validate_spec` checks.

    Example::

        ValidationOptions(strict=True, validate_references=True)
    """

    strict: bool = Field(
        default=False, description="Check hosts/servers and security definitions"
    )
    validate_examples: bool = Field(
        default=False, description="Check examples against their inline schemas"
    )
    validate_references: bool = Field(
        default=False, description="Report in-document $refs that do not resolve"
    )
    recursive: bool = Field(
        default=False, description="Resolve and validate referenced fragments"
    )
    max_ref_depth: int = Field(
        default=10, ge=1, description="Maximum reference resolution depth"
    )
    custom_rules: dict[str, dict[str, Any]] = Field(
        default_factory=dict,
        description="JSON pointer -> JSON schema the pointed-to value must satisfy",
    )


class ComponentBreakdown(BaseModel):
    """Per-type component counts of an OpenAPI 3.x document."""

    schemas: int = 0
    responses: int = 0
    parameters: int = 0
    examples: int = 0
    request_bodies: int = 0
    headers: int = 0
    security_schemes: int = 0
    links: int = 0
    callbacks: int = 0
    path_items: int = 0

    @property
    def total(self) -> int:
        return sum(self.model_dump().values())


class SecurityAnalysis(BaseModel):
    has_security: bool = False
    security_schemes: int = 0
    security_requirements: int = 0
    oauth_flows: int = 0
    api_keys: int = 0
    http_auth: int = 0


class ReferenceBreakdown(BaseModel):
    total_references: int = 0
    internal_references: int = 0
    external_references: int = 0
    circular_references: int = 0


class ValidationCounts(BaseModel):
    valid: bool = False
    errors: int = 0
    warnings: int = 0
    processing_time_ms: float = 0.0


class SpecificationSummary(BaseModel):
    """Structural overview of a document, produced by :mod:`specval.summary`."""

    version: str
    title: Optional[str] = None
    description: Optional[str] = None
    paths: int = 0
    endpoints: int = 0
    servers: int = 0
    tags: int = 0
    webhooks: int = 0
    http_methods: list[str] = Field(default_factory=list)
    components: ComponentBreakdown = Field(default_factory=ComponentBreakdown)
    security: SecurityAnalysis = Field(default_factory=SecurityAnalysis)
    references: ReferenceBreakdown = Field(default_factory=ReferenceBreakdown)
    validation: ValidationCounts = Field(default_factory=ValidationCounts)


# --- Configuration Models ---


class ReportFormat(str, enum.Enum):
    """Output formats supported by :func:`~specval.report.generate_report`."""

    JSON = "json"
    YAML = "yaml"
    HTML = "html"
    MARKDOWN = "markdown"


class ReportOptions(BaseModel):
    """What to render in a validation report and where to put it."""

    format: ReportFormat = ReportFormat.JSON
    output: Optional[str] = Field(
        default=None, description="File to write the report to (stdout when unset)"
    )
    include_warnings: bool = False
    include_metadata: bool = False


class OutputConfig(BaseModel):
    """Default output format preferences stored in :class:`GlobalConfig`."""

    format: Literal["auto", "json", "plain", "rich"] = Field(
        default="auto", description="Output format: auto, json, plain, rich"
    )


class HttpConfig(BaseModel):
    """Settings for fetching remote documents and references."""

    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")


class GlobalConfig(BaseModel):
    """User-wide configuration persisted at ``~/.config/specval/config.json``.

    Loaded and saved by :func:`~specval.config.load_global_config` and
    :func:`~specval.config.save_global_config`. Fields here have the
    lowest precedence and can be overridden by project config, environment
    variables, or CLI flags. See :func:`~specval.config.resolve_options`
    for the full precedence chain.
    """

    default_version: str = Field(
        default="3.0", description="Version reported for documents that failed to load"
    )
    validation: ValidationOptions = Field(default_factory=ValidationOptions)
    output: OutputConfig = Field(default_factory=OutputConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
    report_formats: list[ReportFormat] = Field(
        default_factory=lambda: [ReportFormat.JSON]
    )
