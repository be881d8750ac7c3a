"""Container image reference checks for step images."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from manifestlint.validator.models import ValidationIssue, ValidationSeverity

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY = "index.docker.io"
DOCKER_HUB_ALIAS = "docker.io"

# Tag marker that is considered floating. Matched as a substring of the
# canonical reference, so a repository path containing it is flagged too.
FLOATING_TAG = "latest"

_HOST_COMPONENT = r"[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?"
REGISTRY_RE = re.compile(
    rf"^(?:{_HOST_COMPONENT}(?:\.{_HOST_COMPONENT})*|\[[a-fA-F0-9:]+\])(?::[0-9]+)?$"
)
REPOSITORY_COMPONENT_RE = re.compile(r"^[a-z0-9]+(?:(?:[._]|__|-+)[a-z0-9]+)*$")
TAG_RE = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_.-]{0,127}$")
DIGEST_RE = re.compile(r"^sha256:[a-f0-9]{64}$")

MAX_REPOSITORY_LENGTH = 255


class InvalidReferenceError(ValueError):
    """Raised when an image string is not a fully qualified reference."""

    def __init__(self, image: str, reason: str = "") -> None:
        super().__init__(f"could not parse reference: {image}")
        self.image = image
        self.reason = reason


@dataclass(frozen=True)
class ImageReference:
    """A parsed image reference, either tagged or digest-qualified."""

    registry: str
    repository: str
    tag: str | None = None
    digest: str | None = None
    original: str = ""

    @property
    def name(self) -> str:
        registry = DEFAULT_REGISTRY if self.registry == DOCKER_HUB_ALIAS else self.registry
        return f"{registry}/{self.repository}"

    def __str__(self) -> str:
        """Canonical form used by the floating-tag check.

        Tagged references are rebuilt from their parts, so a Docker Hub alias
        renders as ``index.docker.io``. Digest references render exactly as
        written, including any tag given next to the digest.
        """
        if self.digest is not None:
            return self.original
        return f"{self.name}:{self.tag}"


def _split_repository(base: str) -> tuple[str, str]:
    """Split ``registry/repository`` and validate both halves strictly."""
    first, sep, rest = base.partition("/")
    if not sep or not ("." in first or ":" in first):
        raise ValueError("strict validation requires the registry to be explicitly defined")
    if not REGISTRY_RE.match(first):
        raise ValueError(f"registries must be valid RFC 3986 URI authorities: {first}")

    if not rest or len(rest) > MAX_REPOSITORY_LENGTH:
        raise ValueError(f"repository must be between 1 and {MAX_REPOSITORY_LENGTH} characters")
    for component in rest.split("/"):
        if not REPOSITORY_COMPONENT_RE.match(component):
            raise ValueError(f"repository can only contain lowercase alphanumerics and separators: {rest}")

    if first in (DEFAULT_REGISTRY, DOCKER_HUB_ALIAS) and "/" not in rest:
        raise ValueError("strict validation requires the full repository path (missing 'library')")
    return first, rest


def _parse_tagged(image: str) -> ImageReference:
    base, sep, tag = image.rpartition(":")
    if not sep or "/" in tag:
        raise ValueError("strict validation requires an explicit tag")
    if not TAG_RE.match(tag):
        raise ValueError(f"tag can only contain alphanumerics, '_', '.' and '-': {tag}")
    registry, repository = _split_repository(base)
    return ImageReference(registry=registry, repository=repository, tag=tag, original=image)


def _parse_digested(image: str) -> ImageReference:
    base, sep, digest = image.partition("@")
    if not sep:
        raise ValueError("a digest must be separated by '@'")
    if not DIGEST_RE.match(digest):
        raise ValueError(f"digest must be sha256 followed by 64 hex characters: {digest}")

    # A tag next to the digest is allowed but carries no meaning.
    head, tag_sep, tag = base.rpartition(":")
    if tag_sep and "/" not in tag and TAG_RE.match(tag):
        base = head
    registry, repository = _split_repository(base)
    return ImageReference(registry=registry, repository=repository, digest=digest, original=image)


def parse_reference(image: str) -> ImageReference:
    """Parse an image string as a tag reference, then as a digest reference.

    Raises:
        InvalidReferenceError: if neither form is valid.
    """
    try:
        return _parse_tagged(image)
    except ValueError as tag_err:
        try:
            return _parse_digested(image)
        except ValueError as digest_err:
            raise InvalidReferenceError(image, f"{tag_err}; {digest_err}") from None


def check_image(image: str, log: logging.Logger | None = None) -> list[ValidationIssue]:
    """Check a step image for a well-formed, version-pinned reference.

    An unparseable image yields a single error and no tag check.
    """
    log = log or logger
    issues: list[ValidationIssue] = []

    try:
        ref = parse_reference(image)
    except InvalidReferenceError as e:
        log.debug("Rejected image %r: %s", image, e.reason)
        issues.append(
            ValidationIssue(
                severity=ValidationSeverity.error,
                check_name="image_ref",
                message=f"Invalid Image Reference: {e}",
            )
        )
        return issues

    if FLOATING_TAG in str(ref):
        issues.append(
            ValidationIssue(
                severity=ValidationSeverity.error,
                check_name="image_tag",
                message=f"Task image ({image}) must be tagged with a specific version",
            )
        )

    return issues
