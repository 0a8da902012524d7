"""Recursive RSS 2.0 conformance checker.

Walks a document model following the explicit schema in
:mod:`archor.validation.schema`:

- a required child that is absent, or present but failing its rule, fails
  its parent
- an absent optional child is skipped, a present one must pass its rule
- a sequence is checked against its length bound, then entry by entry
- children without a schema entry are descriptive text and are ignored

Conformance failures are collected in a ValidationReport. A value the
schema position cannot hold raises StructuralDefectError instead.
"""

from loguru import logger
from pydantic import BaseModel, Field

from archor.exceptions import StructuralDefectError
from archor.models.rss import RSSElement
from archor.validation.schema import CONSTRAINTS, SCHEMAS, ChildSpec, Presence


class ValidationFailure(BaseModel):
    """One element that does not conform."""

    path: str = Field(description="Location, e.g. rss.channel.item[2].pubDate")
    reason: str = Field(description="Why the element failed")

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


class ValidationReport(BaseModel):
    """Outcome of validating one element tree."""

    failures: list[ValidationFailure] = Field(default_factory=list)

    @property
    def valid(self) -> bool:
        """Whether the tree conforms to RSS 2.0."""
        return not self.failures


class _FailFast(Exception):
    """Unwinds the walk after the first failure."""


class ConformanceChecker:
    """Walks one element tree and records every conformance failure.

    A checker holds the failures of a single walk; create a new one (or use
    :func:`validate`) for each tree.
    """

    def __init__(self, fail_fast: bool = False):
        self.fail_fast = fail_fast
        self.failures: list[ValidationFailure] = []

    def run(self, element: RSSElement) -> ValidationReport:
        """Check element and everything below it.

        Raises:
            StructuralDefectError: If the tree holds a value its schema cannot represent
        """
        if not isinstance(element, RSSElement):
            raise StructuralDefectError(
                f"expected an RSS element, got {type(element).__name__}", path="<root>"
            )
        self.failures = []
        try:
            self._check_element(element, element.xml_tag or type(element).__name__)
        except _FailFast:
            pass
        return ValidationReport(failures=list(self.failures))

    def _fail(self, path: str, reason: str) -> None:
        logger.debug("Conformance failure at {}: {}", path, reason)
        self.failures.append(ValidationFailure(path=path, reason=reason))
        if self.fail_fast:
            raise _FailFast

    def _check_element(self, element: RSSElement, path: str) -> None:
        specs = SCHEMAS.get(type(element))
        if specs is None:
            raise StructuralDefectError(f"no schema for {type(element).__name__}", path)

        for spec in specs:
            child_path = f"{path}.{spec.tag}"
            if not hasattr(element, spec.name):
                raise StructuralDefectError(f"missing field '{spec.name}'", child_path)
            value = getattr(element, spec.name)

            if spec.presence is Presence.SEQUENCE:
                self._check_sequence(spec, value, child_path)
            elif value is None:
                if spec.presence is Presence.REQUIRED:
                    self._fail(child_path, "is required")
            else:
                self._check_child(spec, value, child_path)

        for constraint in CONSTRAINTS.get(type(element), ()):
            if not constraint.check(element):
                self._fail(path, constraint.reason)

    def _check_sequence(self, spec: ChildSpec, values: object, path: str) -> None:
        if not isinstance(values, (list, tuple)):
            raise StructuralDefectError(
                f"expected a list, got {type(values).__name__}", path
            )
        if spec.max_items is not None and len(values) > spec.max_items:
            self._fail(path, f"has {len(values)} entries, at most {spec.max_items} allowed")

        for index, value in enumerate(values):
            entry_path = f"{path}[{index}]"
            if value is None:
                raise StructuralDefectError("sequence entry is None", entry_path)
            self._check_child(spec, value, entry_path)

    def _check_child(self, spec: ChildSpec, value: object, path: str) -> None:
        if spec.element is not None:
            if not isinstance(value, spec.element):
                raise StructuralDefectError(
                    f"expected {spec.element.__name__}, got {type(value).__name__}", path
                )
            self._check_element(value, path)
            return

        if not isinstance(value, str):
            raise StructuralDefectError(f"expected text, got {type(value).__name__}", path)
        if spec.rule is not None and not spec.rule(value):
            self._fail(path, spec.reason or "is invalid")


def validate(element: RSSElement, fail_fast: bool = False) -> ValidationReport:
    """Validate an element tree against RSS 2.0.

    Args:
        element: Document or any nested element
        fail_fast: Stop at the first failure in schema order

    Returns:
        ValidationReport listing every failure found (at most one with fail_fast)

    Raises:
        StructuralDefectError: If the tree holds a value its schema cannot represent

    Examples:
        >>> from archor.models.rss import Channel, Document
        >>> channel = Channel(title="T", link="http://x.com", description="D")
        >>> validate(Document(version="2.0", channel=channel)).valid
        True
    """
    return ConformanceChecker(fail_fast=fail_fast).run(element)


def is_valid(element: RSSElement) -> bool:
    """Whether an element tree conforms to RSS 2.0."""
    return validate(element, fail_fast=True).valid
