"""Decode-and-validate entry point for raw feed data."""

from loguru import logger

from archor.codec import decode_feed
from archor.constants import MAX_FAILURE_DISPLAY
from archor.models.config import ValidationConfig
from archor.validation.engine import ValidationReport, validate


def validate_feed(data: bytes | str, config: ValidationConfig | None = None) -> ValidationReport:
    """Decode raw RSS XML and check it against RSS 2.0.

    Args:
        data: UTF-8 XML bytes (or text) rooted at <rss>
        config: Validation settings, defaults when None

    Returns:
        ValidationReport for the decoded document

    Raises:
        FeedDecodeError: If the data cannot be decoded into a document
        StructuralDefectError: If decoding produced a model the schema cannot represent
    """
    config = config or ValidationConfig()

    document = decode_feed(data)
    report = validate(document, fail_fast=config.fail_fast)

    if report.valid:
        logger.info("Feed validation: PASSED")
    else:
        logger.warning(f"Feed validation: FAILED ({len(report.failures)} failures)")
        for failure in report.failures[:MAX_FAILURE_DISPLAY]:
            logger.warning(f"  - {failure}")
        if len(report.failures) > MAX_FAILURE_DISPLAY:
            logger.warning(f"  ... and {len(report.failures) - MAX_FAILURE_DISPLAY} more")

    return report
