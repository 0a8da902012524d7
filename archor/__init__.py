"""archor: RSS 2.0 document model and conformance checking."""

from archor.codec import decode_feed, encode_feed
from archor.constants import VERSION
from archor.exceptions import ArchorError, FeedDecodeError, StructuralDefectError
from archor.models.rss import Document
from archor.service import validate_feed
from archor.validation import ValidationReport, is_valid, validate

__version__ = VERSION

__all__ = [
    "ArchorError",
    "Document",
    "FeedDecodeError",
    "StructuralDefectError",
    "ValidationReport",
    "decode_feed",
    "encode_feed",
    "is_valid",
    "validate",
    "validate_feed",
]
