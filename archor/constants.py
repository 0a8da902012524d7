"""Application-wide constants.

RSS 2.0 limits and defaults used by the document model and the validation
engine. See https://www.rssboard.org/rss-specification.
"""

# Package
VERSION = "0.0.1"

# Document
RSS_VERSION = "2.0"  # Only accepted value of <rss version="...">

# Image
IMAGE_MAX_WIDTH = 144
IMAGE_MAX_HEIGHT = 400
IMAGE_DEFAULT_WIDTH = 88
IMAGE_DEFAULT_HEIGHT = 31

# Skip lists
SKIP_HOURS_MAX_ENTRIES = 24
SKIP_DAYS_MAX_ENTRIES = 7
HOUR_MIN = 0
HOUR_MAX = 23

# Reporting
MAX_FAILURE_DISPLAY = 5  # Maximum number of failures to display in logs
