"""issuetrail: field-level change tracking and notification policy for issues."""

__version__ = "0.1.0"
