"""Logging and metrics for issuetrail."""
