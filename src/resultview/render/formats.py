"""Supported output format identifiers."""

ALLOWED_FORMATS = ("csv", "html", "json", "json-pretty")
