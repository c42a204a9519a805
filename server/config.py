"""Configuration settings for the file server."""

import os


SERVER_HOST = os.environ.get("FILED_SERVER_HOST", "0.0.0.0")

SERVER_PORT = int(os.environ.get("FILED_SERVER_PORT", "8080"))

DOCUMENT_ROOT = os.environ.get("FILED_DOCUMENT_ROOT", "./public")

NOT_FOUND_PAGE = os.environ.get("FILED_NOT_FOUND_PAGE") or None
