"""Shared responder instance for the file routes."""

from typing import Optional

from responder.assembler import FileResponder
from responder.factory import create_file_responder

_file_responder: Optional[FileResponder] = None


def set_file_responder(responder: Optional[FileResponder]):
    """Set global file responder instance (None resets to the configured default)"""
    global _file_responder
    _file_responder = responder


def get_file_responder() -> FileResponder:
    """Get global file responder instance, creating it from configuration on first use"""
    global _file_responder
    if _file_responder is None:
        _file_responder = create_file_responder()
    return _file_responder
