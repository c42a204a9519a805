"""File response decision engine."""

from responder.assembler import FileResponder
from responder.conditional import CacheValidation, NoCacheValidation
from responder.exceptions import FiledException, MalformedRangeError, NoRangeHeaderError
from responder.factory import create_file_responder
from responder.files import LocalFile
from responder.ranges import RangeSpec
from responder.types import BodyWindow, FileResponseOutcome, OutcomeKind, Validators

__all__ = [
    "FileResponder",
    "CacheValidation",
    "NoCacheValidation",
    "FiledException",
    "MalformedRangeError",
    "NoRangeHeaderError",
    "create_file_responder",
    "LocalFile",
    "RangeSpec",
    "BodyWindow",
    "FileResponseOutcome",
    "OutcomeKind",
    "Validators",
]
