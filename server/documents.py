"""Resolution of request paths to files under the document root."""

import logging
from pathlib import Path
from typing import Optional, Union

from responder.files import LocalFile

logger = logging.getLogger(__name__)


def resolve_document(root: Union[str, Path], relative_path: str) -> Optional[LocalFile]:
    """
    Map a request path to a file under the document root.

    Args:
        root: Document root directory
        relative_path: Path taken from the request URL

    Returns:
        LocalFile for the target, or None when the path escapes the root.
        The file itself may not exist; the responder decides on 404.
    """
    base = Path(root).resolve()
    parts = [part for part in Path(relative_path.strip("/")).parts if part not in ("", ".")]
    target = base.joinpath(*parts).resolve()

    try:
        target.relative_to(base)
    except ValueError:
        logger.warning(f"Rejected path outside document root: {relative_path}")
        return None

    return LocalFile(target)


def not_found_page(path: Optional[str]) -> Optional[LocalFile]:
    if not path:
        return None
    return LocalFile(path)
