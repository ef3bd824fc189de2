"""Clipboard copy with a fallback mechanism."""

import logging
from typing import Callable, Optional

import pyperclip

logger = logging.getLogger(__name__)


def copy_text(text: str,
              primary: Optional[Callable[[str], None]] = None,
              fallback: Optional[Callable[[str], None]] = pyperclip.copy) -> bool:
    """Copy text, trying ``primary`` first and ``fallback`` second.

    Returns False only when every available mechanism failed.
    """
    if primary is not None:
        try:
            primary(text)
            return True
        except Exception as e:
            logger.warning(f"Clipboard copy failed, trying fallback: {e}")

    if fallback is None:
        return False
    try:
        fallback(text)
        return True
    except Exception as e:
        logger.error(f"Fallback copy failed: {e}")
        return False
