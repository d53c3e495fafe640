"""
Summary: Filename sanitization for rendered tag-to-filename output.
Why: Guarantee rendered names are a legal path component on every platform.
"""

import re
from typing import ClassVar, final

from batchtag.platform.logging import logger
from batchtag.shared.errors import InvalidSubstituteError


@final
class Sanitizer:
    """Sanitize rendered file names."""

    # Characters rejected by at least one supported filesystem, plus ASCII controls
    ILLEGAL_CHARACTERS: ClassVar[re.Pattern[str]] = re.compile(r'[/\\:*?"<>|\x00-\x1f\x7f]')

    DEFAULT_SUBSTITUTE: ClassVar[str] = "_"

    @classmethod
    def resolve_substitute(cls, substitute: str | None = None) -> str:
        """Return the replacement to use, defaulting to ``_``.

        Raises:
            InvalidSubstituteError: If ``substitute`` is itself an illegal character.
        """
        replacement = cls.DEFAULT_SUBSTITUTE if substitute is None else substitute
        if cls.ILLEGAL_CHARACTERS.search(replacement):
            logger.error("Illegal filename substitute %r", replacement)
            raise InvalidSubstituteError(replacement)
        return replacement

    @classmethod
    def sanitize_filename(cls, text: str, substitute: str | None = None) -> str:
        """Replace every illegal character in ``text`` with ``substitute``.

        Args:
            text: Rendered filename (without extension).
            substitute: Replacement text. Defaults to ``_``.

        Returns:
            str: ``text`` with each illegal character replaced one-for-one.

        Raises:
            InvalidSubstituteError: If ``substitute`` is itself an illegal character.
        """
        return cls.ILLEGAL_CHARACTERS.sub(cls.resolve_substitute(substitute), text)

    @classmethod
    def is_usable_stem(cls, stem: str) -> bool:
        """Return True when ``stem`` can be used as a file name.

        Args:
            stem: Candidate name without extension.

        Returns:
            bool: False for empty or whitespace-only names, names starting
            with a dot (hidden or relative), and names still containing
            illegal characters.
        """
        stripped = stem.strip()
        if not stripped or stripped.startswith("."):
            return False
        return cls.ILLEGAL_CHARACTERS.search(stem) is None


__all__ = ["Sanitizer"]
