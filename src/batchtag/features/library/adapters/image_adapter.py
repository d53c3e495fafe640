"""src/batchtag/features/library/adapters/image_adapter.py
What: ImageDecodePort implementation backed by Pillow.
Why: Reject non-image album art before it is embedded into audio files."""

from __future__ import annotations

import io
from typing import ClassVar

from typing_extensions import override

from PIL import Image, UnidentifiedImageError

from batchtag.shared.errors import ImageDecodeError

from ..usecases.ports import ImageDecodePort, ImageInfo


class PillowImageDecoder(ImageDecodePort):
    """Identify album art bytes with Pillow without decoding every pixel."""

    FALLBACK_MIME_TYPE: ClassVar[str] = "image/jpeg"

    @override
    def decode(self, data: bytes) -> ImageInfo:
        if not data:
            raise ImageDecodeError("Album art is empty")
        try:
            with Image.open(io.BytesIO(data)) as image:
                image.verify()
                mime_type = Image.MIME.get(image.format or "", self.FALLBACK_MIME_TYPE)
                width, height = image.size
        except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as exc:
            raise ImageDecodeError(f"Album art is not a readable image: {exc}") from exc
        return ImageInfo(mime_type=mime_type, width=width, height=height)


__all__ = ["PillowImageDecoder"]
