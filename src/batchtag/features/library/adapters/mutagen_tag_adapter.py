"""Mutagen-backed tag I/O.

Where: src/batchtag/features/library/adapters/mutagen_tag_adapter.py
What: Read, write, and remove embedded tags for MP3, WAV, FLAC, Ogg, Opus, and M4A files.
Why: Keep container-specific frame and atom names out of the batch use cases.
"""

from __future__ import annotations

import abc
import base64
import re
from pathlib import Path
from typing import Any, ClassVar

from typing_extensions import override

import mutagen
from mutagen.flac import FLAC, Picture
from mutagen.id3 import APIC, COMM, TALB, TCOM, TCON, TDRC, TIT2, TPE1, TPE2, TRCK
from mutagen.mp3 import MP3
from mutagen.mp4 import MP4, MP4Cover
from mutagen.oggopus import OggOpus
from mutagen.oggvorbis import OggVorbis
from mutagen.wave import WAVE

from batchtag.config.settings import PRESERVE_MODIFICATION_TIMESTAMP
from batchtag.platform.filesystem import preserved_timestamps
from batchtag.platform.logging import logger
from batchtag.shared.errors import ImageDecodeError, TagIOError
from batchtag.shared.metadata_record import FileStats, MetadataRecord

from ..usecases.ports import ImageDecodePort, TagIOPort
from .image_adapter import PillowImageDecoder

_LEADING_DIGITS = re.compile(r"\s*(\d+)")

# Front cover picture type shared by ID3 APIC and FLAC picture blocks.
_FRONT_COVER = 3


def _leading_int(text: object) -> int | None:
    """Return the leading integer of ``text`` ("3/12" -> 3, "2001-05-01" -> 2001)."""
    if text is None:
        return None
    match = _LEADING_DIGITS.match(str(text))
    return int(match.group(1)) if match else None


def _first(values: Any) -> str:
    if isinstance(values, list):
        return str(values[0]) if values else ""
    return "" if values is None else str(values)


class TagCodec(abc.ABC):
    """Maps ``MetadataRecord`` fields onto one tag container."""

    FILE_CLASS: ClassVar[Any]

    def open(self, path: Path) -> Any:
        return self.FILE_CLASS(path)

    def ensure_tags(self, audio: Any) -> None:
        if audio.tags is None:
            audio.add_tags()

    @abc.abstractmethod
    def read_fields(self, audio: Any, record: MetadataRecord) -> None:
        """Copy tag values from ``audio`` onto ``record``."""

    @abc.abstractmethod
    def write_fields(self, audio: Any, record: MetadataRecord, mime_type: str | None) -> None:
        """Copy ``record``'s tag values into ``audio`` (tags already exist)."""

    def remove(self, audio: Any) -> None:
        audio.delete()


class Id3Codec(TagCodec):
    """ID3v2 frames for MP3 files."""

    FILE_CLASS: ClassVar[Any] = MP3

    TEXT_FRAMES: ClassVar[dict[str, Any]] = {
        "title": TIT2,
        "artist": TPE1,
        "album": TALB,
        "album_artist": TPE2,
        "composer": TCOM,
        "genre": TCON,
    }

    @override
    def read_fields(self, audio: Any, record: MetadataRecord) -> None:
        tags = audio.tags
        if tags is None:
            return
        for attribute, frame_class in self.TEXT_FRAMES.items():
            frame = tags.get(frame_class.__name__)
            setattr(record, attribute, _first(frame.text) if frame is not None else "")

        comments = tags.getall("COMM")
        record.comment = _first(comments[0].text) if comments else ""

        date = tags.get("TDRC")
        record.year = _leading_int(_first(date.text)) if date is not None else None
        track = tags.get("TRCK")
        record.track = _leading_int(_first(track.text)) if track is not None else None

        pictures = tags.getall("APIC")
        record.album_art = pictures[0].data if pictures else None

    @override
    def write_fields(self, audio: Any, record: MetadataRecord, mime_type: str | None) -> None:
        tags = audio.tags
        for attribute, frame_class in self.TEXT_FRAMES.items():
            value = getattr(record, attribute)
            tags.delall(frame_class.__name__)
            if value:
                tags.add(frame_class(encoding=3, text=[value]))

        tags.delall("COMM")
        if record.comment:
            tags.add(COMM(encoding=3, lang="eng", desc="", text=[record.comment]))

        tags.delall("TDRC")
        if record.year is not None:
            tags.add(TDRC(encoding=3, text=[str(record.year)]))
        tags.delall("TRCK")
        if record.track is not None:
            tags.add(TRCK(encoding=3, text=[str(record.track)]))

        tags.delall("APIC")
        if record.album_art is not None:
            tags.add(
                APIC(
                    encoding=3,
                    mime=mime_type or "image/jpeg",
                    type=_FRONT_COVER,
                    desc="Cover",
                    data=record.album_art,
                )
            )


class WaveCodec(Id3Codec):
    """ID3 chunk inside RIFF/WAVE files."""

    FILE_CLASS: ClassVar[Any] = WAVE


class VorbisCodec(TagCodec):
    """Vorbis comments for Ogg Vorbis and Opus files."""

    FILE_CLASS: ClassVar[Any] = OggVorbis

    TEXT_KEYS: ClassVar[dict[str, str]] = {
        "title": "title",
        "artist": "artist",
        "album": "album",
        "album_artist": "albumartist",
        "composer": "composer",
        "genre": "genre",
        "comment": "comment",
    }
    PICTURE_KEY: ClassVar[str] = "metadata_block_picture"

    @override
    def read_fields(self, audio: Any, record: MetadataRecord) -> None:
        record.album_art = self.read_picture(audio)
        tags = audio.tags
        if tags is None:
            return
        for attribute, key in self.TEXT_KEYS.items():
            setattr(record, attribute, _first(tags.get(key)))
        record.year = _leading_int(_first(tags.get("date"))) if "date" in tags else None
        record.track = (
            _leading_int(_first(tags.get("tracknumber"))) if "tracknumber" in tags else None
        )

    def read_picture(self, audio: Any) -> bytes | None:
        if audio.tags is None:
            return None
        encoded = audio.tags.get(self.PICTURE_KEY)
        if not encoded:
            return None
        try:
            return Picture(base64.b64decode(encoded[0])).data
        except (ValueError, mutagen.MutagenError) as exc:
            logger.warning("Ignoring unreadable embedded picture: %s", exc)
            return None

    @override
    def write_fields(self, audio: Any, record: MetadataRecord, mime_type: str | None) -> None:
        tags = audio.tags
        for attribute, key in self.TEXT_KEYS.items():
            value = getattr(record, attribute)
            if value:
                tags[key] = [value]
            elif key in tags:
                del tags[key]

        for key, number in (("date", record.year), ("tracknumber", record.track)):
            if number is not None:
                tags[key] = [str(number)]
            elif key in tags:
                del tags[key]

        self.write_picture(audio, record.album_art, mime_type)

    def write_picture(self, audio: Any, data: bytes | None, mime_type: str | None) -> None:
        if self.PICTURE_KEY in audio.tags:
            del audio.tags[self.PICTURE_KEY]
        if data is None:
            return
        picture = _cover_picture(data, mime_type)
        audio.tags[self.PICTURE_KEY] = [base64.b64encode(picture.write()).decode("ascii")]


class OpusCodec(VorbisCodec):
    FILE_CLASS: ClassVar[Any] = OggOpus


class FlacCodec(VorbisCodec):
    """Vorbis comments plus native picture blocks for FLAC files."""

    FILE_CLASS: ClassVar[Any] = FLAC

    @override
    def read_picture(self, audio: Any) -> bytes | None:
        return audio.pictures[0].data if audio.pictures else None

    @override
    def write_picture(self, audio: Any, data: bytes | None, mime_type: str | None) -> None:
        audio.clear_pictures()
        if data is not None:
            audio.add_picture(_cover_picture(data, mime_type))

    @override
    def remove(self, audio: Any) -> None:
        audio.clear_pictures()
        audio.delete()
        audio.save()


class Mp4Codec(TagCodec):
    """iTunes-style atoms for M4A files."""

    FILE_CLASS: ClassVar[Any] = MP4

    TEXT_ATOMS: ClassVar[dict[str, str]] = {
        "title": "\xa9nam",
        "artist": "\xa9ART",
        "album": "\xa9alb",
        "album_artist": "aART",
        "composer": "\xa9wrt",
        "genre": "\xa9gen",
        "comment": "\xa9cmt",
    }

    @override
    def read_fields(self, audio: Any, record: MetadataRecord) -> None:
        tags = audio.tags
        if tags is None:
            return
        for attribute, atom in self.TEXT_ATOMS.items():
            setattr(record, attribute, _first(tags.get(atom)))
        record.year = _leading_int(_first(tags.get("\xa9day"))) if "\xa9day" in tags else None
        # A present trkn atom is kept as-is, so track 0 survives a round trip.
        track_pairs = tags.get("trkn")
        record.track = int(track_pairs[0][0]) if track_pairs else None
        covers = tags.get("covr")
        record.album_art = bytes(covers[0]) if covers else None

    @override
    def write_fields(self, audio: Any, record: MetadataRecord, mime_type: str | None) -> None:
        tags = audio.tags
        updates: dict[str, Any] = {
            atom: [getattr(record, attribute)] for attribute, atom in self.TEXT_ATOMS.items()
        }
        updates["\xa9day"] = [str(record.year)] if record.year is not None else None
        updates["trkn"] = [(record.track, 0)] if record.track is not None else None
        if record.album_art is not None:
            image_format = (
                MP4Cover.FORMAT_PNG if mime_type == "image/png" else MP4Cover.FORMAT_JPEG
            )
            updates["covr"] = [MP4Cover(record.album_art, imageformat=image_format)]
        else:
            updates["covr"] = None

        for atom, value in updates.items():
            if value and value != [""]:
                tags[atom] = value
            elif atom in tags:
                del tags[atom]


def _cover_picture(data: bytes, mime_type: str | None) -> Picture:
    picture = Picture()
    picture.type = _FRONT_COVER
    picture.mime = mime_type or "image/jpeg"
    picture.desc = "Cover"
    picture.data = data
    return picture


class MutagenTagAdapter(TagIOPort):
    """TagIOPort implementation selecting a codec by file extension."""

    CODECS: ClassVar[dict[str, type[TagCodec]]] = {
        ".mp3": Id3Codec,
        ".wav": WaveCodec,
        ".flac": FlacCodec,
        ".ogg": VorbisCodec,
        ".opus": OpusCodec,
        ".m4a": Mp4Codec,
    }

    def __init__(
        self,
        *,
        preserve_modification_timestamp: bool = PRESERVE_MODIFICATION_TIMESTAMP,
        image_decoder: ImageDecodePort | None = None,
    ) -> None:
        self.preserve_modification_timestamp: bool = preserve_modification_timestamp
        self._image_decoder: ImageDecodePort = image_decoder or PillowImageDecoder()

    @classmethod
    def supported_extensions(cls) -> tuple[str, ...]:
        return tuple(cls.CODECS)

    def _codec_for(self, path: Path) -> TagCodec:
        codec_class = self.CODECS.get(path.suffix.lower())
        if codec_class is None:
            raise TagIOError(path, f"unsupported file type {path.suffix or '(none)'}")
        return codec_class()

    def _open(self, codec: TagCodec, path: Path) -> Any:
        try:
            return codec.open(path)
        except (mutagen.MutagenError, OSError) as exc:
            logger.error("Failed to open %s: %s", path, exc)
            raise TagIOError(path, str(exc)) from exc

    @override
    def read_tag(self, path: Path) -> MetadataRecord:
        codec = self._codec_for(path)
        audio = self._open(codec, path)
        try:
            file_size = path.stat().st_size
        except OSError as exc:
            raise TagIOError(path, str(exc)) from exc

        info = getattr(audio, "info", None)
        length = getattr(info, "length", 0) or 0
        record = MetadataRecord(
            path=path,
            stats=FileStats(duration=max(0, int(length)), file_size=file_size),
        )
        codec.read_fields(audio, record)
        logger.debug("Read tags from %s", path)
        return record

    def _album_art_mime(self, record: MetadataRecord) -> str | None:
        if record.album_art is None:
            return None
        try:
            return self._image_decoder.decode(record.album_art).mime_type
        except ImageDecodeError as exc:
            raise TagIOError(record.path, f"album art is not a valid image: {exc}") from exc

    @override
    def write_tag(self, record: MetadataRecord) -> None:
        path = record.path
        codec = self._codec_for(path)
        mime_type = self._album_art_mime(record)
        try:
            with preserved_timestamps(path, enabled=self.preserve_modification_timestamp):
                audio = self._open(codec, path)
                codec.ensure_tags(audio)
                codec.write_fields(audio, record, mime_type)
                audio.save()
        except TagIOError:
            raise
        except (mutagen.MutagenError, OSError) as exc:
            logger.error("Failed to write tags to %s: %s", path, exc)
            raise TagIOError(path, str(exc)) from exc
        logger.debug("Wrote tags to %s", path)

    @override
    def remove_tag(self, path: Path) -> None:
        codec = self._codec_for(path)
        try:
            with preserved_timestamps(path, enabled=self.preserve_modification_timestamp):
                audio = self._open(codec, path)
                codec.remove(audio)
        except TagIOError:
            raise
        except (mutagen.MutagenError, OSError) as exc:
            logger.error("Failed to remove tags from %s: %s", path, exc)
            raise TagIOError(path, str(exc)) from exc
        logger.debug("Removed tags from %s", path)


__all__ = [
    "FlacCodec",
    "Id3Codec",
    "Mp4Codec",
    "MutagenTagAdapter",
    "OpusCodec",
    "TagCodec",
    "VorbisCodec",
    "WaveCodec",
]
