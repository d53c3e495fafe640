"""Tests for the mutagen, Pillow, and filesystem adapters."""

from __future__ import annotations

import io
from pathlib import Path
from types import SimpleNamespace

import pytest
from mutagen.id3 import ID3
from mutagen.mp4 import MP4Tags
from PIL import Image

from batchtag.features.library.adapters import (
    LocalRenameAdapter,
    MutagenTagAdapter,
    PillowImageDecoder,
)
from batchtag.features.library.adapters.mutagen_tag_adapter import Id3Codec, Mp4Codec
from batchtag.shared.errors import ImageDecodeError, PathCollisionError, TagIOError
from batchtag.shared.metadata_record import MetadataRecord


def _png_bytes(size: tuple[int, int] = (4, 3)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color=(200, 10, 10)).save(buffer, format="PNG")
    return buffer.getvalue()


def _tagged_record(path: Path) -> MetadataRecord:
    return MetadataRecord(
        path=path,
        title="One More Time",
        artist="Daft Punk",
        album="Discovery",
        album_artist="Daft Punk",
        composer="Bangalter",
        genre="House",
        comment="Single",
        year=2001,
        track=1,
        album_art=b"cover",
    )


def test_pillow_decoder_identifies_png() -> None:
    info = PillowImageDecoder().decode(_png_bytes())

    assert info.mime_type == "image/png"
    assert (info.width, info.height) == (4, 3)


@pytest.mark.parametrize("data", [b"", b"definitely not an image"])
def test_pillow_decoder_rejects_non_images(data: bytes) -> None:
    with pytest.raises(ImageDecodeError):
        _ = PillowImageDecoder().decode(data)


def test_local_rename_moves_file(tmp_path: Path) -> None:
    source = tmp_path / "a.mp3"
    source.write_bytes(b"x")
    destination = tmp_path / "b.mp3"

    LocalRenameAdapter().rename(source, destination)

    assert destination.read_bytes() == b"x"
    assert not source.exists()


def test_local_rename_refuses_existing_destination(tmp_path: Path) -> None:
    source = tmp_path / "a.mp3"
    destination = tmp_path / "b.mp3"
    source.write_bytes(b"a")
    destination.write_bytes(b"b")

    with pytest.raises(PathCollisionError):
        LocalRenameAdapter().rename(source, destination)

    assert destination.read_bytes() == b"b"


def test_local_rename_wraps_os_errors(tmp_path: Path) -> None:
    with pytest.raises(TagIOError):
        LocalRenameAdapter().rename(tmp_path / "missing.mp3", tmp_path / "b.mp3")


def test_id3_codec_round_trip(tmp_path: Path) -> None:
    audio = SimpleNamespace(tags=ID3())
    source = _tagged_record(tmp_path / "a.mp3")

    Id3Codec().write_fields(audio, source, "image/png")
    copy = MetadataRecord(path=tmp_path / "a.mp3")
    Id3Codec().read_fields(audio, copy)

    assert copy == source
    assert audio.tags.getall("APIC")[0].mime == "image/png"


def test_id3_codec_clears_empty_fields(tmp_path: Path) -> None:
    audio = SimpleNamespace(tags=ID3())
    record = _tagged_record(tmp_path / "a.mp3")
    Id3Codec().write_fields(audio, record, None)

    record.clear_tags()
    Id3Codec().write_fields(audio, record, None)

    assert audio.tags.get("TIT2") is None
    assert audio.tags.getall("APIC") == []
    assert audio.tags.get("TDRC") is None


def test_mp4_codec_round_trip(tmp_path: Path) -> None:
    audio = SimpleNamespace(tags=MP4Tags())
    source = _tagged_record(tmp_path / "a.m4a")

    Mp4Codec().write_fields(audio, source, "image/jpeg")
    copy = MetadataRecord(path=tmp_path / "a.m4a")
    Mp4Codec().read_fields(audio, copy)

    assert copy == source
    assert audio.tags["trkn"] == [(1, 0)]


def test_mp4_codec_keeps_track_zero(tmp_path: Path) -> None:
    audio = SimpleNamespace(tags=MP4Tags())
    source = MetadataRecord(path=tmp_path / "a.m4a", title="Hidden", track=0)

    Mp4Codec().write_fields(audio, source, None)
    copy = MetadataRecord(path=tmp_path / "a.m4a", track=5)
    Mp4Codec().read_fields(audio, copy)

    assert audio.tags["trkn"] == [(0, 0)]
    assert copy.track == 0

    source.track = None
    Mp4Codec().write_fields(audio, source, None)
    Mp4Codec().read_fields(audio, copy)

    assert "trkn" not in audio.tags
    assert copy.track is None


def test_adapter_rejects_unsupported_extension(tmp_path: Path) -> None:
    path = tmp_path / "notes.txt"
    path.write_text("text")

    with pytest.raises(TagIOError):
        _ = MutagenTagAdapter().read_tag(path)


def test_adapter_wraps_corrupt_audio(tmp_path: Path) -> None:
    path = tmp_path / "broken.mp3"
    path.write_bytes(b"not audio at all" * 8)

    with pytest.raises(TagIOError):
        _ = MutagenTagAdapter().read_tag(path)


def test_adapter_write_to_missing_file_raises_tag_io_error(tmp_path: Path) -> None:
    adapter = MutagenTagAdapter(preserve_modification_timestamp=True)
    record = MetadataRecord(path=tmp_path / "gone.mp3", title="x")

    with pytest.raises(TagIOError):
        adapter.write_tag(record)


def test_adapter_rejects_invalid_album_art(tmp_path: Path) -> None:
    path = tmp_path / "a.mp3"
    path.write_bytes(b"")
    record = MetadataRecord(path=path, album_art=b"junk")

    with pytest.raises(TagIOError, match="album art"):
        MutagenTagAdapter().write_tag(record)


def test_supported_extensions() -> None:
    assert set(MutagenTagAdapter.supported_extensions()) == {
        ".mp3",
        ".wav",
        ".flac",
        ".ogg",
        ".opus",
        ".m4a",
    }
