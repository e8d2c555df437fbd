"""Tests for stream handles."""

from __future__ import annotations

import io

import pytest

from filekit.streams import ByteReader, ByteWriter, TextReader, TextWriter


class TestStreamLifecycle:
    """Tests shared by every stream type."""

    def test_close_is_idempotent(self) -> None:
        """Test closing twice does not raise."""
        stream = TextReader(io.StringIO("data"), "/fake/data.txt")

        stream.close()
        stream.close()

        assert stream.closed is True

    def test_repr_shows_state(self) -> None:
        """Test repr names the path and state."""
        stream = ByteReader(io.BytesIO(b""), "/fake/data.bin")

        assert repr(stream) == "<ByteReader '/fake/data.bin' (open)>"
        stream.close()
        assert repr(stream) == "<ByteReader '/fake/data.bin' (closed)>"

    def test_read_after_close_raises(self) -> None:
        """Test reading a closed stream raises ValueError."""
        stream = TextReader(io.StringIO("data"), "/fake/data.txt")
        stream.close()

        with pytest.raises(ValueError, match="/fake/data.txt"):
            stream.read()


class TestWriters:
    """Tests for TextWriter and ByteWriter."""

    def test_text_writer_returns_count(self) -> None:
        """Test write returns the number of characters written."""
        buffer = io.StringIO()
        stream = TextWriter(buffer, "/fake/out.txt")

        assert stream.write("héllo") == 5
        assert buffer.getvalue() == "héllo"

    def test_byte_writer_encodes_text(self) -> None:
        """Test str written to a ByteWriter is encoded with its encoding."""
        buffer = io.BytesIO()
        stream = ByteWriter(buffer, "/fake/out.bin", encoding="latin-1")

        stream.write("é")
        stream.write(b"!")

        assert buffer.getvalue() == b"\xe9!"

    def test_flush_after_close_raises(self) -> None:
        """Test flush on a closed writer raises ValueError."""
        stream = ByteWriter(io.BytesIO(), "/fake/out.bin")
        stream.close()

        with pytest.raises(ValueError):
            stream.flush()
