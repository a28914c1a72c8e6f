"""Tests for storage utilities."""

import os
import pytest
from pathlib import Path
import tempfile
from dwrgen.errors import OutputWriteError
from dwrgen.models import EnumMetadata
from dwrgen.storage import (
    read_jsonl,
    write_jsonl,
    read_json,
    write_json,
    write_outputs,
)


class TestJSONLOperations:
    """Tests for JSONL read/write operations."""

    def test_write_read_jsonl(self) -> None:
        """Test basic JSONL write and read with line numbers."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "test.jsonl"
            records = [{"a": 1}, {"b": 2}]

            write_jsonl(path, records)
            result = list(read_jsonl(path))

            assert result == [(1, {"a": 1}), (2, {"b": 2})]

    def test_read_nonexistent_file(self) -> None:
        """Test reading a nonexistent file returns empty generator."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nonexistent.jsonl"

            assert list(read_jsonl(path)) == []

    def test_write_models_omits_none(self) -> None:
        """Test Pydantic records are written without unset optional values."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nested" / "test.jsonl"

            write_jsonl(path, [EnumMetadata(name="Status", constants=["ON"])])

            assert list(read_jsonl(path)) == [(1, {"type": "enum", "name": "Status", "constants": ["ON"]})]

    def test_invalid_json_reports_line(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "test.jsonl"
            path.write_text('{"a": 1}\n\n{oops\n')

            with pytest.raises(ValueError, match="test.jsonl line 3: invalid JSON"):
                list(read_jsonl(path))


class TestJSONOperations:
    """Tests for JSON read/write operations."""

    def test_write_read_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.json"
            data = {"skip": False, "output_dir": "web/generated"}

            write_json(path, data)

            assert read_json(path) == data


class TestWriteOutputs:
    """Tests for replacing generated files as a set."""

    def test_creates_directory_and_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            out = Path(tmpdir) / "a" / "b"

            written = write_outputs(out, {"one.ts": "1\n", "two.ts": "2\n"})

            assert written == [out / "one.ts", out / "two.ts"]
            assert (out / "one.ts").read_text() == "1\n"
            assert sorted(p.name for p in out.iterdir()) == ["one.ts", "two.ts"]

    def test_overwrites_existing(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            out = Path(tmpdir)
            (out / "one.ts").write_text("old")

            write_outputs(out, {"one.ts": "new"})

            assert (out / "one.ts").read_text() == "new"

    def test_unix_newlines(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            out = Path(tmpdir)

            write_outputs(out, {"one.ts": "a\nb\n"})

            assert (out / "one.ts").read_bytes() == b"a\nb\n"

    def test_directory_is_a_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            out = Path(tmpdir) / "generated"
            out.write_text("x")

            with pytest.raises(OutputWriteError):
                write_outputs(out, {"one.ts": "1"})

    def test_failed_move_restores_previous_set(self, monkeypatch) -> None:
        """Test a move failing midway puts every previous output back."""
        with tempfile.TemporaryDirectory() as tmpdir:
            out = Path(tmpdir)
            write_outputs(out, {"one.ts": "old 1", "two.ts": "old 2", "three.ts": "old 3"})

            real_replace = os.replace

            def failing_replace(src, dst):
                src = Path(src)
                if src.name == "two.ts" and src.parent.name.startswith(".dwrgen-"):
                    raise PermissionError("denied")
                return real_replace(src, dst)

            monkeypatch.setattr(os, "replace", failing_replace)

            with pytest.raises(OutputWriteError):
                write_outputs(out, {"one.ts": "new 1", "two.ts": "new 2", "three.ts": "new 3"})

            assert (out / "one.ts").read_text() == "old 1"
            assert (out / "two.ts").read_text() == "old 2"
            assert (out / "three.ts").read_text() == "old 3"
            assert sorted(p.name for p in out.iterdir()) == ["one.ts", "three.ts", "two.ts"]

    def test_failed_move_removes_files_that_did_not_exist(self, monkeypatch) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            out = Path(tmpdir)
            real_replace = os.replace

            def failing_replace(src, dst):
                if Path(src).name == "two.ts":
                    raise PermissionError("denied")
                return real_replace(src, dst)

            monkeypatch.setattr(os, "replace", failing_replace)

            with pytest.raises(OutputWriteError):
                write_outputs(out, {"one.ts": "1", "two.ts": "2"})

            assert list(out.iterdir()) == []

    def test_directory_target_is_rejected_before_writing(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            out = Path(tmpdir)
            write_outputs(out, {"one.ts": "old 1", "two.ts": "old 2"})
            (out / "two.ts").unlink()
            (out / "two.ts").mkdir()

            with pytest.raises(OutputWriteError, match="two.ts is a directory"):
                write_outputs(out, {"one.ts": "new 1", "two.ts": "new 2"})

            assert (out / "one.ts").read_text() == "old 1"
