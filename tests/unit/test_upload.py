"""Unit tests for capped upload reading."""

import io

import pytest
from fastapi import UploadFile

from finance_robot.api.v1.transactions import UPLOAD_CHUNK_SIZE, read_upload
from finance_robot.core.exceptions import UploadError


def _upload(data: bytes) -> UploadFile:
    return UploadFile(file=io.BytesIO(data), filename="export.csv")


class TestReadUpload:
    """Test suite for read_upload."""

    @pytest.mark.asyncio
    async def test_reads_whole_file_under_cap(self):
        data = b"Date,Amount\n" + b"2024-01-01,1\n" * 20_000
        assert len(data) > UPLOAD_CHUNK_SIZE

        result = await read_upload(_upload(data), max_bytes=len(data))

        assert result == data

    @pytest.mark.asyncio
    async def test_over_cap_stops_after_first_oversized_chunk(self):
        data = b"x" * (4 * 1024 * 1024)
        upload = _upload(data)

        with pytest.raises(UploadError) as exc_info:
            await read_upload(upload, max_bytes=1024)

        assert exc_info.value.error_code == "API_002"
        assert exc_info.value.http_status == 400
        assert upload.file.tell() == UPLOAD_CHUNK_SIZE

    @pytest.mark.asyncio
    async def test_exactly_at_cap_is_accepted(self):
        data = b"a" * 100

        assert await read_upload(_upload(data), max_bytes=100) == data

    @pytest.mark.asyncio
    async def test_empty_upload(self):
        assert await read_upload(_upload(b""), max_bytes=0) == b""
