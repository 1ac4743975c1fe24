"""Hashing helpers used by signers and checksum validation."""

import base64
import hashlib
import hmac
import zlib
from typing import BinaryIO, Union

CHUNK_SIZE = 64 * 1024


def _to_bytes(data: Union[str, bytes]) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else data


def _digest_stream(algorithm: str, stream: BinaryIO):
    digest = hashlib.new(algorithm)
    position = stream.tell()
    try:
        for chunk in iter(lambda: stream.read(CHUNK_SIZE), b""):
            digest.update(chunk)
    finally:
        stream.seek(position)
    return digest


def sha256_hex(data: Union[str, bytes]) -> str:
    return hashlib.sha256(_to_bytes(data)).hexdigest()


def sha256_hex_stream(stream: BinaryIO) -> str:
    """SHA-256 of a seekable stream; the stream position is restored."""
    return _digest_stream("sha256", stream).hexdigest()


def hmac_sha256(key: bytes, message: Union[str, bytes]) -> bytes:
    return hmac.new(key, _to_bytes(message), hashlib.sha256).digest()


def md5_base64(data: Union[str, bytes]) -> str:
    """Base64 MD5 digest, the format of the Content-MD5 header."""
    return base64.b64encode(hashlib.md5(_to_bytes(data)).digest()).decode("ascii")


def md5_base64_stream(stream: BinaryIO) -> str:
    return base64.b64encode(_digest_stream("md5", stream).digest()).decode("ascii")


def crc32(data: bytes) -> int:
    """Unsigned CRC32, as sent in DynamoDB's x-amz-crc32 header."""
    return zlib.crc32(data) & 0xFFFFFFFF


EMPTY_SHA256 = sha256_hex(b"")
