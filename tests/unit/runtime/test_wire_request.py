"""Unit tests for wire requests, responses and hashing helpers."""

import io

import httpx
import pytest

from cumulus.runtime.hashing import (
    EMPTY_SHA256,
    crc32,
    md5_base64,
    md5_base64_stream,
    sha256_hex,
    sha256_hex_stream,
)
from cumulus.runtime.request import Request, aws_quote, encode_parameters
from cumulus.runtime.response import WebResponseData


@pytest.mark.unit
class TestRequest:
    """Test suite for Request."""

    def test_post_without_content_sends_parameters_as_form(self):
        """Test query parameters become the body of a POST."""
        request = Request(
            None,
            "SNS",
            parameters={"Action": "ListTopics", "Version": "2010-03-31"},
            endpoint="https://sns.us-east-1.amazonaws.com",
        )

        assert request.parameters_in_body
        assert request.payload() == b"Action=ListTopics&Version=2010-03-31"
        assert request.url() == "https://sns.us-east-1.amazonaws.com/"

    def test_get_sends_parameters_in_query_string(self):
        """Test parameters go to the query string for GET."""
        request = Request(
            None,
            "SNS",
            http_method="get",
            parameters={"b": "2", "a": "x y"},
            endpoint="https://example.com",
        )

        assert request.http_method == "GET"
        assert request.payload() == b""
        assert request.url() == "https://example.com/?a=x%20y&b=2"

    def test_subresource_flag_in_url(self):
        """Test bare subresources are rendered without a value."""
        request = Request(
            None,
            "S3",
            resource_path="/bucket",
            content=b"<Delete/>",
            endpoint="https://s3.us-west-2.amazonaws.com",
        )
        request.subresources["delete"] = None

        assert request.url() == "https://s3.us-west-2.amazonaws.com/bucket?delete"

    def test_path_encoded_once_with_endpoint_prefix(self):
        """Test the endpoint path prefix is kept and the path encoded once."""
        request = Request(
            None,
            "S3",
            resource_path="/my bucket/a+b",
            endpoint="http://localhost:9000/proxy/",
        )

        assert request.encoded_path() == "/proxy/my%20bucket/a%2Bb"
        assert request.host == "localhost:9000"

    def test_unresolved_endpoint_raises(self):
        """Test url() requires an endpoint."""
        request = Request(None, "SNS")

        with pytest.raises(ValueError):
            request.url()

    def test_stream_content_replayable_when_seekable(self):
        """Test seekable streams can be replayed on retry."""
        request = Request(None, "S3", content=io.BytesIO(b"abc"))

        assert request.is_replayable
        assert request.payload() == b"abc"
        assert request.payload() == b"abc"

    def test_headers_are_case_insensitive(self):
        """Test header lookups ignore case."""
        request = Request(None, "DynamoDB", headers={"X-Amz-Target": "t"})

        assert request.headers["x-amz-target"] == "t"

    def test_quote_helpers(self):
        """Test RFC 3986 encoding of values and parameter strings."""
        assert aws_quote("a b/c~") == "a%20b%2Fc~"
        assert encode_parameters({"b": "1", "a": "*"}) == "a=%2A&b=1"


@pytest.mark.unit
class TestWebResponseData:
    """Test suite for WebResponseData."""

    def test_from_httpx(self):
        """Test conversion from an httpx response."""
        response = httpx.Response(
            503, content=b"busy", headers={"x-amzn-RequestId": "r1"}
        )

        data = WebResponseData.from_httpx(response)

        assert data.status_code == 503
        assert not data.is_successful
        assert data.header("X-AMZN-REQUESTID") == "r1"
        assert data.text == "busy"
        assert data.reason_phrase == "Service Unavailable"

    def test_content_length_falls_back_to_body(self):
        """Test content_length without a header uses the body length."""
        data = WebResponseData(status_code=200, content=b"12345")

        assert data.content_length == 5


@pytest.mark.unit
class TestHashing:
    """Test suite for hashing helpers."""

    def test_empty_sha256(self):
        """Test the well-known SHA-256 of an empty payload."""
        assert EMPTY_SHA256 == (
            "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        )
        assert sha256_hex("") == EMPTY_SHA256

    def test_stream_digests_restore_position(self):
        """Test stream hashing leaves the stream where it was."""
        stream = io.BytesIO(b"hello")
        stream.seek(2)

        digest = sha256_hex_stream(stream)

        assert digest == sha256_hex(b"llo")
        assert stream.tell() == 2

    def test_md5_base64(self):
        """Test Content-MD5 formatting."""
        assert md5_base64(b"") == "1B2M2Y8AsgTpgAmY7PhCfg=="
        assert md5_base64_stream(io.BytesIO(b"")) == "1B2M2Y8AsgTpgAmY7PhCfg=="

    def test_crc32_is_unsigned(self):
        """Test CRC32 values match the unsigned header format."""
        assert crc32(b"") == 0
        assert crc32(b"123456789") == 0xCBF43926
