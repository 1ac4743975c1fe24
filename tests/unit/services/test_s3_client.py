"""Unit tests for the S3 client.

Tests cover:
- DeleteObjects URL, XML body and Content-MD5
- S3 signing headers
- Deleted and Error result parsing
- S3 error bodies
"""

import hashlib

import pytest

from cumulus.runtime.exceptions import ParamValidationError, SdkError
from cumulus.runtime.hashing import md5_base64
from cumulus.services.s3 import S3Client, S3Error
from cumulus.services.s3.models import Delete, ObjectIdentifier
from tests.fixtures.transport import xml_response

NAMESPACE = "http://s3.amazonaws.com/doc/2006-03-01/"


def delete_result(body):
    return xml_response(
        f'<?xml version="1.0" encoding="UTF-8"?>'
        f'<DeleteResult xmlns="{NAMESPACE}">{body}</DeleteResult>',
        headers={"x-amz-request-id": "s3-req", "x-amz-id-2": "host-id"},
    )


@pytest.mark.unit
class TestS3DeleteObjects:
    """Test suite for multi-object delete."""

    def test_request(self, make_client, make_transport):
        """Test the URL, XML body and integrity headers."""
        transport = make_transport(delete_result(""))
        client = make_client(S3Client, transport)

        client.delete_objects(
            bucket="reports",
            delete=Delete(
                objects=[
                    ObjectIdentifier(key="a.txt"),
                    ObjectIdentifier(key="b.txt", version_id="v2"),
                ],
                quiet=True,
            ),
        )

        request = transport.last_request
        body = request.content
        assert request.method == "POST"
        assert request.url.host == "s3.amazonaws.com"
        assert request.url.path == "/reports"
        assert request.url.query == b"delete"
        assert body == (
            f'<Delete xmlns="{NAMESPACE}">'
            "<Object><Key>a.txt</Key></Object>"
            "<Object><Key>b.txt</Key><VersionId>v2</VersionId></Object>"
            "<Quiet>true</Quiet></Delete>"
        ).encode("utf-8")
        assert request.headers["Content-Type"] == "application/xml"
        assert request.headers["Content-MD5"] == md5_base64(body)
        assert request.headers["X-Amz-Content-SHA256"] == hashlib.sha256(body).hexdigest()
        assert "/us-east-1/s3/aws4_request" in request.headers["Authorization"]

    def test_mfa_header(self, make_client, make_transport):
        """Test the MFA member is sent as a header."""
        transport = make_transport(delete_result(""))
        client = make_client(S3Client, transport)

        client.delete_objects(
            bucket="reports",
            delete=Delete(objects=[ObjectIdentifier(key="a.txt")]),
            mfa="arn:mfa 123456",
        )

        assert transport.last_request.headers["x-amz-mfa"] == "arn:mfa 123456"

    def test_bucket_with_slash_rejected(self, make_client, make_transport):
        """Test URI labels cannot contain a slash."""
        transport = make_transport(delete_result(""))
        client = make_client(S3Client, transport)

        with pytest.raises(ParamValidationError) as exc_info:
            client.delete_objects(
                bucket="a/b", delete=Delete(objects=[ObjectIdentifier(key="k")])
            )

        assert isinstance(exc_info.value, SdkError)
        assert exc_info.value.missing == ["Bucket"]
        assert transport.requests == []

    def test_result(self, make_client, make_transport):
        """Test deleted objects and per-key errors are parsed."""
        transport = make_transport(
            delete_result(
                "<Deleted><Key>a.txt</Key></Deleted>"
                "<Deleted><Key>b.txt</Key><DeleteMarker>true</DeleteMarker>"
                "<DeleteMarkerVersionId>m1</DeleteMarkerVersionId></Deleted>"
                "<Error><Key>c.txt</Key><Code>AccessDenied</Code>"
                "<Message>Access Denied</Message></Error>"
            )
        )
        client = make_client(S3Client, transport)

        response = client.delete_objects(
            bucket="reports",
            delete={"objects": [{"key": "a.txt"}, {"key": "b.txt"}, {"key": "c.txt"}]},
        )

        assert [d.key for d in response.deleted] == ["a.txt", "b.txt"]
        assert response.deleted[1].delete_marker is True
        assert response.deleted[1].delete_marker_version_id == "m1"
        assert response.errors[0].key == "c.txt"
        assert response.errors[0].code == "AccessDenied"
        assert response.response_metadata.request_id == "s3-req"
        assert response.response_metadata.metadata["HostId"] == "host-id"

    def test_no_such_bucket(self, make_client, make_transport):
        """Test an Error document raises S3Error."""
        transport = make_transport(
            xml_response(
                "<Error><Code>NoSuchBucket</Code>"
                "<Message>The specified bucket does not exist</Message>"
                "<BucketName>missing</BucketName>"
                "<RequestId>s3-error</RequestId></Error>",
                status_code=404,
            )
        )
        client = make_client(S3Client, transport)

        with pytest.raises(S3Error) as exc_info:
            client.delete_objects(
                bucket="missing", delete=Delete(objects=[ObjectIdentifier(key="k")])
            )

        assert exc_info.value.error_code == "NoSuchBucket"
        assert exc_info.value.status_code == 404
        assert exc_info.value.request_id == "s3-error"
        assert len(transport.requests) == 1
