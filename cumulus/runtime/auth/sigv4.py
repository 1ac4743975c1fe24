"""AWS Signature Version 4."""

import hmac
from dataclasses import dataclass
from datetime import datetime, timezone
from hashlib import sha256
from typing import List, Optional, Tuple

from cumulus.runtime.auth.base import AbstractSigner
from cumulus.runtime.clock import utc_now
from cumulus.runtime.credentials import ImmutableCredentials
from cumulus.runtime.hashing import hmac_sha256, sha256_hex, sha256_hex_stream
from cumulus.runtime.request import Request, aws_quote

ALGORITHM = "AWS4-HMAC-SHA256"
TERMINATOR = "aws4_request"

# Headers that proxies or transports may rewrite
UNSIGNED_HEADERS = frozenset({"user-agent", "expect", "x-amzn-trace-id", "authorization"})

SIGNING_HEADERS = ("Authorization", "X-Amz-Date", "X-Amz-Security-Token", "X-Amz-Content-SHA256")


@dataclass(frozen=True)
class AWS4SigningResult:
    signature: str
    signed_headers: str
    scope: str
    canonical_request: str
    string_to_sign: str


class AWS4Signer(AbstractSigner):
    """Signs requests with AWS4-HMAC-SHA256.

    S3 requests carry an `x-amz-content-sha256` header and their path is
    URI-encoded once; every other service encodes the path twice.
    """

    @staticmethod
    def signing_key(secret_key: str, date_stamp: str, region: str, service: str) -> bytes:
        """Derive the signing key from the secret key and credential scope."""
        k_date = hmac_sha256(f"AWS4{secret_key}".encode("utf-8"), date_stamp)
        k_region = hmac_sha256(k_date, region)
        k_service = hmac_sha256(k_region, service)
        return hmac_sha256(k_service, TERMINATOR)

    @staticmethod
    def payload_hash(request: Request) -> str:
        content = request.content
        if content is not None and not isinstance(content, (bytes, bytearray)):
            return sha256_hex_stream(content)
        return sha256_hex(request.payload())

    @staticmethod
    def canonical_uri(request: Request, double_encode: bool) -> str:
        path = request.encoded_path()
        if double_encode:
            path = aws_quote(path, safe="/~")
        return path or "/"

    @staticmethod
    def canonical_query(request: Request) -> str:
        items = sorted(
            (aws_quote(key), aws_quote(value if value is not None else ""))
            for key, value in request.query_items()
        )
        return "&".join(f"{key}={value}" for key, value in items)

    @staticmethod
    def canonical_headers(request: Request) -> List[Tuple[str, str]]:
        headers = {}
        for name, value in request.headers.multi_items():
            key = name.lower()
            if key in UNSIGNED_HEADERS:
                continue
            value = " ".join(value.split())
            headers[key] = f"{headers[key]},{value}" if key in headers else value
        return sorted(headers.items())

    def sign(
        self,
        request: Request,
        credentials: ImmutableCredentials,
        region: str,
        service: str,
        signing_time: Optional[datetime] = None,
    ) -> AWS4SigningResult:
        now = (signing_time or utc_now()).astimezone(timezone.utc)
        amz_date = now.strftime("%Y%m%dT%H%M%SZ")
        date_stamp = now.strftime("%Y%m%d")

        for name in SIGNING_HEADERS:
            if name in request.headers:
                del request.headers[name]

        request.headers["Host"] = request.host
        request.headers["X-Amz-Date"] = amz_date
        if credentials.use_token:
            request.headers["X-Amz-Security-Token"] = credentials.token

        is_s3 = service == "s3"
        payload_hash = self.payload_hash(request)
        if is_s3:
            request.headers["X-Amz-Content-SHA256"] = payload_hash

        headers = self.canonical_headers(request)
        signed_headers = ";".join(name for name, _ in headers)
        canonical_request = "\n".join(
            [
                request.http_method,
                self.canonical_uri(request, double_encode=not is_s3),
                self.canonical_query(request),
                "".join(f"{name}:{value}\n" for name, value in headers),
                signed_headers,
                payload_hash,
            ]
        )

        scope = f"{date_stamp}/{region}/{service}/{TERMINATOR}"
        string_to_sign = "\n".join([ALGORITHM, amz_date, scope, sha256_hex(canonical_request)])
        key = self.signing_key(credentials.secret_key, date_stamp, region, service)
        signature = hmac.new(key, string_to_sign.encode("utf-8"), sha256).hexdigest()

        request.headers["Authorization"] = (
            f"{ALGORITHM} Credential={credentials.access_key}/{scope}, "
            f"SignedHeaders={signed_headers}, Signature={signature}"
        )
        return AWS4SigningResult(
            signature=signature,
            signed_headers=signed_headers,
            scope=scope,
            canonical_request=canonical_request,
            string_to_sign=string_to_sign,
        )
