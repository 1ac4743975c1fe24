"""AWS Signature Version 2 for query-protocol services such as SimpleDB."""

import base64
from datetime import datetime, timezone
from typing import Optional

from cumulus.runtime.auth.base import AbstractSigner
from cumulus.runtime.clock import utc_now
from cumulus.runtime.credentials import ImmutableCredentials
from cumulus.runtime.hashing import hmac_sha256
from cumulus.runtime.request import Request, encode_parameters

SIGNATURE_VERSION = "2"
SIGNATURE_METHOD = "HmacSHA256"


def format_timestamp(value: datetime) -> str:
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


class QueryStringSigner(AbstractSigner):
    """Signs query-protocol parameters with HmacSHA256."""

    def string_to_sign(self, request: Request) -> str:
        host = request.host.lower()
        path = request.encoded_path() or "/"
        canonical_query = encode_parameters(
            {k: v for k, v in request.parameters.items() if k != "Signature"}
        )
        return f"{request.http_method}\n{host}\n{path}\n{canonical_query}"

    def sign(
        self,
        request: Request,
        credentials: ImmutableCredentials,
        region: str,
        service: str,
        signing_time: Optional[datetime] = None,
    ) -> str:
        params = request.parameters
        params.pop("Signature", None)
        params.pop("SecurityToken", None)
        params["AWSAccessKeyId"] = credentials.access_key
        params["SignatureVersion"] = SIGNATURE_VERSION
        params["SignatureMethod"] = SIGNATURE_METHOD
        params["Timestamp"] = format_timestamp(signing_time or utc_now())
        if credentials.use_token:
            params["SecurityToken"] = credentials.token

        digest = hmac_sha256(credentials.secret_key.encode("utf-8"), self.string_to_sign(request))
        signature = base64.b64encode(digest).decode("ascii")
        params["Signature"] = signature
        return signature
