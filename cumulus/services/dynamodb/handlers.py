"""DynamoDB pipeline customizations."""

import structlog

from cumulus.runtime.context import ExecutionContext
from cumulus.runtime.exceptions import ChecksumMismatchError
from cumulus.runtime.hashing import crc32
from cumulus.runtime.pipeline import PipelineHandler

logger = structlog.get_logger()

CRC32_HEADER = "x-amz-crc32"


class Crc32CheckHandler(PipelineHandler):
    """Validates response bodies against the `x-amz-crc32` header.

    Sits between the Unmarshaller and the HTTP handler, so a corrupted body
    is rejected before it is parsed and the retry handler can resend the
    request. Compressed responses are not checked since the checksum covers
    the encoded bytes.
    """

    def _check(self, context: ExecutionContext) -> None:
        response = context.response_context.http_response
        if response is None:
            return
        expected = response.header(CRC32_HEADER)
        if expected is None or response.header("content-encoding"):
            return
        actual = crc32(response.content)
        if not expected.isdigit() or int(expected) != actual:
            logger.warning(
                "response_checksum_mismatch",
                header=CRC32_HEADER,
                expected=expected,
                actual=actual,
            )
            raise ChecksumMismatchError(expected, actual, CRC32_HEADER)

    def invoke_sync(self, context: ExecutionContext) -> None:
        super().invoke_sync(context)
        self._check(context)

    async def invoke_async(self, context: ExecutionContext) -> None:
        await super().invoke_async(context)
        self._check(context)
