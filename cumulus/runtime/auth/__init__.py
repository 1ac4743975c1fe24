"""Request signers."""

from cumulus.runtime.auth.base import AbstractSigner, NullSigner
from cumulus.runtime.auth.sigv2 import QueryStringSigner
from cumulus.runtime.auth.sigv4 import AWS4Signer, AWS4SigningResult

__all__ = [
    "AWS4Signer",
    "AWS4SigningResult",
    "AbstractSigner",
    "NullSigner",
    "QueryStringSigner",
]
