"""Signer interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from cumulus.runtime.credentials import ImmutableCredentials
from cumulus.runtime.request import Request


class AbstractSigner(ABC):
    """Adds authentication information to a wire request."""

    @abstractmethod
    def sign(
        self,
        request: Request,
        credentials: ImmutableCredentials,
        region: str,
        service: str,
        signing_time: Optional[datetime] = None,
    ) -> None:
        """Sign `request` in place.

        Args:
            request: Wire request with its endpoint resolved
            credentials: Keys for this attempt
            region: Region name used in the credential scope
            service: Service signing name used in the credential scope
            signing_time: Time to sign with; the current UTC time when omitted
        """


class NullSigner(AbstractSigner):
    """Leaves requests unsigned."""

    def sign(
        self,
        request: Request,
        credentials: ImmutableCredentials,
        region: str,
        service: str,
        signing_time: Optional[datetime] = None,
    ) -> None:
        return None
