"""SimpleDB client configuration."""

from typing import Optional

from pydantic import Field

from cumulus.configuration.client import ClientConfig


class SimpleDBConfig(ClientConfig):
    """ClientConfig for SimpleDB.

    Requests are signed with signature version 2, whose signature covers
    the host but no credential scope; `authentication_region` is ignored.
    """

    authentication_service_name: Optional[str] = Field(
        default="sdb", alias="CUMULUS_AUTHENTICATION_SERVICE_NAME"
    )
