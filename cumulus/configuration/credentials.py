"""Static credential settings read from the environment."""

from typing import Optional

from pydantic import Field

from cumulus.configuration.base import SdkSettings


class CredentialSettings(SdkSettings):
    """Credentials supplied through environment variables.

    Environment Variables:
        AWS_ACCESS_KEY_ID: Access key id
        AWS_SECRET_ACCESS_KEY: Secret access key
        AWS_SESSION_TOKEN: Session token for temporary credentials
        AWS_PROFILE: Named profile used by the fallback credential chain

    Example:
        ```python
        from cumulus.configuration import CredentialSettings

        creds = CredentialSettings()
        if creds.is_complete:
            ...
        ```
    """

    access_key_id: Optional[str] = Field(default=None, alias="AWS_ACCESS_KEY_ID")
    secret_access_key: Optional[str] = Field(
        default=None, alias="AWS_SECRET_ACCESS_KEY"
    )
    session_token: Optional[str] = Field(default=None, alias="AWS_SESSION_TOKEN")
    profile: Optional[str] = Field(default=None, alias="AWS_PROFILE")

    @property
    def is_complete(self) -> bool:
        """True when both the access key id and the secret key are present."""
        return bool(self.access_key_id and self.secret_access_key)
