"""Credential providers.

Every client holds an `AWSCredentials` object. The pipeline asks it for an
`ImmutableCredentials` snapshot before each signing attempt, so refreshing
providers can rotate keys between retries.

Usage:
    from cumulus.runtime.credentials import AssumeRoleAWSCredentials

    credentials = AssumeRoleAWSCredentials(
        role_arn="arn:aws:iam::123456789012:role/reader",
        role_session_name="nightly-report",
    )
    client = DynamoDBClient(credentials=credentials, region="ca-central-1")
"""

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import boto3  # type: ignore
import botocore.session  # type: ignore
import structlog

from cumulus.configuration.credentials import CredentialSettings
from cumulus.runtime.exceptions import NoCredentialsError

logger = structlog.get_logger()


@dataclass(frozen=True)
class ImmutableCredentials:
    """A snapshot of keys used to sign one request."""

    access_key: str
    secret_key: str
    token: Optional[str] = None

    @property
    def use_token(self) -> bool:
        return bool(self.token)

    def __repr__(self) -> str:
        return f"ImmutableCredentials(access_key={self.access_key!r}, use_token={self.use_token})"


class AWSCredentials(ABC):
    """Source of credentials for a client."""

    @abstractmethod
    def get_credentials(self) -> Optional[ImmutableCredentials]:
        """Return current credentials, or None for anonymous access."""


class BasicAWSCredentials(AWSCredentials):
    """Fixed access key and secret key."""

    def __init__(self, access_key: str, secret_key: str):
        if not access_key:
            raise ValueError("access_key is required")
        if not secret_key:
            raise ValueError("secret_key is required")
        self._credentials = ImmutableCredentials(access_key, secret_key)

    def get_credentials(self) -> ImmutableCredentials:
        return self._credentials


class SessionAWSCredentials(AWSCredentials):
    """Fixed temporary credentials including a session token."""

    def __init__(self, access_key: str, secret_key: str, token: str):
        if not access_key:
            raise ValueError("access_key is required")
        if not secret_key:
            raise ValueError("secret_key is required")
        if not token:
            raise ValueError("token is required")
        self._credentials = ImmutableCredentials(access_key, secret_key, token)

    def get_credentials(self) -> ImmutableCredentials:
        return self._credentials


class AnonymousAWSCredentials(AWSCredentials):
    """No credentials; requests are sent unsigned."""

    def get_credentials(self) -> None:
        return None


class EnvironmentVariablesAWSCredentials(AWSCredentials):
    """Credentials from AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY and AWS_SESSION_TOKEN.

    Raises:
        NoCredentialsError: If the key pair is not present in the environment.
    """

    def __init__(self, settings: Optional[CredentialSettings] = None):
        settings = settings or CredentialSettings()
        if not settings.is_complete:
            raise NoCredentialsError(
                "AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY are not set"
            )
        self._credentials = ImmutableCredentials(
            settings.access_key_id,
            settings.secret_access_key,
            settings.session_token,
        )

    def get_credentials(self) -> ImmutableCredentials:
        return self._credentials


@dataclass
class CredentialsRefreshState:
    credentials: ImmutableCredentials
    expiration: datetime


class RefreshingAWSCredentials(AWSCredentials):
    """Credentials that expire and are regenerated shortly before they do.

    Subclasses implement `generate_new_credentials`. Refresh is serialized
    with a lock so concurrent callers trigger a single refresh.
    """

    preempt_expiry = timedelta(minutes=5)

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._current: Optional[CredentialsRefreshState] = None

    @abstractmethod
    def generate_new_credentials(self) -> CredentialsRefreshState:
        """Fetch a fresh set of credentials and their expiration."""

    def _should_update(self) -> bool:
        if self._current is None:
            return True
        return datetime.now(timezone.utc) >= self._current.expiration - self.preempt_expiry

    def get_credentials(self) -> ImmutableCredentials:
        with self._lock:
            if self._should_update():
                state = self.generate_new_credentials()
                expiration = state.expiration
                if expiration.tzinfo is None:
                    expiration = expiration.replace(tzinfo=timezone.utc)
                    state = CredentialsRefreshState(state.credentials, expiration)
                self._current = state
                logger.debug(
                    "credentials_refreshed",
                    provider=type(self).__name__,
                    expiration=expiration.isoformat(),
                )
            return self._current.credentials

    def clear_credentials(self) -> None:
        with self._lock:
            self._current = None


class AssumeRoleAWSCredentials(RefreshingAWSCredentials):
    """Temporary credentials from STS AssumeRole.

    Args:
        role_arn: Role to assume
        role_session_name: Name recorded for the assumed role session
        source_credentials: Credentials used to call STS. boto3's default
            chain is used when omitted.
        duration_seconds: Lifetime of the issued credentials
        external_id: Optional external id required by the role's trust policy
        region: Region of the STS endpoint
        sts_client: Preconfigured STS client
    """

    def __init__(
        self,
        role_arn: str,
        role_session_name: str = "CumulusSession",
        source_credentials: Optional[AWSCredentials] = None,
        duration_seconds: int = 3600,
        external_id: Optional[str] = None,
        region: Optional[str] = None,
        sts_client: Any = None,
    ):
        super().__init__()
        if not role_arn:
            raise ValueError("role_arn is required")
        self.role_arn = role_arn
        self.role_session_name = role_session_name
        self.source_credentials = source_credentials
        self.duration_seconds = duration_seconds
        self.external_id = external_id
        self.region = region
        self._sts_client = sts_client

    def _get_sts_client(self) -> Any:
        if self._sts_client is not None:
            return self._sts_client
        session_config: Dict[str, Any] = {}
        if self.region:
            session_config["region_name"] = self.region
        source = self.source_credentials.get_credentials() if self.source_credentials else None
        if source is not None:
            session_config["aws_access_key_id"] = source.access_key
            session_config["aws_secret_access_key"] = source.secret_key
            session_config["aws_session_token"] = source.token
        return boto3.Session(**session_config).client("sts")

    def generate_new_credentials(self) -> CredentialsRefreshState:
        params: Dict[str, Any] = {
            "RoleArn": self.role_arn,
            "RoleSessionName": self.role_session_name,
            "DurationSeconds": self.duration_seconds,
        }
        if self.external_id:
            params["ExternalId"] = self.external_id

        logger.info("assuming_role", role_arn=self.role_arn, session_name=self.role_session_name)
        assumed = self._get_sts_client().assume_role(**params)
        creds = assumed["Credentials"]
        return CredentialsRefreshState(
            credentials=ImmutableCredentials(
                creds["AccessKeyId"],
                creds["SecretAccessKey"],
                creds["SessionToken"],
            ),
            expiration=creds["Expiration"],
        )


class BotocoreCredentials(AWSCredentials):
    """Adapter over a botocore credential object from the default chain.

    botocore handles refresh for instance profiles, SSO and web identity.
    """

    def __init__(self, credentials: Any):
        self._credentials = credentials

    def get_credentials(self) -> ImmutableCredentials:
        frozen = self._credentials.get_frozen_credentials()
        return ImmutableCredentials(frozen.access_key, frozen.secret_key, frozen.token)


class FallbackCredentialsFactory:
    """Resolve credentials when a client is created without any.

    Order: environment variables, then botocore's credential chain (shared
    config and credential files, container and instance metadata).
    """

    @staticmethod
    def get_credentials(settings: Optional[CredentialSettings] = None) -> AWSCredentials:
        """Return the first credentials source that resolves.

        Raises:
            NoCredentialsError: If no source provides credentials.
        """
        settings = settings or CredentialSettings()
        if settings.is_complete:
            logger.debug("credentials_resolved", source="environment")
            return EnvironmentVariablesAWSCredentials(settings)

        session = botocore.session.Session(profile=settings.profile)
        resolved = session.get_credentials()
        if resolved is None:
            raise NoCredentialsError()
        logger.debug(
            "credentials_resolved",
            source="botocore",
            method=getattr(resolved, "method", None),
        )
        return BotocoreCredentials(resolved)
