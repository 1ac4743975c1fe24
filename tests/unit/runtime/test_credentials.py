"""Unit tests for credential providers.

Tests cover:
- Static, session and anonymous credentials
- Environment credentials
- Refreshing credentials and AssumeRole
- Fallback resolution through botocore
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock, Mock, patch

import pytest

from cumulus.configuration import CredentialSettings
from cumulus.runtime.credentials import (
    AnonymousAWSCredentials,
    AssumeRoleAWSCredentials,
    BasicAWSCredentials,
    BotocoreCredentials,
    CredentialsRefreshState,
    EnvironmentVariablesAWSCredentials,
    FallbackCredentialsFactory,
    ImmutableCredentials,
    RefreshingAWSCredentials,
    SessionAWSCredentials,
)
from cumulus.runtime.exceptions import NoCredentialsError


class CountingCredentials(RefreshingAWSCredentials):
    def __init__(self, lifetime):
        super().__init__()
        self.lifetime = lifetime
        self.calls = 0

    def generate_new_credentials(self):
        self.calls += 1
        return CredentialsRefreshState(
            ImmutableCredentials(f"AKID{self.calls}", "secret", "token"),
            datetime.now(timezone.utc) + self.lifetime,
        )


@pytest.mark.unit
class TestStaticCredentials:
    """Test suite for fixed credential providers."""

    def test_basic_credentials(self):
        """Test basic credentials have no token."""
        creds = BasicAWSCredentials("AKID", "secret").get_credentials()

        assert creds.access_key == "AKID"
        assert creds.secret_key == "secret"
        assert not creds.use_token

    def test_session_credentials(self):
        """Test session credentials carry a token."""
        creds = SessionAWSCredentials("AKID", "secret", "tok").get_credentials()

        assert creds.use_token
        assert creds.token == "tok"

    @pytest.mark.parametrize("access_key,secret_key", [("", "s"), ("a", "")])
    def test_basic_credentials_require_keys(self, access_key, secret_key):
        """Test empty keys are rejected."""
        with pytest.raises(ValueError):
            BasicAWSCredentials(access_key, secret_key)

    def test_anonymous_credentials(self):
        """Test anonymous credentials resolve to None."""
        assert AnonymousAWSCredentials().get_credentials() is None

    def test_repr_hides_secret(self):
        """Test the secret key never appears in repr."""
        creds = ImmutableCredentials("AKID", "very-secret")

        assert "very-secret" not in repr(creds)


@pytest.mark.unit
class TestEnvironmentCredentials:
    """Test suite for EnvironmentVariablesAWSCredentials."""

    def test_from_settings(self):
        """Test credentials are built from CredentialSettings."""
        settings = CredentialSettings(
            access_key_id="AKID", secret_access_key="secret", session_token="tok"
        )

        creds = EnvironmentVariablesAWSCredentials(settings).get_credentials()

        assert creds == ImmutableCredentials("AKID", "secret", "tok")

    def test_missing_keys_raise(self):
        """Test incomplete settings raise NoCredentialsError."""
        settings = CredentialSettings(access_key_id="AKID", secret_access_key=None)

        with pytest.raises(NoCredentialsError):
            EnvironmentVariablesAWSCredentials(settings)


@pytest.mark.unit
class TestRefreshingCredentials:
    """Test suite for RefreshingAWSCredentials."""

    def test_cached_until_near_expiry(self):
        """Test credentials are reused while far from expiry."""
        provider = CountingCredentials(timedelta(hours=1))

        first = provider.get_credentials()
        second = provider.get_credentials()

        assert first is second
        assert provider.calls == 1

    def test_refreshed_inside_preempt_window(self):
        """Test credentials expiring within the window are regenerated."""
        provider = CountingCredentials(timedelta(minutes=1))

        provider.get_credentials()
        refreshed = provider.get_credentials()

        assert provider.calls == 2
        assert refreshed.access_key == "AKID2"

    def test_clear_forces_refresh(self):
        """Test clear_credentials drops the cached state."""
        provider = CountingCredentials(timedelta(hours=1))
        provider.get_credentials()

        provider.clear_credentials()
        provider.get_credentials()

        assert provider.calls == 2


@pytest.mark.unit
class TestAssumeRoleCredentials:
    """Test suite for AssumeRoleAWSCredentials."""

    def test_assume_role_calls_sts(self):
        """Test AssumeRole parameters and returned credentials."""
        sts = Mock()
        sts.assume_role.return_value = {
            "Credentials": {
                "AccessKeyId": "ASIA",
                "SecretAccessKey": "secret",
                "SessionToken": "token",
                "Expiration": datetime.now(timezone.utc) + timedelta(hours=1),
            }
        }
        provider = AssumeRoleAWSCredentials(
            "arn:aws:iam::123456789012:role/reader",
            role_session_name="report",
            external_id="ext",
            sts_client=sts,
        )

        creds = provider.get_credentials()

        sts.assume_role.assert_called_once_with(
            RoleArn="arn:aws:iam::123456789012:role/reader",
            RoleSessionName="report",
            DurationSeconds=3600,
            ExternalId="ext",
        )
        assert creds == ImmutableCredentials("ASIA", "secret", "token")

    def test_role_arn_required(self):
        """Test an empty role ARN is rejected."""
        with pytest.raises(ValueError):
            AssumeRoleAWSCredentials("")

    def test_source_credentials_used_for_sts_session(self):
        """Test source credentials configure the boto3 session."""
        provider = AssumeRoleAWSCredentials(
            "arn:aws:iam::123456789012:role/reader",
            source_credentials=BasicAWSCredentials("AKID", "secret"),
            region="ca-central-1",
        )

        with patch("cumulus.runtime.credentials.boto3.Session") as session_class:
            provider._get_sts_client()

        session_class.assert_called_once_with(
            region_name="ca-central-1",
            aws_access_key_id="AKID",
            aws_secret_access_key="secret",
            aws_session_token=None,
        )
        session_class.return_value.client.assert_called_once_with("sts")


@pytest.mark.unit
class TestFallbackCredentialsFactory:
    """Test suite for FallbackCredentialsFactory."""

    def test_environment_first(self):
        """Test complete environment settings are preferred."""
        settings = CredentialSettings(access_key_id="AKID", secret_access_key="secret")

        provider = FallbackCredentialsFactory.get_credentials(settings)

        assert isinstance(provider, EnvironmentVariablesAWSCredentials)

    def test_botocore_chain(self):
        """Test botocore's chain is used when the environment has no keys."""
        settings = CredentialSettings(access_key_id=None, secret_access_key=None)
        resolved = MagicMock()
        resolved.get_frozen_credentials.return_value = Mock(
            access_key="ASIA", secret_key="secret", token="tok"
        )

        with patch("cumulus.runtime.credentials.botocore.session.Session") as session_class:
            session_class.return_value.get_credentials.return_value = resolved
            provider = FallbackCredentialsFactory.get_credentials(settings)

        assert isinstance(provider, BotocoreCredentials)
        assert provider.get_credentials() == ImmutableCredentials("ASIA", "secret", "tok")

    def test_nothing_resolves(self):
        """Test NoCredentialsError when no source has credentials."""
        settings = CredentialSettings(access_key_id=None, secret_access_key=None)

        with patch("cumulus.runtime.credentials.botocore.session.Session") as session_class:
            session_class.return_value.get_credentials.return_value = None

            with pytest.raises(NoCredentialsError):
                FallbackCredentialsFactory.get_credentials(settings)
