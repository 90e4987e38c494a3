"""Authentication module for the Tencent Cloud client."""

import logging
from typing import Tuple

from tencentcloud.common.credential import Credential
from tencentcloud.common.profile.client_profile import ClientProfile
from tencentcloud.common.profile.http_profile import HttpProfile

from .errors import ConfigurationError
from .models import TencentCloudConfig

logger = logging.getLogger(__name__)


class TencentCloudAuthenticator:
    """Build SDK credentials and client profiles from provider configuration."""

    def __init__(self, config: TencentCloudConfig):
        """Initialize authenticator with configuration."""
        self.config = config

    def authenticate(self) -> Tuple[Credential, ClientProfile]:
        """
        Create the credential and client profile used by every service client.

        Returns:
            Tuple of (credential, client_profile)

        Raises:
            ConfigurationError: If credentials or region are missing
        """
        missing = [
            name for name in ("region", "secret_id", "secret_key")
            if not getattr(self.config, name)
        ]
        if missing:
            logger.error(f"Cannot authenticate, missing settings: {', '.join(missing)}")
            raise ConfigurationError(
                f"Missing Tencent Cloud settings: {', '.join(missing)}"
            )

        credential = self._create_credential()
        profile = self._create_client_profile()
        logger.debug(
            f"Prepared Tencent Cloud credentials for secret id "
            f"{self._mask(self.config.secret_id)} in region {self.config.region}"
        )
        return credential, profile

    def _create_credential(self) -> Credential:
        """Create an API key credential."""
        return Credential(self.config.secret_id, self.config.secret_key)

    def _create_client_profile(self) -> ClientProfile:
        """Create the client profile carrying the request timeout."""
        http_profile = HttpProfile(reqTimeout=self.config.request_timeout)
        if self.config.root_domain:
            http_profile.rootDomain = self.config.root_domain
        return ClientProfile(httpProfile=http_profile)

    @staticmethod
    def _mask(value: str) -> str:
        if len(value) <= 8:
            return "****"
        return f"{value[:4]}****{value[-4:]}"
