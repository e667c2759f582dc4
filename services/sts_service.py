"""
STS service and credential resolution for block invocations.
"""
import time
import boto3
from dataclasses import dataclass
from typing import Any, Dict, Optional, TYPE_CHECKING
from botocore.exceptions import BotoCoreError, ClientError
from config import AppConfig
from logger_config import get_logger

if TYPE_CHECKING:
    from mypy_boto3_sts import STSClient
else:
    STSClient = Any

logger = get_logger(__name__)

SESSION_NAME_PREFIX = 'flows-session'


@dataclass(frozen=True)
class Credentials:
    """Credential triple used to sign one service call."""

    access_key_id: Optional[str]
    secret_access_key: Optional[str]
    session_token: Optional[str] = None

    @classmethod
    def from_app_config(cls, app_config: AppConfig) -> "Credentials":
        return cls(
            access_key_id=app_config.access_key_id,
            secret_access_key=app_config.secret_access_key,
            session_token=app_config.session_token,
        )

    def as_client_kwargs(self) -> Dict[str, Optional[str]]:
        """Keyword arguments for ``boto3.client``."""
        return {
            'aws_access_key_id': self.access_key_id,
            'aws_secret_access_key': self.secret_access_key,
            'aws_session_token': self.session_token,
        }


def generate_session_name() -> str:
    """Time-based role session name, unique per invocation."""
    return f'{SESSION_NAME_PREFIX}-{int(time.time() * 1000)}'


class StsService:
    """Service for STS operations signed with the app credentials."""

    def __init__(
        self,
        region: str,
        credentials: Credentials,
        endpoint: Optional[str] = None
    ) -> None:
        """
        Initialize STS service.

        Args:
            region: AWS region the STS client is scoped to
            credentials: Credentials used to call AssumeRole
            endpoint: Optional endpoint override
        """
        self.region = region
        self.credentials = credentials
        self.endpoint = endpoint
        self._client: Optional[STSClient] = None

    @property
    def client(self) -> STSClient:
        """Lazy initialization of STS client."""
        if self._client is None:
            client_kwargs = self.credentials.as_client_kwargs()
            if self.endpoint:
                client_kwargs['endpoint_url'] = self.endpoint
            self._client = boto3.client(
                'sts', region_name=self.region, **client_kwargs
            )
        return self._client

    def assume_role(
        self,
        role_arn: str,
        session_name: Optional[str] = None
    ) -> Credentials:
        """
        Assume an IAM role and return its temporary credentials.

        Args:
            role_arn: ARN of the role to assume
            session_name: Role session name (generated when omitted)

        Returns:
            Temporary credentials issued for the role

        Raises:
            ClientError: If STS rejects the request
        """
        try:
            response = self.client.assume_role(
                RoleArn=role_arn,
                RoleSessionName=session_name or generate_session_name()
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f'STS assume_role failed for {role_arn}: {str(e)}')
            raise

        issued = response['Credentials']
        logger.info(f'Assumed role {role_arn}')
        return Credentials(
            access_key_id=issued['AccessKeyId'],
            secret_access_key=issued['SecretAccessKey'],
            session_token=issued['SessionToken'],
        )


def resolve_credentials(
    region: str,
    assume_role_arn: Optional[str],
    app_config: AppConfig
) -> Credentials:
    """
    Pick the credentials for one block invocation.

    Without a role ARN the app credentials are used as-is. With one, the
    role is assumed on every call; nothing is cached and failures are not
    retried or replaced by the static credentials.

    Args:
        region: AWS region of the invocation
        assume_role_arn: Optional role to assume first
        app_config: App-level credentials and endpoint override

    Returns:
        Credentials to build the service client with
    """
    static_credentials = Credentials.from_app_config(app_config)
    if not assume_role_arn:
        return static_credentials

    sts_service = StsService(region, static_credentials, app_config.endpoint)
    return sts_service.assume_role(assume_role_arn)
