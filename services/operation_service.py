"""
Operation service: one AWS API call through a boto3 client.
"""
import boto3
from typing import Any, Dict, Optional
from botocore import xform_name
from botocore.client import BaseClient
from botocore.exceptions import BotoCoreError, ClientError
from logger_config import get_logger
from .sts_service import Credentials

logger = get_logger(__name__)


class OperationService:
    """Service for invoking a single operation of one AWS service."""

    def __init__(
        self,
        service_name: str,
        region: str,
        credentials: Credentials,
        endpoint: Optional[str] = None
    ) -> None:
        """
        Initialize operation service.

        Args:
            service_name: boto3 service name (e.g. 's3', 'cloudformation')
            region: AWS region for the client
            credentials: Credentials to sign requests with
            endpoint: Optional endpoint override (local or mock endpoints)
        """
        self.service_name = service_name
        self.region = region
        self.credentials = credentials
        self.endpoint = endpoint
        self._client: Optional[BaseClient] = None

    @property
    def client(self) -> BaseClient:
        """Lazy initialization of the service client."""
        if self._client is None:
            client_kwargs = self.credentials.as_client_kwargs()
            if self.endpoint:
                client_kwargs['endpoint_url'] = self.endpoint
            self._client = boto3.client(
                self.service_name, region_name=self.region, **client_kwargs
            )
        return self._client

    def invoke(self, operation: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Send one operation request.

        Args:
            operation: API operation name in PascalCase
            params: Request parameters, passed through unchanged

        Returns:
            The raw response dictionary

        Raises:
            ClientError: If the service rejects the request
            ParamValidationError: If the SDK rejects the parameters
        """
        method = getattr(self.client, xform_name(operation))
        try:
            response = method(**params)
        except (ClientError, BotoCoreError) as e:
            logger.error(f'{self.service_name} {operation} failed: {str(e)}')
            raise

        logger.info(f'{self.service_name} {operation} succeeded in {self.region}')
        return response
