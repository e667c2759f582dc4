"""
Unit tests for service layer.

This module provides tests for the STS, operation and schema services.
"""
import pytest
from unittest.mock import Mock, patch
from botocore.exceptions import ClientError
from config import AppConfig
from services.operation_service import OperationService
from services.sts_service import (
    Credentials,
    StsService,
    generate_session_name,
    resolve_credentials,
)

APP_CONFIG = AppConfig(
    access_key_id='AKIASTATIC',
    secret_access_key='static-secret',
    session_token='static-token',
)

ASSUMED_RESPONSE = {
    'Credentials': {
        'AccessKeyId': 'ASIATEMP',
        'SecretAccessKey': 'temp-secret',
        'SessionToken': 'temp-token',
    }
}


class TestCredentials:
    """Tests for Credentials."""

    def test_from_app_config(self):
        """Test static credentials are copied from app config unchanged."""
        credentials = Credentials.from_app_config(APP_CONFIG)
        assert credentials == Credentials('AKIASTATIC', 'static-secret', 'static-token')

    def test_as_client_kwargs(self):
        """Test boto3 keyword arguments."""
        credentials = Credentials('AKIA', 'secret', None)
        assert credentials.as_client_kwargs() == {
            'aws_access_key_id': 'AKIA',
            'aws_secret_access_key': 'secret',
            'aws_session_token': None,
        }

    def test_generate_session_name(self):
        """Test session names are prefixed and time-based."""
        name = generate_session_name()
        assert name.startswith('flows-session-')
        assert name.rsplit('-', 1)[1].isdigit()


class TestStsService:
    """Tests for StsService."""

    def test_init(self):
        """Test StsService initialization."""
        service = StsService('us-east-1', Credentials('a', 'b'))
        assert service.region == 'us-east-1'
        assert service._client is None

    @patch('services.sts_service.boto3')
    def test_client_lazy_init(self, mock_boto3):
        """Test lazy initialization of STS client without endpoint."""
        service = StsService('eu-west-1', Credentials('a', 'b', 'c'))
        client = service.client

        assert client == mock_boto3.client.return_value
        mock_boto3.client.assert_called_once_with(
            'sts',
            region_name='eu-west-1',
            aws_access_key_id='a',
            aws_secret_access_key='b',
            aws_session_token='c',
        )

    @patch('services.sts_service.boto3')
    def test_client_endpoint_override(self, mock_boto3):
        """Test endpoint override is passed to the STS client."""
        service = StsService('us-east-1', Credentials('a', 'b'), 'http://localhost:4566')
        service.client

        _, kwargs = mock_boto3.client.call_args
        assert kwargs['endpoint_url'] == 'http://localhost:4566'

    @patch('services.sts_service.boto3')
    def test_assume_role(self, mock_boto3):
        """Test assume_role returns the temporary credentials."""
        mock_client = Mock()
        mock_client.assume_role.return_value = ASSUMED_RESPONSE
        mock_boto3.client.return_value = mock_client

        service = StsService('us-east-1', Credentials('a', 'b'))
        credentials = service.assume_role(
            'arn:aws:iam::123456789012:role/deploy', session_name='flows-session-1'
        )

        assert credentials == Credentials('ASIATEMP', 'temp-secret', 'temp-token')
        mock_client.assume_role.assert_called_once_with(
            RoleArn='arn:aws:iam::123456789012:role/deploy',
            RoleSessionName='flows-session-1'
        )

    @patch('services.sts_service.boto3')
    def test_assume_role_error_propagates(self, mock_boto3):
        """Test STS failures are raised unchanged."""
        mock_client = Mock()
        mock_client.assume_role.side_effect = ClientError(
            {'Error': {'Code': 'AccessDenied', 'Message': 'not trusted'}},
            'AssumeRole'
        )
        mock_boto3.client.return_value = mock_client

        service = StsService('us-east-1', Credentials('a', 'b'))
        with pytest.raises(ClientError):
            service.assume_role('arn:aws:iam::123456789012:role/deploy')


class TestResolveCredentials:
    """Tests for resolve_credentials."""

    @patch('services.sts_service.boto3')
    def test_without_role_uses_static_credentials(self, mock_boto3):
        """Test no role ARN means static credentials and no STS call."""
        credentials = resolve_credentials('us-east-1', None, APP_CONFIG)

        assert credentials == Credentials.from_app_config(APP_CONFIG)
        mock_boto3.client.assert_not_called()

    @patch('services.sts_service.boto3')
    def test_empty_role_uses_static_credentials(self, mock_boto3):
        """Test an empty role ARN is treated as absent."""
        resolve_credentials('us-east-1', '', APP_CONFIG)
        mock_boto3.client.assert_not_called()

    @patch('services.sts_service.boto3')
    def test_with_role_assumes_role_with_static_credentials(self, mock_boto3):
        """Test the STS client is signed with the static credentials."""
        mock_boto3.client.return_value.assume_role.return_value = ASSUMED_RESPONSE

        credentials = resolve_credentials(
            'us-west-2', 'arn:aws:iam::123456789012:role/deploy', APP_CONFIG
        )

        assert credentials.access_key_id == 'ASIATEMP'
        mock_boto3.client.assert_called_once_with(
            'sts',
            region_name='us-west-2',
            aws_access_key_id='AKIASTATIC',
            aws_secret_access_key='static-secret',
            aws_session_token='static-token',
        )
        _, kwargs = mock_boto3.client.return_value.assume_role.call_args
        assert kwargs['RoleArn'] == 'arn:aws:iam::123456789012:role/deploy'
        assert kwargs['RoleSessionName'].startswith('flows-session-')

    @patch('services.sts_service.boto3')
    def test_role_is_assumed_on_every_call(self, mock_boto3):
        """Test assumed credentials are not cached between invocations."""
        mock_boto3.client.return_value.assume_role.return_value = ASSUMED_RESPONSE

        for _ in range(2):
            resolve_credentials('us-east-1', 'arn:aws:iam::123456789012:role/deploy', APP_CONFIG)

        assert mock_boto3.client.return_value.assume_role.call_count == 2


class TestOperationService:
    """Tests for OperationService."""

    def test_init(self):
        """Test OperationService initialization."""
        service = OperationService('s3', 'us-east-1', Credentials('a', 'b'))
        assert service.service_name == 's3'
        assert service._client is None

    @pytest.mark.parametrize('operation,method', [
        ('CreateBucket', 'create_bucket'),
        ('ListObjectsV2', 'list_objects_v2'),
        ('DescribeDBSecurityGroups', 'describe_db_security_groups'),
    ])
    @patch('services.operation_service.boto3')
    def test_invoke_maps_operation_to_method(self, mock_boto3, operation, method):
        """Test API operation names map onto boto3 method names."""
        mock_client = Mock(spec=[method])
        getattr(mock_client, method).return_value = {}
        mock_boto3.client.return_value = mock_client

        service = OperationService('s3', 'us-east-1', Credentials('a', 'b'))
        service.invoke(operation, {})

        getattr(mock_client, method).assert_called_once_with()

    @patch('services.operation_service.boto3')
    def test_client_lazy_init(self, mock_boto3):
        """Test lazy initialization of the service client."""
        service = OperationService('cloudformation', 'eu-central-1', Credentials('a', 'b', 'c'))
        client = service.client

        assert client == mock_boto3.client.return_value
        mock_boto3.client.assert_called_once_with(
            'cloudformation',
            region_name='eu-central-1',
            aws_access_key_id='a',
            aws_secret_access_key='b',
            aws_session_token='c',
        )

    @patch('services.operation_service.boto3')
    def test_client_endpoint_override(self, mock_boto3):
        """Test endpoint override is passed to the service client."""
        service = OperationService('s3', 'us-east-1', Credentials('a', 'b'), 'http://localhost:4566')
        service.client

        _, kwargs = mock_boto3.client.call_args
        assert kwargs['endpoint_url'] == 'http://localhost:4566'

    @patch('services.operation_service.boto3')
    def test_invoke(self, mock_boto3):
        """Test invoke calls the mapped method with the parameters."""
        mock_client = Mock()
        mock_client.describe_stack_events.return_value = {'StackEvents': []}
        mock_boto3.client.return_value = mock_client

        service = OperationService('cloudformation', 'us-east-1', Credentials('a', 'b'))
        response = service.invoke('DescribeStackEvents', {'StackName': 'web'})

        assert response == {'StackEvents': []}
        mock_client.describe_stack_events.assert_called_once_with(StackName='web')

    @patch('services.operation_service.boto3')
    def test_invoke_error_propagates(self, mock_boto3):
        """Test service errors are raised unchanged."""
        mock_client = Mock()
        mock_client.create_bucket.side_effect = ClientError(
            {'Error': {'Code': 'BucketAlreadyExists', 'Message': 'taken'}},
            'CreateBucket'
        )
        mock_boto3.client.return_value = mock_client

        service = OperationService('s3', 'us-east-1', Credentials('a', 'b'))
        with pytest.raises(ClientError) as exc_info:
            service.invoke('CreateBucket', {'Bucket': 'taken'})

        assert exc_info.value.response['Error']['Code'] == 'BucketAlreadyExists'
