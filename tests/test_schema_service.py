"""
Unit tests for schema derivation from botocore service models.
"""
import pytest
from services.schema_service import (
    SchemaService,
    first_sentence,
    get_schema_service,
    humanize,
)


@pytest.fixture(scope='module')
def schema_service():
    return SchemaService()


class TestHumanize:
    """Tests for humanize."""

    @pytest.mark.parametrize('identifier,expected', [
        ('CreateBucketConfiguration', 'Create Bucket Configuration'),
        ('ListObjectsV2', 'List Objects V2'),
        ('AuthorizeDBSecurityGroupIngress', 'Authorize DB Security Group Ingress'),
        ('maxResults', 'max Results'),
        ('include', 'include'),
        ('ACL', 'ACL'),
    ])
    def test_humanize(self, identifier, expected):
        assert humanize(identifier) == expected


class TestFirstSentence:
    """Tests for first_sentence."""

    def test_strips_html_and_keeps_first_sentence(self):
        doc = '<p>Returns all stack related events. For more, see <a href="#">docs</a>.</p>'
        assert first_sentence(doc) == 'Returns all stack related events.'

    def test_collapses_whitespace(self):
        doc = '<p>The name of the\n   bucket to create.</p>'
        assert first_sentence(doc) == 'The name of the bucket to create.'

    def test_empty(self):
        assert first_sentence('') == ''
        assert first_sentence(None) == ''


class TestSchemaService:
    """Tests for SchemaService against real service models."""

    def test_service_model_cached(self, schema_service):
        """Test service models load once per service."""
        model = schema_service.service_model('s3')
        assert schema_service.service_model('s3') is model

    def test_get_schema_service_singleton(self):
        assert get_schema_service() is get_schema_service()

    def test_input_config_platform_fields_first(self, schema_service):
        """Test region and assumeRoleArn lead every config."""
        config = schema_service.input_config('s3', 'CreateBucket')

        assert list(config)[:2] == ['region', 'assumeRoleArn']
        assert config['region']['required'] is True
        assert config['assumeRoleArn']['required'] is False

    def test_create_bucket_input_config(self, schema_service):
        """Test S3 CreateBucket request members become config fields."""
        config = schema_service.input_config('s3', 'CreateBucket')

        assert config['Bucket'] == {
            'name': 'Bucket',
            'description': config['Bucket']['description'],
            'type': 'string',
            'required': True,
        }
        assert config['ObjectLockEnabledForBucket']['type'] == 'boolean'
        assert config['ACL']['required'] is False

        nested = config['CreateBucketConfiguration']
        assert nested['name'] == 'Create Bucket Configuration'
        assert nested['type']['type'] == 'object'
        assert nested['type']['additionalProperties'] is False
        assert nested['type']['properties']['LocationConstraint'] == {'type': 'string'}

    def test_map_and_recursive_shapes(self, schema_service):
        """Test maps use additionalProperties and recursion is cut off."""
        config = schema_service.input_config('dynamodb', 'DeleteItem')

        key_type = config['Key']['type']
        assert key_type['type'] == 'object'
        attribute_value = key_type['additionalProperties']
        assert attribute_value['properties']['S'] == {'type': 'string'}
        assert attribute_value['properties']['M']['additionalProperties'] == {'type': 'object'}
        assert attribute_value['properties']['L']['items'] == {'type': 'object'}

    def test_list_of_structures(self, schema_service):
        """Test list members describe their item structure."""
        output = schema_service.output_type('cloudformation', 'DescribeStackEvents')

        stack_events = output['properties']['StackEvents']
        assert stack_events['type'] == 'array'
        assert 'StackId' in stack_events['items']['properties']
        assert 'StackId' in stack_events['items']['required']
        assert stack_events['description']

    def test_output_type_is_permissive(self, schema_service):
        """Test output schemas accept properties they do not list."""
        output = schema_service.output_type('s3', 'CreateBucket')

        assert output['type'] == 'object'
        assert output['additionalProperties'] is True
        assert output['properties']['Location']['type'] == 'string'

    def test_describe_operation(self, schema_service):
        """Test descriptions are plain text."""
        description = schema_service.describe_operation('cloudformation', 'DescribeStackEvents')

        assert description
        assert '<' not in description
