"""
Schema service: block descriptors derived from botocore service models.

Input and output schemas mirror the AWS API shapes one to one, so they are
read from the service definitions that ship with botocore instead of being
written out per operation.
"""
import re
import botocore.session
from typing import Any, Dict, List, Optional, Tuple
from bs4 import BeautifulSoup
from botocore.model import OperationModel, ServiceModel, Shape
from logger_config import get_logger

logger = get_logger(__name__)

_WORD_PATTERN = re.compile(r'[a-z0-9]+|[A-Z]+\d*(?![a-z])|[A-Z][a-z0-9]*')
_SENTENCE_END = re.compile(r'(?<=[.!?])\s+(?=[A-Z"(])')

_STRING_TYPES = {'string', 'timestamp', 'blob'}
_NUMBER_TYPES = {'integer', 'long', 'float', 'double'}

REGION_FIELD = {
    'name': 'Region',
    'description': 'AWS region for this operation',
    'type': 'string',
    'required': True,
}

ASSUME_ROLE_FIELD = {
    'name': 'Assume Role ARN',
    'description': (
        'Optional IAM role ARN to assume before executing this operation. '
        'If provided, the block will use STS to assume this role and use '
        'the temporary credentials.'
    ),
    'type': 'string',
    'required': False,
}


def humanize(identifier: str) -> str:
    """
    Split a camel-case identifier into words.

    'CreateBucketConfiguration' -> 'Create Bucket Configuration',
    'ListObjectsV2' -> 'List Objects V2', 'maxResults' -> 'max Results'.
    """
    words = _WORD_PATTERN.findall(identifier)
    return ' '.join(words) if words else identifier


def first_sentence(documentation: Optional[str]) -> str:
    """Plain-text first sentence of an HTML documentation string."""
    if not documentation:
        return ''
    text = BeautifulSoup(documentation, 'html.parser').get_text(' ')
    text = ' '.join(text.split())
    return _SENTENCE_END.split(text, maxsplit=1)[0]


def shape_schema(shape: Shape, path: Tuple[str, ...] = ()) -> Dict[str, Any]:
    """
    JSON-Schema-like description of a botocore shape.

    Args:
        shape: The shape to describe
        path: Names of the structure shapes being expanded, used to stop
            recursive definitions

    Returns:
        Schema dictionary
    """
    type_name = shape.type_name

    if type_name in _STRING_TYPES:
        return {'type': 'string'}
    if type_name in _NUMBER_TYPES:
        return {'type': 'number'}
    if type_name == 'boolean':
        return {'type': 'boolean'}
    if type_name == 'list':
        return {'type': 'array', 'items': shape_schema(shape.member, path)}
    if type_name == 'map':
        return {
            'type': 'object',
            'additionalProperties': shape_schema(shape.value, path),
        }
    if type_name != 'structure':
        return {'type': 'object'}

    if shape.name in path or getattr(shape, 'is_document_type', False):
        return {'type': 'object'}

    nested_path = path + (shape.name,)
    schema: Dict[str, Any] = {
        'type': 'object',
        'properties': {
            member_name: shape_schema(member_shape, nested_path)
            for member_name, member_shape in shape.members.items()
        },
    }
    if shape.required_members:
        schema['required'] = list(shape.required_members)
    schema['additionalProperties'] = False
    return schema


def _simple_type(schema: Dict[str, Any]) -> Any:
    # Scalar fields carry the bare type name, nested ones the full schema
    if set(schema) == {'type'} and schema['type'] != 'object':
        return schema['type']
    return schema


class SchemaService:
    """Service for reading operation models and building block schemas."""

    def __init__(self) -> None:
        """Initialize schema service."""
        self._session: Optional[botocore.session.Session] = None
        self._service_models: Dict[str, ServiceModel] = {}

    @property
    def session(self) -> botocore.session.Session:
        """Lazy initialization of the botocore session."""
        if self._session is None:
            self._session = botocore.session.get_session()
        return self._session

    def service_model(self, service_name: str) -> ServiceModel:
        """Service model, loaded once per service."""
        if service_name not in self._service_models:
            logger.debug(f'Loading service model: {service_name}')
            self._service_models[service_name] = self.session.get_service_model(
                service_name
            )
        return self._service_models[service_name]

    def operation_model(self, service_name: str, operation: str) -> OperationModel:
        """
        Operation model for one API operation.

        Raises:
            OperationNotFoundError: If the service has no such operation
        """
        return self.service_model(service_name).operation_model(operation)

    def describe_operation(self, service_name: str, operation: str) -> str:
        """First sentence of the operation's documentation."""
        model = self.operation_model(service_name, operation)
        return first_sentence(model.documentation)

    def input_config(self, service_name: str, operation: str) -> Dict[str, Dict[str, Any]]:
        """
        Block input config: region and assumeRoleArn, then one field per
        request member.
        """
        config: Dict[str, Dict[str, Any]] = {
            'region': dict(REGION_FIELD),
            'assumeRoleArn': dict(ASSUME_ROLE_FIELD),
        }

        input_shape = self.operation_model(service_name, operation).input_shape
        if input_shape is None:
            return config

        required: List[str] = list(input_shape.required_members)
        root_path = (input_shape.name,)
        for member_name, member_shape in input_shape.members.items():
            config[member_name] = {
                'name': humanize(member_name),
                'description': first_sentence(member_shape.documentation),
                'type': _simple_type(shape_schema(member_shape, root_path)),
                'required': member_name in required,
            }
        return config

    def output_type(self, service_name: str, operation: str) -> Dict[str, Any]:
        """Block output schema; always tolerates properties it does not list."""
        properties: Dict[str, Any] = {}

        output_shape = self.operation_model(service_name, operation).output_shape
        if output_shape is not None:
            root_path = (output_shape.name,)
            for member_name, member_shape in output_shape.members.items():
                member_schema = shape_schema(member_shape, root_path)
                description = first_sentence(member_shape.documentation)
                if description:
                    member_schema['description'] = description
                properties[member_name] = member_schema

        return {
            'type': 'object',
            'properties': properties,
            'additionalProperties': True,
        }


_schema_service: Optional[SchemaService] = None


def get_schema_service() -> SchemaService:
    """Process-wide schema service sharing loaded service models."""
    global _schema_service
    if _schema_service is None:
        _schema_service = SchemaService()
    return _schema_service
