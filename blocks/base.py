"""
Block definition: one AWS API operation behind the workflow block contract.

A block exposes ``name``, ``description``, ``inputs["default"]`` (config
schema plus the ``onEvent`` handler) and ``outputs["default"]`` (result
schema). Schemas are derived from the botocore service model on first
access.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional
from config import AppConfig
from logger_config import get_logger
from services.operation_service import OperationService
from services.schema_service import get_schema_service, humanize
from services.serialize import serialize_aws_response
from services.sts_service import resolve_credentials

logger = get_logger(__name__)

# Injected by the platform, never forwarded to the AWS operation
PLATFORM_FIELDS = ('region', 'assumeRoleArn')


@dataclass
class BlockInvocation:
    """One call of a block's handler."""

    input_config: Mapping[str, Any]
    app_config: AppConfig
    emit: Callable[[Dict[str, Any]], Any]


def split_input_config(input_config: Mapping[str, Any]):
    """
    Separate the platform fields from the operation parameters.

    Returns:
        Tuple of (region, assume_role_arn, command_input). Parameters left
        unset (None) are not forwarded.
    """
    region = input_config.get('region')
    assume_role_arn = input_config.get('assumeRoleArn')
    command_input = {
        key: value
        for key, value in input_config.items()
        if key not in PLATFORM_FIELDS and value is not None
    }
    return region, assume_role_arn, command_input


class Block:
    """A catalogue block wrapping a single AWS API operation."""

    def __init__(
        self,
        group: str,
        service: str,
        operation: str,
        serialize_response: bool = False,
        name: Optional[str] = None
    ) -> None:
        """
        Initialize block.

        Args:
            group: Catalogue group (e.g. 'vpc-security')
            service: boto3 service name (e.g. 'ec2')
            operation: API operation name in PascalCase
            serialize_response: Strip streams and cycles before emitting
            name: Display name (derived from the operation when omitted)
        """
        self.group = group
        self.service = service
        self.operation = operation
        self.serialize_response = serialize_response
        self.name = name or humanize(operation)
        self._description: Optional[str] = None
        self._config: Optional[Dict[str, Dict[str, Any]]] = None
        self._output_type: Optional[Dict[str, Any]] = None

    def __repr__(self) -> str:
        return f'<Block {self.key}>'

    @property
    def key(self) -> str:
        """Registry key, e.g. 's3.createBucket'."""
        return f'{self.group}.{self.operation[0].lower()}{self.operation[1:]}'

    @property
    def description(self) -> str:
        if self._description is None:
            self._description = get_schema_service().describe_operation(
                self.service, self.operation
            )
        return self._description

    @property
    def config(self) -> Dict[str, Dict[str, Any]]:
        """Input config schema, region and assumeRoleArn first."""
        if self._config is None:
            self._config = get_schema_service().input_config(
                self.service, self.operation
            )
        return self._config

    @property
    def output_type(self) -> Dict[str, Any]:
        if self._output_type is None:
            self._output_type = get_schema_service().output_type(
                self.service, self.operation
            )
        return self._output_type

    @property
    def inputs(self) -> Dict[str, Dict[str, Any]]:
        return {
            'default': {
                'config': self.config,
                'onEvent': self.on_event,
            }
        }

    @property
    def outputs(self) -> Dict[str, Dict[str, Any]]:
        return {
            'default': {
                'name': f'{self.name} Result',
                'description': f'Result from {self.operation} operation',
                'possiblePrimaryParents': ['default'],
                'type': self.output_type,
            }
        }

    def required_fields(self) -> List[str]:
        return [
            field_name
            for field_name, spec in self.config.items()
            if spec.get('required')
        ]

    def missing_required(self, input_config: Mapping[str, Any]) -> List[str]:
        """Required config fields absent (or None) in ``input_config``."""
        return [
            field_name
            for field_name in self.required_fields()
            if input_config.get(field_name) is None
        ]

    def on_event(self, invocation: BlockInvocation) -> None:
        """
        Run the operation and emit its response once.

        Credential, SDK and service errors are not caught here.

        Args:
            invocation: Input config, app config and emit callable
        """
        region, assume_role_arn, command_input = split_input_config(
            invocation.input_config
        )

        credentials = resolve_credentials(
            region, assume_role_arn, invocation.app_config
        )

        operation_service = OperationService(
            self.service,
            region,
            credentials,
            endpoint=invocation.app_config.endpoint
        )
        response = operation_service.invoke(self.operation, command_input)

        if self.serialize_response:
            response = serialize_aws_response(response)

        invocation.emit(response or {})
        logger.debug(f'Block {self.key} emitted its result')

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready descriptor (without the handler)."""
        return {
            'key': self.key,
            'name': self.name,
            'description': self.description,
            'service': self.service,
            'operation': self.operation,
            'inputs': {'default': {'config': self.config}},
            'outputs': self.outputs,
        }
