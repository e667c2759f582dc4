"""
Lambda handler functions for running catalogue blocks.

These handlers stand in for the workflow host: they look up the block,
check required inputs, run it against an in-process emitter and report
failures through the lambda_handler decorator.
"""
from typing import Any, Dict
from blocks import BlockInvocation, get_block, list_blocks
from config import AppConfig, get_config
from events import EventEmitter
from logger_config import get_logger
from services.serialize import serialize_aws_response
from utils.decorators import lambda_handler
from utils.exceptions import ValidationError

logger = get_logger(__name__)


def _app_config(event: Dict[str, Any]) -> AppConfig:
    # Explicit app config wins; otherwise use the environment
    if event.get('appConfig'):
        return AppConfig.from_dict(event['appConfig'])
    return get_config()


@lambda_handler
def invoke_block(event, context):
    """
    Run one block.

    Event shape: {"block": "<key>", "inputConfig": {...}, "appConfig": {...}}
    (appConfig optional).
    """
    block_key = event.get('block')
    if not block_key:
        raise ValidationError('Event is missing "block"', field='block')

    block = get_block(block_key)
    input_config = event.get('inputConfig') or {}

    missing = block.missing_required(input_config)
    if missing:
        raise ValidationError(
            f'{block.name} is missing required input: {", ".join(missing)}',
            missing=missing
        )

    emitter = EventEmitter()
    invocation = BlockInvocation(
        input_config=input_config,
        app_config=_app_config(event),
        emit=emitter.emit
    )

    logger.info(f'Running block {block.key} in {input_config.get("region")}')
    block.on_event(invocation)

    # Lambda returns JSON; raw responses carry datetimes
    return {'block': block.key, 'result': serialize_aws_response(emitter.last)}


@lambda_handler
def describe_blocks(event, context):
    """
    Describe the catalogue.

    {"block": "<key>"} returns that block's full descriptor; otherwise a
    summary of every block, optionally filtered by {"group": "<group>"}.
    """
    event = event or {}
    if event.get('block'):
        return get_block(event['block']).to_dict()

    return {
        'blocks': [
            {
                'key': block.key,
                'name': block.name,
                'group': block.group,
                'service': block.service,
                'operation': block.operation,
            }
            for block in list_blocks(event.get('group'))
        ]
    }
