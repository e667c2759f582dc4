"""
Block registry.

Blocks are built once from the catalogue and looked up by key
('<group>.<operation in camelCase>', e.g. 's3.createBucket').
"""
from typing import Dict, List, Optional
from utils.exceptions import UnknownBlockError
from .base import Block, BlockInvocation
from .catalog import CATALOG, SERIALIZED_GROUPS

_registry: Optional[Dict[str, Block]] = None


def _build_registry() -> Dict[str, Block]:
    registry: Dict[str, Block] = {}
    for group, (service, operations) in CATALOG.items():
        for operation in operations:
            block = Block(
                group,
                service,
                operation,
                serialize_response=group in SERIALIZED_GROUPS
            )
            registry[block.key] = block
    return registry


def registry() -> Dict[str, Block]:
    global _registry
    if _registry is None:
        _registry = _build_registry()
    return _registry


def get_block(key: str) -> Block:
    """
    Look up a block by key.

    Raises:
        UnknownBlockError: If no block is registered under ``key``
    """
    try:
        return registry()[key]
    except KeyError:
        raise UnknownBlockError(f"Unknown block: {key}", block_key=key) from None


def list_blocks(group: Optional[str] = None) -> List[Block]:
    """All blocks, or those of one group, in catalogue order."""
    return [
        block for block in registry().values()
        if group is None or block.group == group
    ]


def groups() -> List[str]:
    return list(CATALOG)


__all__ = [
    'Block',
    'BlockInvocation',
    'get_block',
    'groups',
    'list_blocks',
    'registry',
]
