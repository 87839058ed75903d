"""
Blocks component - block parsing and single-block extraction.
"""

from ._impl import (
    DEFAULT_NAMESPACE,
    RenderCallback,
    freeform_block,
    parse_blocks,
    render_block,
    render_blocks,
    serialize_attrs,
    serialize_block,
    serialize_blocks,
)
from .component import CONTENT_FILTER, first_instances_of_block, run
from .models import Block, BlockInstancesInput, BlockInstancesOutput

__all__ = [
    # Entry points
    "run",
    "first_instances_of_block",
    # Models
    "Block",
    "BlockInstancesInput",
    "BlockInstancesOutput",
    # Parser / renderer
    "RenderCallback",
    "freeform_block",
    "parse_blocks",
    "render_block",
    "render_blocks",
    "serialize_attrs",
    "serialize_block",
    "serialize_blocks",
    # Constants
    "CONTENT_FILTER",
    "DEFAULT_NAMESPACE",
]
