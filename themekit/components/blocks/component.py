"""
Blocks component - print the first instances of a block type.

Useful for templates that show only, say, the first image or gallery of
a post (e.g. in an excerpt) instead of the full content.

Invariants:
- I1: Only top-level blocks are considered; freeform HTML never matches
- I2: At most `instances` blocks are rendered, in document order
- I3: Nothing is rendered and found is False when no block matches
- I4: Matched HTML is passed through the `the_content` filter once
"""

from __future__ import annotations

import logging

from themekit.core.entities import PageContext
from themekit.core.ports.hooks import FiltersPort

from ._impl import RenderCallback, parse_blocks, render_block
from .models import BlockInstancesInput, BlockInstancesOutput

logger = logging.getLogger(__name__)

CONTENT_FILTER = "the_content"


def _extract(
    block_name: str,
    content: str | None,
    instances: int,
    ctx: PageContext | None,
    filters: FiltersPort | None,
    callbacks: dict[str, RenderCallback] | None,
) -> BlockInstancesOutput:
    if not content and ctx is not None:
        content = ctx.post.content
    if not content:
        return BlockInstancesOutput(found=False, warnings=["No content to search"])

    # A request for zero instances still prints the first match
    limit = max(instances, 1)
    count = 0
    rendered: list[str] = []

    for block in parse_blocks(content):
        if block.block_name is None:
            continue
        if block.block_name != block_name:
            continue

        count += 1
        rendered.append(render_block(block, callbacks))
        if count >= limit:
            break

    blocks_content = "".join(rendered)
    if not blocks_content:
        logger.debug("No '%s' block found", block_name)
        return BlockInstancesOutput(
            found=False,
            count=count,
            warnings=[f"No '{block_name}' block found"],
        )

    if filters is not None:
        blocks_content = filters.apply_filters(CONTENT_FILTER, blocks_content)

    return BlockInstancesOutput(found=True, html=blocks_content, count=count)


def first_instances_of_block(
    block_name: str,
    content: str | None = None,
    instances: int = 1,
    ctx: PageContext | None = None,
    filters: FiltersPort | None = None,
    callbacks: dict[str, RenderCallback] | None = None,
) -> tuple[bool, str]:
    """
    Render the first `instances` blocks named `block_name`.

    Args:
        block_name: Block type, e.g. `core/image`.
        content: Document to search; the current post's content when empty.
        instances: How many matching blocks to render.
        ctx: Page context supplying the fallback content.
        filters: Optional filters port for the `the_content` hook.
        callbacks: Optional dynamic block render callbacks.

    Returns:
        (found, html). html is "" when found is False.
    """
    out = _extract(block_name, content, instances, ctx, filters, callbacks)
    return out.found, out.html


# --- Component Entry Points ---


def run(
    inp: BlockInstancesInput,
    *,
    filters: FiltersPort | None = None,
    callbacks: dict[str, RenderCallback] | None = None,
) -> BlockInstancesOutput:
    """Extract and render the first instances of a block type."""
    return _extract(inp.block_name, inp.content, inp.instances, inp.context, filters, callbacks)
