"""Ordering bounded context — orders placed at checkout.

An order records who bought which lesson units. Orders are written once
and never modified afterwards.
"""

from protean.domain import Domain

from shared.logging import get_logger

ordering = Domain(name="ordering")

logger = get_logger(__name__)
