"""Catalogue bounded context — lessons and their available spaces."""

from protean.domain import Domain

# Domain Composition Root
catalogue = Domain(name="catalogue")
