"""
Errors raised while turning OData metadata into a service model.
"""


class MetadataStructureError(ValueError):
    """The metadata document lacks an element the model cannot be built without."""
