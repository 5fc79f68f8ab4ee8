"""Ray tracer support: OBJ/MTL models, mesh utilities, PNG type descriptions, scene element creators and renderer options."""

__version__ = "1.0.0"