"""An interactive ray tracer rendering simple bodies against a sky gradient."""

__version__ = "0.2.0"

__all__ = ["vector", "bodies", "scene", "timelog", "app"]