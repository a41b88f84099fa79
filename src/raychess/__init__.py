"""raychess: a ray-based chess rules engine."""

__version__ = "0.1.0"
