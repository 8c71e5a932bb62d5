"""Two-player Pong built on a small entity-component-system core."""

__version__ = "0.1.0"