"""zapctl - Remove macOS applications together with everything they left behind."""

__version__ = "0.1.0"
