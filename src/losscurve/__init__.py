"""Interactive cross-entropy loss curve explorer."""

__version__ = "0.1.0"
