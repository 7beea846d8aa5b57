"""CareerHub: internal job board with a locally persisted job store."""

__version__ = "0.1.0"
