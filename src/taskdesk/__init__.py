"""taskdesk: in-memory task tracker driven by a text menu."""

__version__ = "0.1.0"
