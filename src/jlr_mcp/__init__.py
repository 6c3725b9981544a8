"""Jerusalem light rail schedules and station resolution over MCP."""

__version__ = "0.1.0"
