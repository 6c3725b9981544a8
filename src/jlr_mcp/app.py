"""MCP application instance.

This module exists to avoid circular import issues when running with `python -m`.
All tool modules should import `mcp` from here, not from server.py.
"""

from mcp.server.fastmcp import FastMCP

mcp = FastMCP(
    "Jerusalem Light Rail",
    instructions=(
        "Jerusalem light rail information - station lookup by Hebrew name, "
        "schedules between stations, and the nearest station to a landmark. "
        'Example: "הצג לי את זמן הרכבות הקרובות מנווה יעקב צפון לסיירת דוכיפת"'
    ),
)
