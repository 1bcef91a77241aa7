"""
CallZero MCP server package.

This package exposes the CallZero HTTP API as MCP tools for:
- Placing, scheduling and cancelling AI phone calls
- Reading call status, transcripts and share links
- Credit balance lookups
- Storing and searching memories about contacts and tasks
- Searching public form templates

Tool inputs are validated locally before being forwarded to the backend.
"""

__version__ = "0.1.0"
