"""MCP (Model Context Protocol) server module for Japanese route search.

This module provides an MCP server implementation that exposes Yahoo! Transit
route search through the Model Context Protocol.
"""

from .server import TransitMCPServer, main

__all__ = ["TransitMCPServer", "main"]
