"""
Superheroes - Hero Dataset API

A read-only superhero dataset served over HTTP, MCP and the command line,
with fuzzy name search and deterministic battle stories.
"""

__version__ = "0.1.0"
