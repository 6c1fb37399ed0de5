"""seval Language Server package.

This package provides:
- A pygls-based Language Server for seval expression files.
- A static indexer that reports lex/parse problems and bound names.

Note: The language server never evaluates user buffers; it only tokenizes and parses them.
"""

__all__ = [
    "server",
    "indexer",
]
