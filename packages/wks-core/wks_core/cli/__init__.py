"""
WKS CLI - Command-line interface for workspace documents.

Document Commands:
- wks show <path> - Load a document and summarize it
- wks save <path> - Re-save a document, splitting its collections
- wks artifacts <path> - List a document's artifact directories
"""

from .main import cli

__all__ = ["cli"]
