"""
BL Toolkit Command-Line Interface
=================================

This package provides the command-line tool for the BL toolkit:

- **blparse**: parse BL programs and statements, pretty-print them,
  dump their trees or list their tokens

The tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["blparse"]
