"""
lox-scanner Command-Line Interface
==================================

- **loxscan**: scan a Lox script, or Lox lines typed at a prompt, and
  print the tokens

The tool is a Click-based CLI application.
"""

__all__ = ["loxscan"]
