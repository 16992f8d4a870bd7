"""
File: src/minirag/__init__.py
Minimal retrieval-augmented generation engine.
"""

__version__ = "0.1.0"
