"""Minimal Lisp expressions: literals and groups, with scanning, visiting, printing, encoding, hashing and storage."""

__version__ = "0.1.0"