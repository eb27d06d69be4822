"""
Helpers for a DITA conversion toolchain: running external XSL-FO processors
and upgrading DITA documents from DTDs to W3C XML schemas or RELAX NG.
"""

__version__ = '1.0.0'
