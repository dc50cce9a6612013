"""
Release Viewer - browse, filter and sort software release records
"""

__version__ = "1.2.0"
