"""
User interface helpers for Release Viewer
"""
