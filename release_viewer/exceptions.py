"""
Exceptions raised by Release Viewer
"""


class ReleaseLoadError(Exception):
    """Raised when a release dataset cannot be fetched or decoded"""

    def __init__(self, source, message):
        self.source = source
        super().__init__(f"Failed to load releases from '{source}': {message}")
