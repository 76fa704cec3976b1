class SourceMapError(Exception):
    """Project layout could not be registered or a module could not be loaded."""
