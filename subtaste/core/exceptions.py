class TaxonomyError(ValueError):
    """Raised when a taxonomy cannot be loaded or fails validation."""
