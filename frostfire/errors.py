class ConfigurationError(ValueError):
    """Raised when a level definition cannot produce a usable level."""
