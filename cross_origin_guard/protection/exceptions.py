class InvalidConfiguration(ValueError):
    """Raised when trusted origins or bypass patterns are malformed.

    Always a startup-time programmer error; let it propagate so the app fails to boot.
    """
