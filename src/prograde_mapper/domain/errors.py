class FormatError(ValueError):
    """Raised when a team mappings payload does not parse into a list of aliases."""
