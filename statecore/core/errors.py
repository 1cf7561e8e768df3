"""
Exception types for reducer composition.
"""


class ConfigurationError(Exception):
    """Raised when a reducer fails the shape probes run at composition time."""
    pass


class RuntimeContractViolation(Exception):
    """Raised when a reducer returns UNDEFINED for a live action."""
    pass


class InvalidArgumentError(TypeError):
    """Raised when a public entry point receives an argument of the wrong kind."""
    pass
