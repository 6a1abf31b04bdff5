"""Custom exception classes for network-profiles library."""


class NetworkProfileError(Exception):
    """Base exception for network profile errors."""

    pass


class MalformedConfig(NetworkProfileError, ValueError):
    """Raised when the declarative source cannot be parsed into the expected shape."""

    pass


class DuplicateNetwork(NetworkProfileError, ValueError):
    """Raised when two network entries share a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Network '{name}' is declared more than once")


class InvalidProfile(NetworkProfileError, ValueError):
    """Raised when a network profile violates an invariant.

    The reason is a fixed phrase describing the violated rule. It never
    carries the offending value, since that value may be secret material.
    """

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid profile for network '{name}': {reason}")


class UnknownNetwork(NetworkProfileError, LookupError):
    """Raised when the requested network is not declared."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Network '{name}' not found in configuration")


class PreconditionViolated(NetworkProfileError, RuntimeError):
    """Raised when an operation is called on a config in the wrong state."""

    pass


class MissingSecret(NetworkProfileError, LookupError):
    """Raised when a credential reference cannot be resolved to a value."""

    def __init__(self, name: str, reference: str):
        self.name = name
        self.reference = reference
        super().__init__(
            f"Credential '{reference}' for network '{name}' is not set in the secret source"
        )


class EndpointError(NetworkProfileError, RuntimeError):
    """Raised when the RPC endpoint of a network cannot be queried."""

    def __init__(self, name: str, message: str):
        self.name = name
        super().__init__(f"Endpoint for network '{name}': {message}")


class ChainIdMismatch(NetworkProfileError, ValueError):
    """Raised when an endpoint reports a different chain than the profile declares."""

    def __init__(self, name: str, expected: int, actual: int):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Network '{name}' expects chain id {expected} but endpoint reports {actual}"
        )
