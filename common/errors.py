"""
AlgoLab Errors
==============
Exceptions raised by the algorithm packages.

"Not found" is never an error: OrderedTree.search returns None.
"""


class AlgorithmError(Exception):
    """Base class for all library errors."""
    pass


class InvalidParameterError(AlgorithmError, ValueError):
    """A caller-supplied parameter is outside its valid range."""

    def __init__(self, name: str, value, requirement: str):
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name}={value!r}: {requirement}")


class NegativeCycleError(AlgorithmError):
    """A negative-weight cycle is reachable from the source vertex."""

    def __init__(self, source: int):
        self.source = source
        super().__init__(
            f"Graph contains negative weight cycle reachable from vertex {source}")
