"""Exceptions raised for structurally invalid allocation input."""


class AllocationError(ValueError):
    """Base class for input the allocation engine refuses to run on."""


class EmptyCatalogError(AllocationError):
    """The room catalog contains no rooms."""


class InvalidConfigurationError(AllocationError):
    """A strategy, minimum chunk or group size outside the accepted domain."""
