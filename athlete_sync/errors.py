"""
Exception taxonomy for a sync request.

Fatal errors propagate to the caller; the non-fatal ones are raised by a
collaborator and absorbed at the stage boundary that owns them.
"""


class SyncError(Exception):
    """Base class for every sync failure."""
    pass


class InvalidInputError(SyncError):
    """URL missing or outside the results-hosting domain."""
    pass


class NavigationError(SyncError):
    """A page could not be loaded."""
    pass


class NavigationTimeoutError(NavigationError):
    """A page did not load within its timeout."""
    pass


class PrimaryNavigationTimeoutError(NavigationTimeoutError):
    """Primary page did not load within its timeout."""
    pass


class PRMarkerWaitTimeout(SyncError):
    """PR markers never appeared; extraction proceeds on what loaded."""
    pass


class TeamPageError(SyncError):
    """Team page navigation or parse failure (degrades team metadata only)."""
    pass


class OperationTimeoutError(SyncError):
    """The caller's overall ceiling was exceeded; no record is returned."""
    pass
