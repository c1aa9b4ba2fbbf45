class DfsPlatformError(Exception):
    """Base class for platform contract violations."""


class TraversalInProgressError(DfsPlatformError, RuntimeError):
    """A run was started while another run on the same engine is pending."""


class GraphLockedError(DfsPlatformError, RuntimeError):
    """The graph was edited while a traversal holds it frozen."""
