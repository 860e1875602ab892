"""Reading exceptions.

Raised at construction (or call) time when a collaborator does not satisfy
the expected protocol. The CLI reports them; the library does not recover.
"""


class AdapterError(TypeError):
    """Raised when an adapter or reader is given an object of the wrong shape."""
