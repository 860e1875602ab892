"""Car-service composition exceptions.

These are programming errors raised at construction time. The presentation
layer (the click CLI) reports them; nothing inside the library recovers them.
"""


class CompositionError(TypeError):
    """Raised when a modifier is given something that is not a service to wrap."""
