class ConcurrentModificationError(RuntimeError):
    """Raised when a HashMap is structurally changed while being iterated."""
