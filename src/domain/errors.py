class PersistenceError(Exception):
    """The backing store could not be written. In-memory state was rolled back."""
