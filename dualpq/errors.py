__all__ = ['PriorityQueueError', 'EmptyQueueError', 'KeyNotFoundError', 'MovedFromError']

class PriorityQueueError(Exception):
    '''Base class of the errors raised by the queue itself'''


class EmptyQueueError(PriorityQueueError, LookupError):
    def __init__(self, message : str = 'Invalid operation on empty queue'):
        super().__init__(message)


class KeyNotFoundError(PriorityQueueError, KeyError):
    def __init__(self, key):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Key doesn't exist in queue: {self.key!r}"


class MovedFromError(PriorityQueueError, AttributeError):
    def __init__(self, message : str = 'Queue has been moved from'):
        super().__init__(message)
