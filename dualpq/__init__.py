import logging

from .errors import PriorityQueueError, EmptyQueueError, KeyNotFoundError, MovedFromError
from .priority_queue import PriorityQueue, swap

logging.getLogger(__name__).addHandler(logging.NullHandler())
