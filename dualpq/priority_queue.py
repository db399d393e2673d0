import functools as ft
import typing as tp

from .classutil import ValidContainer
from .data_structures import DualIndex, Entry
from .errors import EmptyQueueError, KeyNotFoundError
from .transaction import Rollback

__all__ = ['PriorityQueue', 'swap']

K = tp.TypeVar('K')
V = tp.TypeVar('V')

@ft.total_ordering
class PriorityQueue(tp.Generic[K, V]):
    '''
       Priority queue of (key, value) pairs.  Keys and values may repeat,
       and inserting the same pair twice stores it twice.

       Entries are kept in two orderings: by (key, value) and by
       (value, key).  Extremal access reads the ends of the value ordering.

       Every mutating method either completes or, if a comparison of keys
       or values raises, leaves the queue as it was and lets the exception
       through.

       A queue that has been moved from (see move, move_from) reports a
       size of 0 and ignores delete_min and delete_max.  It can be compared,
       cleared, swapped or assigned to; anything else raises MovedFromError.
    '''
    __slots__ = '_state',

    _state : ValidContainer

    def __init__(self, queue : tp.Optional['PriorityQueue[K, V]'] = None):
        self._state = ValidContainer()
        if queue is None:
            self._state.data = DualIndex()
        elif isinstance(queue, PriorityQueue):
            if queue.valid:
                self._state.data = queue._storage.copy()
        else:
            raise TypeError(f'Cannot build {type(self).__name__} from {type(queue).__name__}')

    @property
    def _storage(self) -> DualIndex:
        return self._state.data

    @property
    def valid(self) -> bool:
        return self._state.valid

    def size(self) -> int:
        if not self._state.valid:
            return 0
        return len(self._state.data)

    def empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.empty()

    # copy and move

    def copy(self) -> 'PriorityQueue[K, V]':
        return type(self)(self)

    def __copy__(self) -> 'PriorityQueue[K, V]':
        return self.copy()

    def __deepcopy__(self, memo : dict) -> 'PriorityQueue[K, V]':
        other = type(self).__new__(type(self))
        other._state = ValidContainer()
        if self.valid:
            other._state.data = self._storage.copy(memo)
        return other

    def copy_from(self, other : 'PriorityQueue[K, V]') -> None:
        ''' replaces the contents of self by a copy of other '''
        if other is self:
            return
        replacement = PriorityQueue(other)
        self.swap(replacement)

    def move(self) -> 'PriorityQueue[K, V]':
        ''' returns a queue owning the contents of self; self is left moved from '''
        other = type(self).__new__(type(self))
        other._state = ValidContainer()
        other._state.take(self._state)
        return other

    def move_from(self, other : 'PriorityQueue[K, V]') -> None:
        ''' takes the contents of other; other is left moved from '''
        if not isinstance(other, PriorityQueue):
            raise TypeError(f'Cannot move from {type(other).__name__}')
        self._state.take(other._state)

    def swap(self, other : 'PriorityQueue[K, V]') -> None:
        if not isinstance(other, PriorityQueue):
            raise TypeError(f'Cannot swap with {type(other).__name__}')
        if other is not self:
            self._state.swap(other._state)

    def clear(self) -> None:
        self._state.data = DualIndex()

    # insertion

    def insert(self, key : K, value : V) -> None:
        storage = self._storage
        entry = Entry(key, value)
        with Rollback() as rollback:
            storage.link(entry, rollback)

    # extremal access

    def _first(self) -> Entry:
        storage = self._storage
        if not storage:
            raise EmptyQueueError()
        return storage.first()

    def _last(self) -> Entry:
        storage = self._storage
        if not storage:
            raise EmptyQueueError()
        return storage.last()

    def min_value(self) -> V:
        return self._first().value

    def max_value(self) -> V:
        return self._last().value

    def min_key(self) -> K:
        ''' key of the entry holding the minimum value '''
        return self._first().key

    def max_key(self) -> K:
        ''' key of the entry holding the maximum value '''
        return self._last().key

    # removal

    def delete_min(self) -> None:
        '''
           Removes the entry with the smallest value; among equal values
           the one with the smallest key.  Does nothing on an empty or
           moved-from queue.
        '''
        if not self._state.valid:
            return
        storage = self._state.data
        if storage:
            handle = storage.by_value[0]
            storage.unlink(handle, storage.by_key.locate(handle), 0)

    def delete_max(self) -> None:
        '''
           Removes the entry with the largest value; among equal values
           the one with the largest key.  Does nothing on an empty or
           moved-from queue.
        '''
        if not self._state.valid:
            return
        storage = self._state.data
        if storage:
            value_pos = len(storage) - 1
            handle = storage.by_value[value_pos]
            storage.unlink(handle, storage.by_key.locate(handle), value_pos)

    def change_value(self, key : K, value : V) -> None:
        '''
           Gives one entry carrying key the new value.  When several entries
           carry key, the one with the smallest value is changed (the oldest
           of them if their values are equal too).

           Raises KeyNotFoundError if no entry carries key.
        '''
        storage = self._storage
        old = storage.find_key(key)
        if old is None:
            raise KeyNotFoundError(key)

        entry = Entry(key, value)
        with Rollback() as rollback:
            storage.link(entry, rollback)
            key_pos, value_pos = storage.locate(old)
        storage.unlink(old, key_pos, value_pos)

    def merge(self, other : 'PriorityQueue[K, V]') -> None:
        '''
           Moves every entry of other into self, leaving other empty.
           If this fails, both queues are left as they were.
        '''
        if not isinstance(other, PriorityQueue):
            raise TypeError(f'Cannot merge {type(other).__name__}')
        if other is self:
            return

        source = other._storage
        storage = self._storage
        if not source:
            return

        snapshot = PriorityQueue(self)
        with Rollback() as rollback:
            rollback.push(self._state.swap, snapshot._state)
            storage.extend(source.arena[handle] for handle in source.by_key)
        other.clear()

    # comparison

    def _items(self) -> tp.Iterator[tp.Tuple[K, V]]:
        if not self._state.valid:
            return iter(())
        return self._state.data.items()

    def __eq__(self, other) -> bool:
        if not isinstance(other, PriorityQueue):
            return NotImplemented
        if self.size() != other.size():
            return False
        for (k1, v1), (k2, v2) in zip(self._items(), other._items()):
            if not (k1 == k2 and v1 == v2):
                return False
        return True

    def __lt__(self, other) -> bool:
        if not isinstance(other, PriorityQueue):
            return NotImplemented
        for (k1, v1), (k2, v2) in zip(self._items(), other._items()):
            if not k1 == k2:
                return k1 < k2
            if not v1 == v2:
                return v1 < v2
        return self.size() < other.size()

    __hash__ = None

    def __repr__(self) -> str:
        if not self.valid:
            return f'{self.__class__.__name__}(<moved-from>)'
        return f'{self.__class__.__name__}({list(self._items())!r})'

    def _attest(self):
        if self.valid:
            self._storage._attest()


def swap(lhs : PriorityQueue, rhs : PriorityQueue) -> None:
    lhs.swap(rhs)
