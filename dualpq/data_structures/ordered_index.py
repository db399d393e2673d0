import typing as tp

from sortedcontainers import SortedKeyList

from .entry import Entry, EntryArena

__all__ = ['OrderedIndex']

Order = tp.Callable[[Entry], tp.Tuple]

class OrderedIndex(tp.Sequence[int]):
    '''
       Sorted multiset of arena handles.

       A handle sorts by order(entry) followed by the handle itself, so
       every handle has exactly one position and entries of identical
       content sit in insertion order.  Positions are only ever found by
       comparing; removal at a known position never compares.
    '''
    __slots__ = '_arena', '_order', '_handles'

    _arena   : EntryArena
    _order   : Order
    _handles : SortedKeyList

    def __init__(self, arena : EntryArena, order : Order, handles : tp.Iterable[int] = ()):
        self._arena = arena
        self._order = order
        self._handles = SortedKeyList(handles, key=self.sort_key)

    def sort_key(self, handle : int) -> tp.Tuple:
        return (*self._order(self._arena[handle]), handle)

    @tp.overload
    def __getitem__(self, idx : int) -> int:
        ...

    @tp.overload
    def __getitem__(self, idx : slice) -> tp.Sequence[int]:
        ...

    def __getitem__(self, idx):
        return self._handles[idx]

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> tp.Iterator[int]:
        return iter(self._handles)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({list(self._handles)!r})'

    def add(self, handle : int) -> int:
        '''
           Inserts handle and returns its position.
           Nothing changes if a comparison raises.
        '''
        pos = self._handles.bisect_key_right(self.sort_key(handle))
        self._handles.add(handle)
        if pos >= len(self._handles) or self._handles[pos] != handle:
            # order of an entry changed between the two passes
            pos = next(i for i, h in enumerate(self._handles) if h == handle)
        return pos

    def update(self, handles : tp.Iterable[int]) -> None:
        self._handles.update(handles)

    def locate(self, handle : int) -> int:
        pos = self._handles.bisect_key_left(self.sort_key(handle))
        if pos >= len(self._handles) or self._handles[pos] != handle:
            raise KeyError(handle)
        return pos

    def lower_bound(self, prefix : tp.Tuple) -> int:
        '''
           Position of the first handle whose order key is not less than
           prefix.  A prefix sorts before every key it is a prefix of.
        '''
        return self._handles.bisect_key_left(prefix)

    def discard_at(self, pos : int) -> None:
        del self._handles[pos]
