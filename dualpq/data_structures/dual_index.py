import typing as tp

from .entry import Entry, EntryArena, by_key, by_value
from .ordered_index import OrderedIndex

__all__ = ['DualIndex']

class DualIndex:
    '''
       An entry arena with two orderings over the same handles:
       by_key sorts on (key, value), by_value sorts on (value, key).
    '''
    __slots__ = 'arena', 'by_key', 'by_value'

    arena    : EntryArena
    by_key   : OrderedIndex
    by_value : OrderedIndex

    def __init__(self,
            arena : tp.Optional[EntryArena] = None,
            key_handles : tp.Iterable[int] = (),
            value_handles : tp.Iterable[int] = (),
            ):
        self.arena = EntryArena() if arena is None else arena
        self.by_key = OrderedIndex(self.arena, by_key, key_handles)
        self.by_value = OrderedIndex(self.arena, by_value, value_handles)

    def __len__(self) -> int:
        return len(self.by_key)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({list(self.items())!r})'

    def items(self) -> tp.Iterator[tp.Tuple[tp.Any, tp.Any]]:
        ''' (key, value) pairs in key order '''
        arena = self.arena
        for handle in self.by_key:
            entry = arena[handle]
            yield entry.key, entry.value

    def first(self) -> Entry:
        return self.arena[self.by_value[0]]

    def last(self) -> Entry:
        return self.arena[self.by_value[-1]]

    def find_key(self, key) -> tp.Optional[int]:
        ''' handle of the first entry carrying key in key order '''
        pos = self.by_key.lower_bound((key,))
        if pos < len(self.by_key):
            handle = self.by_key[pos]
            if self.arena[handle].key == key:
                return handle
        return None

    def link(self, entry : Entry, rollback) -> int:
        '''
           Registers entry under a new handle in both orderings.
           Each completed step records its undo action with rollback.
        '''
        handle = self.arena.add(entry)
        rollback.push(self.arena.release, handle)
        pos = self.by_key.add(handle)
        rollback.push(self.by_key.discard_at, pos)
        pos = self.by_value.add(handle)
        rollback.push(self.by_value.discard_at, pos)
        return handle

    def locate(self, handle : int) -> tp.Tuple[int, int]:
        return self.by_key.locate(handle), self.by_value.locate(handle)

    def unlink(self, handle : int, key_pos : int, value_pos : int) -> None:
        self.by_key.discard_at(key_pos)
        self.by_value.discard_at(value_pos)
        self.arena.release(handle)

    def extend(self, entries : tp.Iterable[Entry]) -> None:
        ''' bulk insert; leaves self inconsistent if a comparison raises '''
        handles = [self.arena.add(entry) for entry in entries]
        self.by_key.update(handles)
        self.by_value.update(handles)

    def copy(self, memo : tp.Optional[dict] = None) -> 'DualIndex':
        return type(self)(self.arena.copy(memo), self.by_key, self.by_value)

    def _attest(self):
        key_handles = list(self.by_key)
        value_handles = list(self.by_value)
        assert len(key_handles) == len(value_handles) == len(self.arena)
        assert set(key_handles) == set(value_handles) == set(self.arena)

        for index, handles in ((self.by_key, key_handles), (self.by_value, value_handles)):
            for a, b in zip(handles, handles[1:]):
                assert index.sort_key(a) < index.sort_key(b), '\na: %s\nb: %s' % (a, b)
