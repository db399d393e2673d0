import copy
import itertools as it
import typing as tp

import attr

__all__ = ['Entry', 'EntryArena', 'by_key', 'by_value']

_next_handle = it.count().__next__

@attr.s(slots=True, auto_attribs=True, frozen=True, eq=False)
class Entry:
    '''
       One (key, value) pair stored in a queue.

       Entries compare by identity: two entries with equal content are
       still two entries.
    '''
    key   : tp.Any = attr.ib()
    value : tp.Any = attr.ib()


def by_key(entry : Entry) -> tp.Tuple:
    return (entry.key, entry.value)

def by_value(entry : Entry) -> tp.Tuple:
    return (entry.value, entry.key)


class EntryArena(tp.Mapping[int, Entry]):
    '''
       Owns the entries of one queue, addressed by stable integer handles.

       Handles come from a single process-wide counter, so a handle is never
       reused and later handles are always larger.
    '''
    __slots__ = '_entries',

    _entries : tp.Dict[int, Entry]

    def __init__(self, entries : tp.Optional[tp.Mapping[int, Entry]] = None):
        self._entries = dict() if entries is None else dict(entries)

    def __getitem__(self, handle : int) -> Entry:
        return self._entries[handle]

    def __iter__(self) -> tp.Iterator[int]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._entries!r})'

    def add(self, entry : Entry) -> int:
        handle = _next_handle()
        self._entries[handle] = entry
        return handle

    def release(self, handle : int) -> None:
        self._entries.pop(handle, None)

    def copy(self, memo : tp.Optional[dict] = None) -> 'EntryArena':
        '''
           Fresh entry records under the same handles.  Keys and values
           are deep copied when a deepcopy memo is given.
        '''
        if memo is None:
            entries = {h : Entry(e.key, e.value) for h, e in self._entries.items()}
        else:
            entries = {
                h : Entry(copy.deepcopy(e.key, memo), copy.deepcopy(e.value, memo))
                for h, e in self._entries.items()
            }
        return type(self)(entries)
