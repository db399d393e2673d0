import contextlib

import pytest

from dualpq import PriorityQueue

class ComparisonError(Exception):
    pass


class Fragile:
    '''Orders like its payload; every comparison raises while armed.'''
    __slots__ = 'v',

    armed = False

    def __init__(self, v):
        self.v = v

    def _check(self):
        if Fragile.armed:
            raise ComparisonError(f'comparing {self!r}')

    def __eq__(self, other):
        self._check()
        if not isinstance(other, Fragile):
            return NotImplemented
        return self.v == other.v

    def __lt__(self, other):
        self._check()
        if not isinstance(other, Fragile):
            return NotImplemented
        return self.v < other.v

    def __hash__(self):
        return hash(self.v)

    def __repr__(self):
        return f'Fragile({self.v!r})'


@contextlib.contextmanager
def armed():
    Fragile.armed = True
    try:
        yield
    finally:
        Fragile.armed = False


class Counted:
    '''Orders like its payload and counts comparisons.'''
    __slots__ = 'v',

    comparisons = 0

    def __init__(self, v):
        self.v = v

    def __eq__(self, other):
        Counted.comparisons += 1
        return self.v == other.v

    def __lt__(self, other):
        Counted.comparisons += 1
        return self.v < other.v

    def __hash__(self):
        return hash(self.v)

    def __repr__(self):
        return f'Counted({self.v!r})'


class Bomb:
    '''Raises on any comparison.'''
    def __eq__(self, other):
        raise ComparisonError('Bomb')

    __ne__ = __lt__ = __le__ = __gt__ = __ge__ = __eq__
    __hash__ = object.__hash__

    def __repr__(self):
        return 'Bomb()'


def _build(pairs=()):
    queue = PriorityQueue()
    for key, value in pairs:
        queue.insert(key, value)
    return queue


@pytest.fixture
def build():
    return _build
