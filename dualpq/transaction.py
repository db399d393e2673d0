import functools as ft
import logging
import typing as tp

__all__ = ['Rollback']

logger = logging.getLogger(__name__)

class Rollback:
    '''
       Context manager collecting undo actions for a multi-step mutation.

       Each step that succeeds pushes the action that reverts it. If the
       managed block raises, the recorded actions run newest first and the
       exception propagates unchanged. On a clean exit they are dropped.

       Undo actions must not fail.

       with Rollback() as rollback:
           pos = index.add(handle)
           rollback.push(index.discard_at, pos)
           ...
    '''
    __slots__ = '_undo',

    _undo : tp.List[tp.Callable[[], None]]

    def __init__(self):
        self._undo = []

    def push(self, f : tp.Callable[..., None], *args) -> None:
        self._undo.append(ft.partial(f, *args))

    def __len__(self) -> int:
        return len(self._undo)

    def __enter__(self) -> 'Rollback':
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        undo, self._undo = self._undo, []
        if exc_type is not None and undo:
            logger.debug('rolling back %d step(s) after %s', len(undo), exc_type.__name__)
            for action in reversed(undo):
                action()
        return False
