from .errors import MovedFromError

__all__ = ['ValidContainer']

class ValidContainer:
    '''wrapper class that allows data to be marked invalid '''
    __slots__ = '_data', '_valid'

    def __init__(self):
        self.mark_invalid()

    def mark_invalid(self):
        self._valid = False
        self._data = None

    @property
    def valid(self) -> bool:
        return self._valid

    @property
    def data(self):
        if not self.valid:
            raise MovedFromError()
        return self._data

    @data.setter
    def data(self, data):
        self._valid = True
        self._data = data

    def take(self, other : 'ValidContainer') -> None:
        '''
           Steals the contents of other, which is left invalid.
           If other is invalid, so is self afterwards.
        '''
        if other is self:
            return
        self._data, self._valid = other._data, other._valid
        other.mark_invalid()

    def swap(self, other : 'ValidContainer') -> None:
        self._data, other._data = other._data, self._data
        self._valid, other._valid = other._valid, self._valid

    def __repr__(self):
        if self.valid:
            return repr(self._data)
        else:
            return 'Invalid'
