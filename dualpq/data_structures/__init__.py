from .entry import Entry, EntryArena, by_key, by_value
from .ordered_index import OrderedIndex
from .dual_index import DualIndex
