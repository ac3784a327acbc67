from ._version import __version__
from ._queue import PriorityQueue
from ._store import Handle, NodeStore
from ._fibheap import FibonacciHeap, fibheap, fh

__all__ = ('fh', 'fibheap', 'FibonacciHeap', 'PriorityQueue', 'Handle', 'NodeStore')
