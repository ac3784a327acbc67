from __future__ import annotations
from typing import Any, ClassVar, Dict, Iterable, Iterator, List, Optional, \
	Tuple, TypeVar, Union

import logging

from ._utility import Comparable, check_invariants, sphinx_build
from ._queue import PriorityQueue
from ._store import Handle, NodeStore

T = TypeVar('T', bound=Comparable)

logger = logging.getLogger(__name__)

class FibonacciHeap(PriorityQueue[T,Handle]):
	r'''
	Mutable Fibonacci heap

	Meant for algorithms that lower priorities of queued items,
	such as Dijkstra's shortest paths or Prim's spanning trees.

	Create one with :func:`fibheap` or :func:`fh`, or by calling
	the class with no arguments for an empty heap.

	Insert, peek, merge and decrease-key are amortized :math:`O(1)`,
	extract-minimum and delete are amortized :math:`O(\log{n})`.
	Elements only need to support ``<``. Operations are not stable:
	equal elements may be extracted in any order.

	The implementation follows Fredman and Tarjan,
	"Fibonacci heaps and their uses in improved network
	optimization algorithms", Journal of the ACM 34:3 (1987) pp 596-615.
	Nodes are kept in a :class:`NodeStore` arena and refer to each
	other by slot index.

	>>> heap = fibheap([42, 10])
	>>> heap.find_minimum()
	10
	>>> heap.merge(fh(2))
	fibheap([2, 10, 42])
	>>> heap.extract_minimum()
	2
	>>> handle = heap.insert(50)
	>>> heap.decrease_key(handle, 1)
	>>> heap
	fibheap([1, 10, 42])
	>>> heap.delete(handle)
	>>> heap
	fibheap([10, 42])
	'''

	__slots__ = ('_store', '_roots', '_min', '_size')

	if not sphinx_build:
		_store: NodeStore[T]
		_roots: Dict[int,None]
		_min: Optional[int]
		_size: int

	_name: ClassVar[str] = 'fibheap'

	def __new__(cls):
		self = super().__new__(cls)
		self._store = NodeStore()
		self._roots = {}
		self._min = None
		self._size = 0
		return self

	def find_minimum(self) -> Optional[T]:
		r'''
		Return the smallest element, or ``None`` if the heap is empty

		:math:`O(1)`

		>>> fibheap([3, 1, 2]).find_minimum()
		1
		>>> fibheap().find_minimum() is None
		True
		'''
		if self._min is None:
			return None
		return self._store.node(self._min)._value

	def insert(self, value:T) -> Handle:
		r'''
		Add an element as a new single-node tree

		:math:`O(1)`

		>>> heap = fibheap([3])
		>>> handle = heap.insert(1)
		>>> heap.get(handle)
		1
		'''
		handle = self._store.allocate(value)
		self._add_root(handle._index)
		self._size += 1
		if check_invariants: self._verify()
		return handle

	def merge(self, other:Union[FibonacciHeap[T],Iterable[T]]) -> FibonacciHeap[T]:
		r'''
		Move every element of ``other`` into this heap and return it

		:math:`O(m)` where :math:`m` is the size of ``other``,
		since its nodes move into this heap's arena

		``other`` is left empty. Handles issued by ``other``
		are stale afterwards, in both heaps. Any other iterable
		is inserted element by element and left untouched.

		>>> heap, other = fh(3, 1), fh(2)
		>>> heap.merge(other)
		fibheap([1, 2, 3])
		>>> other
		fibheap([])
		'''
		if other is self:
			raise ValueError('cannot merge a heap into itself')
		if not isinstance(other, FibonacciHeap):
			for value in other:
				self.insert(value)
			return self
		store, source = self._store, other._store
		moved: Dict[int,int] = {}
		for index in list(source):
			moved[index] = store.put(source.release(index))
		for index in moved.values():
			node = store.node(index)
			if node._parent is not None:
				node._parent = moved[node._parent]
			node._children = dict.fromkeys(moved[i] for i in node._children)
		for index in other._roots:
			self._roots[moved[index]] = None
		if other._min is not None:
			index = moved[other._min]
			if self._min is None or self._less(index, self._min):
				self._min = index
		self._size += other._size
		logger.debug('merged %d nodes, %d roots', len(moved), len(other._roots))
		other.clear()
		if check_invariants: self._verify()
		return self

	def extract_minimum(self) -> Optional[T]:
		r'''
		Remove and return the smallest element,
		or ``None`` if the heap is empty

		amortized :math:`O(\log{n})`

		>>> heap = fibheap([2, 3, 1])
		>>> [heap.extract_minimum() for _ in range(4)]
		[1, 2, 3, None]
		'''
		if self._min is None:
			return None
		store = self._store
		index, self._min = self._min, None
		self._remove_root(index)
		node = store.remove(store.handle(index))
		self._size -= 1
		for child in node._children:
			promoted = store.node(child)
			promoted._parent = None
			promoted._marked = False
			self._roots[child] = None
		if self._roots:
			self._consolidate()
			self._min = self._scan_minimum()
		if check_invariants: self._verify()
		return node._value

	def decrease_key(self, handle:Handle, value:T) -> None:
		r'''
		Replace the element behind ``handle`` with a smaller one

		amortized :math:`O(1)`

		Does nothing if the handle is stale, belongs to another heap,
		or if ``value`` is greater than the current element.

		>>> heap = fibheap([10])
		>>> handle = heap.insert(42)
		>>> heap.decrease_key(handle, 2)
		>>> heap.find_minimum()
		2
		>>> heap.decrease_key(handle, 11)
		>>> heap.find_minimum()
		2
		'''
		store = self._store
		index = store.index(handle)
		if index is None:
			logger.debug('decrease_key ignored stale handle %r', handle)
			return
		node = store.node(index)
		if node._value < value:
			return
		node._value = value
		parent = node._parent
		if parent is None:
			if self._less(index, self._min):
				self._min = index
		elif value < store.node(parent)._value:
			# the node becomes a root before its ancestors, which fixes
			# the root order seen by the next consolidation
			self._cut(index)
			self._cascading_cut(parent)
		if check_invariants: self._verify()

	def delete(self, handle:Handle) -> None:
		r'''
		Remove the element behind ``handle``

		amortized :math:`O(\log{n})`

		The node is handled as though its key had been decreased below
		every other element: it is cut loose, becomes the minimum, and
		is then extracted. Does nothing if the handle is stale.

		>>> heap = fibheap([1, 3])
		>>> handle = heap.insert(2)
		>>> heap.delete(handle)
		>>> heap
		fibheap([1, 3])
		>>> heap.delete(handle)
		>>> len(heap)
		2
		'''
		index = self._store.index(handle)
		if index is None:
			logger.debug('delete ignored stale handle %r', handle)
			return
		parent = self._store.node(index)._parent
		if parent is not None:
			self._cut(index)
			self._cascading_cut(parent)
		self._min = index
		self.extract_minimum()

	def get(self, handle:Handle, default:Any=None) -> Any:
		r'''
		Return the element behind ``handle``,
		or ``default`` if the handle is stale

		:math:`O(1)`

		>>> heap = fibheap()
		>>> handle = heap.insert('a')
		>>> heap.get(handle)
		'a'
		>>> heap.pop()
		'a'
		>>> heap.get(handle, 'gone')
		'gone'
		'''
		node = self._store.get(handle)
		if node is None:
			return default
		return node._value

	def copy(self) -> FibonacciHeap[T]:
		r'''
		Return a new heap holding the same elements

		:math:`O(n)`

		Handles of this heap are not valid in the copy.
		'''
		return fibheap(self)

	def clear(self) -> None:
		r'''
		Remove every element; all issued handles become stale

		:math:`O(n)`
		'''
		self._store.clear()
		self._roots = {}
		self._min = None
		self._size = 0

	def __len__(self) -> int:
		r'''
		Get the number of elements

		:math:`O(1)`

		>>> len(fibheap([1, 2, 3]))
		3
		'''
		return self._size

	def __iter__(self) -> Iterator[T]:
		r'''
		Iterate through the elements in no particular order

		:math:`O(n)`

		>>> sorted(fibheap([3, 1, 2]))
		[1, 2, 3]
		'''
		store = self._store
		stack: List[int] = list(self._roots)
		while stack:
			node = store.node(stack.pop())
			yield node._value
			stack.extend(node._children)

	def __contains__(self, item) -> bool:
		r'''
		Check if an element equal to ``item`` is in the heap

		:math:`O(n)`

		>>> 2 in fibheap([1, 2, 3])
		True
		'''
		return any(item == value for value in self)

	def __repr__(self) -> str:
		return '{}({})'.format(self._name, sorted(self))

	def _less(self, x:int, y:int) -> bool:
		store = self._store
		return store.node(x)._value < store.node(y)._value

	def _add_root(self, index:int) -> None:
		self._roots[index] = None
		if self._min is None or self._less(index, self._min):
			self._min = index

	def _remove_root(self, index:int) -> None:
		# the caller recomputes the minimum when removing it
		del self._roots[index]

	def _scan_minimum(self) -> Optional[int]:
		result: Optional[int] = None
		for index in self._roots:
			if result is None or self._less(index, result):
				result = index
		return result

	def _link(self, child:int, parent:int) -> None:
		store = self._store
		node = store.node(child)
		assert not node._marked
		self._remove_root(child)
		node._parent = parent
		store.node(parent)._children[child] = None

	def _consolidate(self) -> None:
		# link roots of equal degree until all root degrees are distinct
		# on ties the root already in the table becomes the child
		buckets: Dict[int,int] = {}
		for index in list(self._roots):
			degree = self._store.node(index).degree()
			while degree in buckets:
				other = buckets.pop(degree)
				if self._less(other, index):
					index, other = other, index
				self._link(other, index)
				degree += 1
			buckets[degree] = index
		assert len(buckets) == len(self._roots)

	def _cut(self, index:int) -> None:
		store = self._store
		node = store.node(index)
		assert node._parent is not None
		del store.node(node._parent)._children[index]
		node._parent = None
		node._marked = False
		self._add_root(index)

	def _cascading_cut(self, index:int) -> None:
		# walk up from the parent of a cut node: cut marked ancestors,
		# mark the first unmarked one, never mark a root
		store = self._store
		node = store.node(index)
		while node._parent is not None:
			if not node._marked:
				node._marked = True
				return
			parent = node._parent
			self._cut(index)
			index, node = parent, store.node(parent)

	def _verify(self) -> None:
		store = self._store
		assert len(store) == self._size
		if self._min is None:
			assert self._size == 0
			assert not self._roots
			return
		assert self._min in self._roots
		for index in self._roots:
			node = store.node(index)
			assert node._parent is None
			assert not node._marked
			assert not self._less(index, self._min)
		seen = 0
		stack: List[int] = list(self._roots)
		while stack:
			index = stack.pop()
			node = store.node(index)
			seen += 1
			for child in node._children:
				assert store.node(child)._parent == index
				assert not self._less(child, index)
				stack.append(child)
		assert seen == self._size

def fibheap(items:Iterable[T]=()) -> FibonacciHeap[T]:
	r'''
	Create a :class:`FibonacciHeap` from the given items

	:math:`O(n)`

	>>> fibheap()
	fibheap([])
	>>> fibheap([3, 1, 2])
	fibheap([1, 2, 3])
	'''
	heap: FibonacciHeap[T] = FibonacciHeap()
	for item in items:
		heap.insert(item)
	return heap

def fh(*items:T) -> FibonacciHeap[T]:
	'''
	Shorthand for :func:`fibheap`

	>>> fh(3, 1, 2)
	fibheap([1, 2, 3])
	'''
	return fibheap(items)

__all__: Tuple[str, ...] = ('fh', 'fibheap', 'FibonacciHeap')
if sphinx_build: __all__ += ('PriorityQueue', 'Handle', 'NodeStore')
