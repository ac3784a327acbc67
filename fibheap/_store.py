from __future__ import annotations
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, TypeVar, cast

T = TypeVar('T')

class Node(Generic[T]):
	# parent and children are slot indices into the owning NodeStore
	# children is a dict used as an ordered set: O(1) append and removal

	__slots__ = ('_value', '_parent', '_children', '_marked')

	_value: T
	_parent: Optional[int]
	_children: Dict[int,None]
	_marked: bool

	def __new__(cls, value:T):
		self = super().__new__(cls)
		self._value = value
		self._parent = None
		self._children = {}
		self._marked = False
		return self

	def degree(self) -> int:
		return len(self._children)

	def __repr__(self) -> str:
		return 'Node({!r}, parent={}, children={}, marked={})'.format(
			self._value, self._parent, list(self._children), self._marked)

class Handle:
	r'''
	Opaque reference to an element of a heap

	Returned by :meth:`FibonacciHeap.insert`. A handle stays valid until
	its element is removed from the heap; afterwards it is stale and is
	never confused with a newer element stored in the same slot.

	Handles are hashable and compare equal only to themselves.
	'''

	__slots__ = ('_store', '_index', '_generation')

	_store: NodeStore[Any]
	_index: int
	_generation: int

	def __new__(cls, store:NodeStore[Any], index:int, generation:int):
		self = super().__new__(cls)
		self._store = store
		self._index = index
		self._generation = generation
		return self

	def __eq__(self, other) -> bool:
		if not isinstance(other, Handle):
			return NotImplemented
		return self._store is other._store \
			and self._index == other._index \
			and self._generation == other._generation

	def __ne__(self, other) -> bool:
		result = self.__eq__(other)
		if result is NotImplemented: return NotImplemented
		return not result

	def __hash__(self) -> int:
		return hash((id(self._store), self._index, self._generation))

	def __repr__(self) -> str:
		return 'Handle({}, {})'.format(self._index, self._generation)

class NodeStore(Generic[T]):
	r'''
	Arena owning every node of one heap

	Nodes live in numbered slots. Freed slots are reused, and each slot
	carries a generation counter that is bumped whenever its node is
	removed, so a :class:`Handle` minted for an earlier occupant no longer
	matches.

	All operations except :meth:`clear` are :math:`O(1)`.
	'''

	__slots__ = ('_nodes', '_generations', '_free', '_size')

	_nodes: List[Optional[Node[T]]]
	_generations: List[int]
	_free: List[int]
	_size: int

	def __new__(cls):
		self = super().__new__(cls)
		self._nodes = []
		self._generations = []
		self._free = []
		self._size = 0
		return self

	def put(self, node:Node[T]) -> int:
		if self._free:
			index = self._free.pop()
			assert self._nodes[index] is None
			self._nodes[index] = node
		else:
			index = len(self._nodes)
			self._nodes.append(node)
			self._generations.append(0)
		self._size += 1
		return index

	def node(self, index:int) -> Node[T]:
		return cast(Node[T], self._nodes[index])

	def release(self, index:int) -> Node[T]:
		node = self._nodes[index]
		assert node is not None
		self._nodes[index] = None
		self._generations[index] += 1
		self._free.append(index)
		self._size -= 1
		return node

	def handle(self, index:int) -> Handle:
		return Handle(self, index, self._generations[index])

	def index(self, handle:Any) -> Optional[int]:
		r'''
		Resolve a handle to its slot, or ``None`` if it is stale
		or was issued by another store
		'''
		if not isinstance(handle, Handle) or handle._store is not self:
			return None
		if self._generations[handle._index] != handle._generation:
			return None
		return handle._index

	def allocate(self, value:T) -> Handle:
		return self.handle(self.put(Node(value)))

	def get(self, handle:Handle) -> Optional[Node[T]]:
		index = self.index(handle)
		if index is None: return None
		return self._nodes[index]

	def remove(self, handle:Handle) -> Node[T]:
		r'''
		Free the node behind a handle

		:raises KeyError: if the handle is stale
		'''
		index = self.index(handle)
		if index is None:
			raise KeyError(handle)
		return self.release(index)

	def mutate(self, handle:Handle, fn:Callable[[Node[T]], Any]) -> None:
		node = self.get(handle)
		if node is not None:
			fn(node)

	def clear(self) -> None:
		r'''
		Free every slot; all issued handles become stale

		:math:`O(n)` in the number of slots
		'''
		for index, node in enumerate(self._nodes):
			if node is not None:
				self._nodes[index] = None
				self._generations[index] += 1
		self._free = list(range(len(self._nodes)))
		self._size = 0

	def __len__(self) -> int:
		return self._size

	def __iter__(self) -> Iterator[int]:
		return (i for i, node in enumerate(self._nodes) if node is not None)
