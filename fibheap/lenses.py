from __future__ import annotations

from typing import *

from ._utility import Comparable

from ._fibheap import FibonacciHeap, fibheap

from lenses import hooks

T = TypeVar('T', bound=Comparable)

@hooks.contains_add.register(FibonacciHeap)
def _fibheap_contains_add(self:FibonacciHeap[T], item:T) -> FibonacciHeap[T]:
	heap = self.copy()
	heap.insert(item)
	return heap
@hooks.contains_remove.register(FibonacciHeap)
def _fibheap_contains_remove(self:FibonacciHeap[T], item:T) -> FibonacciHeap[T]:
	return fibheap(i for i in self if item != i)
@hooks.to_iter.register(FibonacciHeap)
def _fibheap_to_iter(self:FibonacciHeap[T]) -> Iterator[T]:
	return iter(self)
@hooks.from_iter.register(FibonacciHeap)
def _fibheap_from_iter(self:FibonacciHeap[Any], items:Iterator[T]) -> FibonacciHeap[T]:
	return fibheap(items)
