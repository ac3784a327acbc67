from __future__ import annotations
from typing import Generic, Optional, Sized, TypeVar
from abc import abstractmethod

from ._utility import Comparable

T = TypeVar('T', bound=Comparable)
H = TypeVar('H')
Q = TypeVar('Q', bound='PriorityQueue')

class PriorityQueue(Generic[T,H], Sized):
	r'''
	Mergeable min-priority queue with addressable elements

	Elements are ordered with ``<`` alone. :meth:`insert` hands out a
	handle which later identifies the element for :meth:`decrease_key`
	and :meth:`delete`. Handles outlive their elements: once an element
	has been removed its handle is stale, and operations given a stale
	handle do nothing.

	Implementations are not thread safe; callers sharing a queue between
	threads must serialize access themselves.
	'''

	__slots__ = ()

	@abstractmethod
	def find_minimum(self) -> Optional[T]:
		r'''
		Return the smallest element, or ``None`` if the queue is empty
		'''

	@abstractmethod
	def insert(self, value:T) -> H:
		r'''
		Add an element and return a handle to it
		'''

	@abstractmethod
	def merge(self:Q, other:Q) -> Q:
		r'''
		Move every element of ``other`` into this queue

		``other`` is consumed: it is left empty and the handles
		it issued are stale. Returns the combined queue.
		'''

	@abstractmethod
	def decrease_key(self, handle:H, value:T) -> None:
		r'''
		Replace the element behind ``handle`` with a smaller one

		Does nothing if the handle is stale or if ``value`` is
		greater than the current element.
		'''

	@abstractmethod
	def delete(self, handle:H) -> None:
		r'''
		Remove the element behind ``handle``

		Does nothing if the handle is stale.
		'''

	@abstractmethod
	def extract_minimum(self) -> Optional[T]:
		r'''
		Remove and return the smallest element,
		or ``None`` if the queue is empty
		'''

	def peek(self) -> T:
		r'''
		Return the smallest element

		:raises IndexError: if the queue is empty
		'''
		if len(self) == 0:
			raise IndexError('peek from empty heap')
		return self.find_minimum() # type: ignore

	def pop(self) -> T:
		r'''
		Remove and return the smallest element

		:raises IndexError: if the queue is empty
		'''
		if len(self) == 0:
			raise IndexError('pop from empty heap')
		return self.extract_minimum() # type: ignore

	def __bool__(self) -> bool:
		return len(self) != 0
