from abc import abstractmethod
from typing import Any
from typing_extensions import Protocol

import builtins
import os

class Comparable(Protocol):
	@abstractmethod
	def __lt__(self, other: Any) -> bool: ...
	@abstractmethod
	def __eq__(self, other: Any) -> bool: ...

sphinx_build: bool = getattr(builtins, '__sphinx_build__', False)

check_invariants: bool = not sphinx_build \
	and bool(os.environ.get('FIBHEAP_CHECK_INVARIANTS'))
