# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""Type hints used internally by this package; intended for star-import"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Dict,
    List,
    Set,
    Optional,
    Union,
    Any,
    Tuple,
    Type,
    Callable,
    Generic,
    TypeVar,
    NamedTuple,
  )

from types import TracebackType

from typing_extensions import Self

Jsonable = Union[str, int, float, bool, None, Dict[str, Any], List[Any]]
"""A type hint for a simple JSON-serializable value; i.e., str, int, float, bool, None, Dict[str, Jsonable], List[Jsonable]"""

JsonableDict = Dict[str, Jsonable]
"""A type hint for a simple JSON-serializable dict; i.e., Dict[str, Jsonable]"""
