# Copyright (c) 2020-2023, Andrea Zoppi.
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# 1. Redistributions of source code must retain the above copyright notice,
#    this list of conditions and the following disclaimer.
#
# 2. Redistributions in binary form must reproduce the above copyright
#    notice, this list of conditions and the following disclaimer in the
#    documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

r"""Python wrappers.

Useful for dynamically declared stuff, e.g. docstrings and return types.
"""

from typing import Any
from typing import List
from typing import Optional
from typing import TypeVar

from .base import BaseIntervalMap
from .base import Breakpoint
from .base import KeyType
from .base import ValueType

# noinspection PyUnresolvedReferences,PyPackageRequirements
from .c import IntervalMap as _CythonIntervalMap  # isort:skip

try:
    from typing import Self
except ImportError:  # pragma: no cover  # Python < 3.11
    Self = None  # dummy
    _IntervalMapSelf = TypeVar('_IntervalMapSelf', bound='IntervalMap')
else:  # pragma: no cover
    _IntervalMapSelf = Self


class IntervalMap(BaseIntervalMap[KeyType, ValueType]):
    __doc__ = BaseIntervalMap.__doc__

    __hash__ = None  # mutable

    def __copy__(
        self,
    ) -> _IntervalMapSelf:

        impl = self._impl.__copy__()
        return self._wrap_impl(impl)

    def __deepcopy__(
        self,
        memo: Optional[dict] = None,
    ) -> _IntervalMapSelf:

        impl = self._impl.__deepcopy__(memo)
        return self._wrap_impl(impl)

    def __eq__(
        self,
        other: Any,
    ) -> bool:

        if isinstance(other, IntervalMap):
            other = other._impl
        return self._impl.__eq__(other)

    def __getitem__(
        self,
        key: KeyType,
    ) -> ValueType:

        return self._impl.__getitem__(key)

    def __init__(
        self,
        default: ValueType,
    ):

        self._impl: _CythonIntervalMap = _CythonIntervalMap(default)

    def __ne__(
        self,
        other: Any,
    ) -> bool:

        if isinstance(other, IntervalMap):
            other = other._impl
        return self._impl.__ne__(other)

    def __repr__(
        self,
    ) -> str:

        return f'<{self.__class__.__name__}[{self._breakpoint_count()}]({self.default!r})@0x{id(self):X}>'

    def __setitem__(
        self,
        key: slice,
        value: ValueType,
    ) -> None:

        self._impl.__setitem__(key, value)

    def _breakpoint_count(
        self,
    ) -> int:

        return self._impl._breakpoint_count()

    def _breakpoints(
        self,
    ) -> List[Breakpoint]:

        return self._impl._breakpoints()

    @classmethod
    def _wrap_impl(
        cls,
        impl: _CythonIntervalMap,
    ) -> _IntervalMapSelf:

        wrapped = cls.__new__(cls)
        wrapped._impl = impl
        return wrapped

    def assign(
        self,
        key_begin: KeyType,
        key_end: KeyType,
        value: ValueType,
    ) -> None:

        self._impl.assign(key_begin, key_end, value)

    @property
    def default(
        self,
    ) -> ValueType:

        return self._impl.default

    def lookup(
        self,
        key: KeyType,
    ) -> ValueType:

        return self._impl.lookup(key)

    def validate(
        self,
    ) -> None:

        self._impl.validate()
