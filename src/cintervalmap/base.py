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

r"""Common stuff, shared across modules."""

import abc
from typing import Any
from typing import Generic
from typing import List
from typing import Optional
from typing import Tuple
from typing import TypeVar

KeyType = TypeVar('KeyType')
ValueType = TypeVar('ValueType')

Breakpoint = Tuple[KeyType, ValueType]


class BaseIntervalMap(Generic[KeyType, ValueType], metaclass=abc.ABCMeta):
    r"""Interval map.

    A total function over an ordered key space, constant over contiguous
    key ranges.

    Only the *value changes* are stored: each `breakpoint` ``(key, value)``
    means that all the keys starting from ``key`` (included) up to the
    next breakpoint (excluded) map to ``value``.
    Keys preceding the first breakpoint map to the `default` value, given
    at construction time and never changed afterwards.

    +---+---+---+---+---+---+---+---+---+
    | 0 | 1 | 2 | 3 | 4 | 5 | 6 | 7 | 8 |
    +===+===+===+===+===+===+===+===+===+
    | A |[B | B]| A | A |[C | C]| A | A |
    +---+---+---+---+---+---+---+---+---+

    The table above is stored as the default ``'A'`` plus the breakpoints
    ``[(1, 'B'), (3, 'A'), (5, 'C'), (7, 'A')]``.

    The representation is kept *canonical*: no breakpoint carries the same
    value extending into it from the left, either from the previous
    breakpoint or from the default value.
    This means that two maps representing the same function are always
    stored the same way, and compare equal.

    Keys must be totally ordered by ``<``; values must be comparable by
    ``==``. No other requirement is made, so the key space can be
    unbounded (*e.g.* :obj:`int`, :obj:`float`, :obj:`str`, timestamps).

    Keys and values are stored as deep copies, and looked up values are
    deep copies too: mutating an object after assigning it, or after
    looking it up, never alters the map.

    Arguments:
        default (value):
            Value covering the whole key space before any assignment.

    Examples:
        >>> from cintervalmap import IntervalMap

        >>> imap = IntervalMap('A')
        >>> imap.assign(1, 3, 'B')
        >>> imap.assign(5, 7, 'C')
        >>> [imap[key] for key in range(9)]
        ['A', 'B', 'B', 'A', 'A', 'C', 'C', 'A', 'A']
    """

    @abc.abstractmethod
    def __copy__(
        self,
    ) -> 'BaseIntervalMap[KeyType, ValueType]':
        r"""Creates a shallow copy.

        Keys and values are shared with the original, while the breakpoint
        storage is not.

        Returns:
            :obj:`BaseIntervalMap`: Shallow copy.
        """
        ...

    @abc.abstractmethod
    def __deepcopy__(
        self,
        memo: Optional[dict] = None,
    ) -> 'BaseIntervalMap[KeyType, ValueType]':
        r"""Creates a deep copy.

        The default value, the keys and the values are deep-copied too.

        Arguments:
            memo (dict):
                Memo dictionary, as per :func:`copy.deepcopy`.

        Returns:
            :obj:`BaseIntervalMap`: Deep copy.
        """
        ...

    @abc.abstractmethod
    def __eq__(
        self,
        other: Any,
    ) -> bool:
        r"""Equality comparison.

        Being the representation canonical, two maps are equal if and only
        if they map every key to the same value.

        Arguments:
            other (:obj:`BaseIntervalMap`):
                Map to compare with `self`.

        Returns:
            bool: `self` is equal to `other`.

        Examples:
            >>> from cintervalmap import IntervalMap

            >>> imap1 = IntervalMap('A')
            >>> imap1.assign(1, 5, 'B')
            >>> imap2 = IntervalMap('A')
            >>> imap2.assign(1, 3, 'B')
            >>> imap1 == imap2
            False
            >>> imap2.assign(3, 5, 'B')
            >>> imap1 == imap2
            True
        """
        ...

    @abc.abstractmethod
    def __getitem__(
        self,
        key: KeyType,
    ) -> ValueType:
        r"""Gets the value at some key.

        Same as :meth:`lookup`.

        Arguments:
            key (key):
                Key to look up.

        Returns:
            value: Value currently assigned to `key`.

        Raises:
            :obj:`TypeError`: `key` is a :obj:`slice`.

        Examples:
            >>> from cintervalmap import IntervalMap

            >>> imap = IntervalMap(0)
            >>> imap[10:20] = 1
            >>> imap[9], imap[10], imap[19], imap[20]
            (0, 1, 1, 0)
        """
        ...

    @abc.abstractmethod
    def __init__(
        self,
        default: ValueType,
    ):
        ...

    @abc.abstractmethod
    def __ne__(
        self,
        other: Any,
    ) -> bool:
        r"""Inequality comparison.

        Arguments:
            other (:obj:`BaseIntervalMap`):
                Map to compare with `self`.

        Returns:
            bool: `self` is not equal to `other`.
        """
        ...

    @abc.abstractmethod
    def __repr__(
        self,
    ) -> str:
        ...

    @abc.abstractmethod
    def __setitem__(
        self,
        key: slice,
        value: ValueType,
    ) -> None:
        r"""Assigns a value to an interval.

        ``imap[start:endex] = value`` is the same as
        ``imap.assign(start, endex, value)``.

        Arguments:
            key (slice):
                Half-open interval of keys, without `step`.

            value (value):
                Value to assign.

        Raises:
            :obj:`TypeError`: `key` is not a :obj:`slice`.

            :obj:`ValueError`: `key` has a `step`, or misses a bound.

        Examples:
            >>> from cintervalmap import IntervalMap

            >>> imap = IntervalMap('A')
            >>> imap[1:3] = 'B'
            >>> imap[0], imap[1], imap[2], imap[3]
            ('A', 'B', 'B', 'A')
        """
        ...

    @abc.abstractmethod
    def _breakpoint_count(
        self,
    ) -> int:
        r"""int: Number of breakpoints, for inspection only."""
        ...

    @abc.abstractmethod
    def _breakpoints(
        self,
    ) -> List[Breakpoint]:
        r"""Breakpoints, for inspection only.

        Returns:
            list of tuple: A new list of ``(key, value)`` pairs, ordered by
            key, holding copies of the stored objects.
        """
        ...

    @abc.abstractmethod
    def assign(
        self,
        key_begin: KeyType,
        key_end: KeyType,
        value: ValueType,
    ) -> None:
        r"""Assigns a value to an interval.

        All the keys within the half-open interval ``[key_begin, key_end)``
        are mapped to `value`; all the other keys keep their current value.

        If `key_begin` is not lesser than `key_end`, the interval is empty
        and nothing happens.

        The breakpoints within the interval are dropped, and at most two
        breakpoints are created: one at `key_begin` (unless `value` already
        extends there from the left), and one at `key_end` restoring the
        value previously found there (unless it is `value` itself).

        Arguments:
            key_begin (key):
                Inclusive start key.

            key_end (key):
                Exclusive end key.

            value (value):
                Value to assign.

        Examples:
            +---+---+---+---+---+---+---+
            | 0 | 1 | 2 | 3 | 4 | 5 | 6 |
            +===+===+===+===+===+===+===+
            | A |[B | B]| A | A | A | A |
            +---+---+---+---+---+---+---+
            | A | B |[C | C]| A | A | A |
            +---+---+---+---+---+---+---+
            |[A | A | A | A | A]| A | A |
            +---+---+---+---+---+---+---+

            >>> from cintervalmap import IntervalMap

            >>> imap = IntervalMap('A')
            >>> imap.assign(1, 3, 'B')
            >>> imap.assign(2, 4, 'C')
            >>> [imap[key] for key in range(6)]
            ['A', 'B', 'C', 'C', 'A', 'A']
            >>> imap.assign(0, 5, 'A')
            >>> imap == IntervalMap('A')
            True
            >>> imap.assign(3, 1, 'X')  # empty
            >>> imap == IntervalMap('A')
            True
        """
        ...

    @property
    @abc.abstractmethod
    def default(
        self,
    ) -> ValueType:
        r"""value: Value preceding the first breakpoint."""
        ...

    @abc.abstractmethod
    def lookup(
        self,
        key: KeyType,
    ) -> ValueType:
        r"""Gets the value at some key.

        The value is the one of the greatest breakpoint not exceeding `key`,
        or the default value if there is none.

        Arguments:
            key (key):
                Key to look up.

        Returns:
            value: Value currently assigned to `key`.

        Examples:
            >>> from cintervalmap import IntervalMap

            >>> imap = IntervalMap(None)
            >>> imap.assign(1.5, 2.5, 'x')
            >>> imap.lookup(1.0), imap.lookup(1.5), imap.lookup(2.5)
            (None, 'x', None)
        """
        ...

    @abc.abstractmethod
    def validate(
        self,
    ) -> None:
        r"""Validates internal structure.

        It makes sure that the breakpoints are strictly ordered by key,
        and that no breakpoint carries the same value as the one extending
        into it from the left.

        Raises:
            :obj:`ValueError`: Invalid data detected.
        """
        ...
