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

r"""Compressed maps from ordered keys to values.

An *interval map* is a total function over an ordered key space (*e.g.*
integers, floats, timestamps), which is constant over contiguous ranges of
keys.
Memory usage is proportional to the number of value changes, not to the
number of keys assigned or looked up, so the key space can be unbounded.

Values are assigned to *half-open* intervals ``[begin, end)``, including
`begin` and excluding `end`:

+---+---+---+---+---+---+---+---+---+
| 0 | 1 | 2 | 3 | 4 | 5 | 6 | 7 | 8 |
+===+===+===+===+===+===+===+===+===+
| A | A | A | A | A | A | A | A | A |
+---+---+---+---+---+---+---+---+---+
| A |[B | B]| A | A | A | A | A | A |
+---+---+---+---+---+---+---+---+---+
| A | B | B | A | A |[C | C]| A | A |
+---+---+---+---+---+---+---+---+---+

>>> from cintervalmap import IntervalMap
>>> imap = IntervalMap('A')
>>> imap.assign(1, 3, 'B')
>>> imap.assign(5, 7, 'C')
>>> [imap[key] for key in range(9)]
['A', 'B', 'B', 'A', 'A', 'C', 'C', 'A', 'A']

Internally, only the *breakpoints* are stored, *i.e.* the keys where the
value changes, together with the new value.
Keys preceding the first breakpoint map to the *default* value, given at
construction time.
The example above is stored as the default ``'A'`` and the breakpoints:

>>> imap._breakpoints()
[(1, 'B'), (3, 'A'), (5, 'C'), (7, 'A')]

Breakpoints never repeat the value at their left, so there is exactly one
representation for each function:

>>> imap.assign(2, 6, 'B')
>>> imap._breakpoints()
[(1, 'B'), (6, 'C'), (7, 'A')]
>>> imap.assign(0, 9, 'A')
>>> imap._breakpoints()
[]

The main class is implemented in Cython; :mod:`cintervalmap.py` provides a
thin generic wrapper, handy for static type checking.
"""

__version__ = '0.0.1'

from .c import *  # noqa: F401, F403
