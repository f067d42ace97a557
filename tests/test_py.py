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

import copy
from typing import Type

from _common import *

from cintervalmap.base import BaseIntervalMap
from cintervalmap.c import IntervalMap as _CythonIntervalMap
from cintervalmap.py import IntervalMap as _IntervalMap


class TestIntervalMap(BaseIntervalMapSuite):
    IntervalMap: Type['_IntervalMap'] = _IntervalMap

    def test_generic(self):
        imap = _IntervalMap[int, str]('A')
        assert isinstance(imap, _IntervalMap)
        assert isinstance(imap, BaseIntervalMap)
        imap.assign(1, 3, 'B')
        assert imap[2] == 'B'

    def test_impl(self):
        imap = _IntervalMap('A')
        assert isinstance(imap._impl, _CythonIntervalMap)

    def test_docstring(self):
        assert _IntervalMap.__doc__ == BaseIntervalMap.__doc__

    def test_unhashable(self):
        imap = _IntervalMap('A')
        with pytest.raises(TypeError):
            hash(imap)

    def test___copy___wrapped(self):
        imap = _IntervalMap('A')
        imap.assign(1, 3, 'B')

        for imap_copy in (copy.copy(imap), copy.deepcopy(imap)):
            assert type(imap_copy) is _IntervalMap
            assert imap_copy._impl is not imap._impl
            assert imap_copy == imap

    def test___eq___impl(self):
        imap = _IntervalMap('A')
        imap.assign(1, 3, 'B')
        impl = _CythonIntervalMap('A')
        impl.assign(1, 3, 'B')
        assert imap == impl

    def test_abstract(self):
        with pytest.raises(TypeError):
            BaseIntervalMap('A')  # noqa
