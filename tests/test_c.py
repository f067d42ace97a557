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

import cintervalmap
from _common import *

# noinspection PyUnresolvedReferences
from cintervalmap.c import IntervalMap as _IntervalMap  # isort:skip


class TestIntervalMap(BaseIntervalMapSuite):
    IntervalMap: Type['_IntervalMap'] = _IntervalMap

    def test_compiled(self):
        assert not cintervalmap.c.__file__.endswith('.py')
        assert not cintervalmap.c.__file__.endswith('.pyx')

    def test_package_export(self):
        assert cintervalmap.IntervalMap is _IntervalMap
        assert 'IntervalMap' in cintervalmap.c.__all__

    def test_subclass_copy(self):
        class SubIntervalMap(_IntervalMap):
            pass

        imap = SubIntervalMap('A')
        imap.assign(1, 3, 'B')

        imap_copy = copy.copy(imap)
        assert type(imap_copy) is SubIntervalMap
        assert imap_copy == imap

        imap_copy = copy.deepcopy(imap)
        assert type(imap_copy) is SubIntervalMap
        assert imap_copy == imap

    def test_version(self):
        from importlib.metadata import version
        assert version('cintervalmap') == cintervalmap.__version__
