#!/usr/bin/env python

if __name__ == '__main__':
    import os

    import setuptools
    from Cython.Build import cythonize

    compiler_directives = {}
    ext_macros = []
    if os.environ.get('CYTHON_TRACE_NOGIL') == '1':
        compiler_directives['linetrace'] = True
        compiler_directives['binding'] = True
        ext_macros.append(('CYTHON_TRACE_NOGIL', 1))

    ext_modules = [
        setuptools.Extension('cintervalmap.c', ['src/cintervalmap/c.pyx'], define_macros=ext_macros),
    ]

    setuptools.setup(
        ext_modules=cythonize(ext_modules, compiler_directives=compiler_directives),
    )
