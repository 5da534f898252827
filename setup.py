# Copyright 2024 profbuilder Authors
# Licensed under the Apache License, Version 2.0

"""
setup.py for profbuilder

Installation:
    pip install .

Development installation:
    pip install -e .[test]
"""

from setuptools import setup, find_packages


long_description = """
# profbuilder

Builds pprof-compatible profiles from call traces captured in a JVM.

## Features

- Deduplicate raw call traces into aggregated samples
- Intern rendered frames into dense location and function tables
- Pretty-print JVM method descriptors and simplify generated class names
- Collapse redundant native stub frames
- Unsample heap/CPU/contention profiles captured at a sampling rate

## Quick Start

```python
from profbuilder import (CallFrame, CallTrace, ProfileStackTrace,
                         ProfileProtoBuilder, PerfMapFrameCache,
                         StaticMethodResolver, MethodInfo)

resolver = StaticMethodResolver({1: MethodInfo("Foo.java", "com.foo.Foo", "run", "()V")})
cache = PerfMapFrameCache()
cache.loadPerfMap("/tmp/perf-1234.map")

builder = ProfileProtoBuilder.forHeap(512 * 1024, cache, resolver)
builder.addTraces([ProfileStackTrace(CallTrace([CallFrame(12, 1)]), 4096)])
profile = builder.finalize(unsample=True)
```
"""

setup(
    name='profbuilder',
    version='0.1.0',
    author='profbuilder Authors',
    author_email='',
    description='Build pprof-compatible profiles from captured JVM call traces',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'numpy',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.7',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.7',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Software Development :: Libraries',
        'Topic :: System :: Monitoring',
    ],
    keywords='profiling pprof jvm sampling stack-trace',
)
