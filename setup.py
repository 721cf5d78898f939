#!/usr/bin/env python
from setuptools import setup
import os


def get_version():
    curdir = os.path.dirname(__file__)
    filename = os.path.join(curdir, 'src', 'svg2favicon', 'version.py')
    with open(filename, 'rb') as fp:
        return fp.read().decode('utf8').split('=')[1].strip(" \n'")


def readme():
    with open('README.rst') as f:
        return f.read()


setup(
    name='svg2favicon',
    version=get_version(),
    description='Rasterize an SVG favicon to PNG',
    long_description=readme(),
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Topic :: Multimedia :: Graphics',
        'Topic :: Multimedia :: Graphics :: Graphics Conversion',
    ],
    keywords='svg png favicon rasterize',
    license='MIT License',
    package_dir={'': 'src'},
    packages=[
        'svg2favicon',
        'svg2favicon.rasterizer',
    ],
    python_requires='>=3.10',
    install_requires=[
        'pillow>=9.1',
        'resvg-py',
    ],
    extras_require={
        'test': [
            'pytest'],
    },
    include_package_data=True,
    entry_points={
        'console_scripts': ['svg2favicon=svg2favicon.__main__:main']
    },
    )
