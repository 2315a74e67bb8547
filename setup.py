import io
import os

from setuptools import setup


metadata = {}
with io.open(os.path.join('httpcodes', '__metadata__.py'), 'rb') as f:
    exec(f.read(), metadata)            # pylint: disable=exec-used

with io.open('README.rst', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='httpcodes',
    version=metadata['version'],
    description='Registry of standard HTTP status codes',
    long_description=long_description,
    url=metadata['homepage'],
    license='MIT',
    python_requires='>=3.6',

    install_requires=[
        'dominate >= 2.2.0',
        'lxml >= 3.6.0',
    ],
    extras_require={
        'test': [
            'pytest >= 3.0',
        ],
    },

    packages=[
        'httpcodes',
        'httpcodes.known',
        'httpcodes.reports',
        'httpcodes.util',
    ],
    package_data={
        'httpcodes.reports': ['html.css'],
    },
    entry_points={
        'console_scripts': [
            'httpcodes=httpcodes.cli:main',
        ],
    },
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries',
    ],
    keywords='HTTP status code response RFC registry',
)
