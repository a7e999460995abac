import os
from setuptools import setup


def read_file(fname):
    with open(os.path.join(os.path.dirname(__file__), fname)) as f:
        return f.read()


setup(
    name='viewbinding',
    version='0.1.0',
    description='Generate GTK view binding headers from UI definition files',
    long_description=read_file('README.md'),
    long_description_content_type='text/markdown',
    license='GPL-3.0-or-later',
    keywords='gtk code generator view binding',
    packages=['viewbinding'],
    package_data={'viewbinding': ['templates/*.h']},
    python_requires='>=3.7',
    install_requires=['jinja2'],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'viewbinding=viewbinding.__main__:main',
        ]
    }
)
