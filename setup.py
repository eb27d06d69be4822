from setuptools import setup, find_packages

name = 'ditatools'
version = '1.0.0'

setup(
    name=name,
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
    url='',
    license='',
    author='',
    author_email='',
    description='Run external XSL-FO processors and upgrade DITA documents from DTDs to XML schemas',
    python_requires='>=3.10',
    install_requires=[
        'lxml',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'ditatools-dtd2schema=ditatools.scripts.dtd_to_schema:main',
            'ditatools-fo=ditatools.scripts.fo_convert:main',
        ],
    },
)
