from setuptools import setup, find_packages

PACKAGE = 'django-attribute-searchable'
VERSION = '0.1'

setup(
    name=PACKAGE, version=VERSION,
    description="Search Django models by their attributes with LIKE terms and exact-match filters",
    packages=find_packages(exclude=['tests', 'tests.*']),
    license='MIT',
    install_requires=[
        'Django>=3.2',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-django',
        ],
    },
    classifiers=[
        'Intended Audience :: Developers',
        'Framework :: Django',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Database',
    ],
)
