from setuptools import setup, find_packages

setup(
    name='ttlschema',
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    package_data={
        'ttlschema': ['templates/*.txt'],
    },
    install_requires=[
        'Click',
        'rdflib',
        'jinja2',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points='''
        [console_scripts]
        ttlschema=ttlschema.cli:main
    ''',
)
