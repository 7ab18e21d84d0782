from setuptools import setup, find_packages

setup(
    name="word-count-tally",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["tally_words"],
    install_requires=[
        'pydantic>=2.9.2',
        'tabulate>=0.8.9'
    ],
    extras_require={
        'test': [
            'pytest>=7.0'
        ]
    },
)
