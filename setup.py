from setuptools import setup, find_packages

setup(
    name="online_suffix_tree",
    version="0.1.0",
    packages=find_packages(where='.', include=['online_suffix_tree', 'online_suffix_tree.*']),
    install_requires=[
        'numpy>=1.19.0'
    ],
    extras_require={
        # Test suite (the test modules also run as plain scripts).
        'test': ['pytest>=7.0'],
        # benchmark.py: result tables and plots.
        'benchmark': ['pandas', 'matplotlib', 'seaborn'],
    },
    python_requires='>=3.8',
    zip_safe=False
)
