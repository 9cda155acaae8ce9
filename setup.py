from setuptools import setup, find_packages

setup(
    name="jdtester",
    version="0.5.0",
    description="Schema-driven structural validation and deep diff for JSON-like data",
    author="Stas Granin",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        'jdtester': ['default-config.yaml'],
    },
    include_package_data=True,
    install_requires=[
        'pyyaml>=6.0',
        'jsonschema>=4.17.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    python_requires='>=3.9',
)
