from setuptools import find_packages, setup

setup(
    name="argspect",
    version="0.1.0",
    description="Derive inspectable metadata trees from declarative command hierarchies.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(include=["argspect", "argspect.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.5",
        "pydantic-core>=2.14",
        "python-dateutil>=2.8",
        "python-json-logger>=3.1",
        "pyyaml>=6.0",
        "rich>=13.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["argspect=argspect.__main__:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
