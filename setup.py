# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="scaffold4ai",
    version="1.0.0",
    description="Genera la estructura de directorios de un proyecto a partir de una descripción usando un LLM",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["scaffold4ai", "scaffold4ai.*"]),
    package_data={
        "scaffold4ai.interface": ["locales/*.json"],
    },
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "requests",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'scaffold4ai=scaffold4ai.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
