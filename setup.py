# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="catalog4ai",
    version="0.1.0",
    description="Genera un catálogo JSON jerárquico de componentes HTML para contexto de LLM",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["catalog4ai*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "tests": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'catalog4ai=catalog4ai.main:main',  # CLI del catálogo
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
