from setuptools import setup, find_namespace_packages

setup(
    name="local_library",
    version="0.1.0",
    packages=find_namespace_packages(include=['api*', 'cli*', 'core*']),
    include_package_data=True,
    package_data={
        "api": ["templates/*.html"],
    },
    python_requires=">=3.11",
    install_requires=[
        "Click",
        "SQLAlchemy>=2.0",
        "fastapi",
        "uvicorn",
        "Jinja2",
        "MarkupSafe",
        "pydantic>=2",
        "python-multipart",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "local-library=cli.main:main",
        ],
    },
)
