from setuptools import setup, find_namespace_packages

setup(
    name="rolegraph-api",
    version="0.1.0",
    packages=find_namespace_packages(include=["src", "src.*"]),
    package_data={"src.app.db": ["seed/*.yaml"]},
    python_requires=">=3.10",
    install_requires=[
        "fastapi",
        "uvicorn",
        "sqlalchemy[asyncio]>=2.0",
        "aiosqlite",
        "asyncpg",
        "pydantic[email]>=2",
        "pydantic-settings",
        "python-dotenv",
        "pyyaml",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "httpx",
        ],
    },
)
