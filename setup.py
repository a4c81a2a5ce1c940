from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="todo-query-api",
    version="1.0.0",
    description="Read-only todo lookups, filtered listings and owner/category summaries",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["api", "core", "models", "repositories", "services"]),
    py_modules=["todo_main"],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Framework :: FastAPI",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.4", "httpx>=0.25"],
    },
    entry_points={
        "console_scripts": [
            "todo-api=todo_main:main",
        ],
    },
)
