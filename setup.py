from setuptools import setup, find_packages

setup(
    name="tabledrag_tree",
    version="0.1.0",
    description="Weight-ordered parent/child item trees for draggable tables, with a FastAPI backend.",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(where="src", include=["tabledrag_tree", "tabledrag_tree.*"]),  # Finds all packages inside src/
    package_dir={"": "src"},  # Maps root to src/
    include_package_data=True,  # Ensures non-Python files are included
    install_requires=[
        "click",
        "fastapi",
        "uvicorn",
        "pandas",
        "sqlalchemy>=2.0",
        "pydantic>=2",
        "pydantic-settings",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    entry_points={
        "console_scripts": [
            "tabledrag-tree=tabledrag_tree.__main__:main",
        ],
    },
    package_data={
        "tabledrag_tree": [
            "data/*.csv",
        ],
    },
)
