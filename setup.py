from pathlib import Path

from setuptools import find_packages, setup

root = Path(__file__).parent


def read_version() -> str:
    """Version lives in one place: src/adminfields/_version.py."""
    namespace: dict = {}
    exec((root / "src" / "adminfields" / "_version.py").read_text("utf-8"), namespace)
    return namespace["__version__"]


setup(
    name="adminfields",
    version=read_version(),
    description="Server-side HTML form field rendering for admin panels",
    long_description=(root / "README.md").read_text("utf-8"),
    long_description_content_type="text/markdown",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"adminfields": ["templates/*/*.html"]},
    include_package_data=True,
    install_requires=[
        "markupsafe>=2.1",
        "jinja2>=3.1",
        "starlette>=0.37",
        "uvicorn>=0.29",
        "rich>=13.0",
        "rich-click>=1.7",
        "click>=8.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "httpx>=0.27",
        ],
    },
    entry_points={
        "console_scripts": [
            "adminfields=adminfields.cli.main:cli",
        ],
    },
    zip_safe=False,
)
