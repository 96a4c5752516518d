import os

from setuptools import find_packages, setup

README = os.path.join(os.path.dirname(__file__), "README.md")


def readme() -> str:
    with open(README, encoding="utf-8") as f:
        return f.read()


setup(
    name="dts_to_json_schema",
    version="0.1.0",
    description="Generate a JSON Schema document from TypeScript interface, enum and type alias declarations",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Code Generators",
        "Topic :: Text Processing",
        "Intended Audience :: Developers",
    ],
    keywords="json schema typescript declarations ast typescript-eslint",
    license="MIT",
    packages=find_packages(),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0.0",
        "lark>=1.1.0",
        "requests>=2.28.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "dts_to_json_schema=dts_to_json_schema.dts_to_json_schema:dts_to_json_schema",
        ],
    },
    include_package_data=True,
    package_data={
        "dts_to_json_schema": ["pipeline/declarations/*.lark", "tests/test_data/*"],
    },
    zip_safe=False,
)
