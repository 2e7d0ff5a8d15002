import setuptools
from pathlib import Path

# Read the long description from README.md
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text()

setuptools.setup(
    name="jsonbind",
    version="0.1.0",
    author="Nucleusbox",
    author_email="info@nucleusbox.com",
    description="Typed deserialization of JSON payloads (e.g. LLM output) into Python classes, with hand-written or pydantic schema validation.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    python_requires=">=3.9,<4.0",
    install_requires=[
        "pydantic>=2.0",
        "openai>=1.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    include_package_data=True,
)
