from pathlib import Path

import setuptools

here = Path(__file__).parent


def parse_requirements(filename):
    with open(here / filename) as f:
        return [l.strip() for l in f.readlines() if l.strip() and l[0] not in ["-", "#"]]


setuptools.setup(
    name="nestcss",
    version="0.1.0",
    description="Fluent builders that emit nested CSS",
    long_description=open(here / "README.md", "r").read(),
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=["nestcss", "nestcss.*"]),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    install_requires=parse_requirements("requirements.in"),
    extras_require={"dev": parse_requirements("requirements-dev.in")},
)
