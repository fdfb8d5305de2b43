from setuptools import find_namespace_packages, setup

setup(
    name="buildsize",
    version="0.3.0",
    description="Read asset bundle build-size reports from editor logs.",
    python_requires=">=3.12",
    packages=find_namespace_packages(include=["buildsize", "buildsize.*"]),
    install_requires=[
        "rich>=13.7",
        "result>=0.17",
        "textual>=0.80",
        "typer>=0.12",
    ],
    extras_require={"test": ["pytest>=8"]},
    entry_points={"console_scripts": ["buildsize=buildsize.cli.app:cli"]},
)
