"""Setup script for claude-setup."""
from setuptools import setup, find_packages

dependencies = [
    "requests",
    "rich>=13.0.0",
    "prompt-toolkit>=3.0.52",
    "python-dotenv",
]

setup(
    name="claude-setup",
    version="0.1.0",
    description="Install a Claude Code configuration bundle into ~/.claude",
    license="MIT",
    python_requires=">=3.11,<4.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=dependencies,
    extras_require={
        "test": ["pytest>=8.0.0"],
    },
    entry_points={
        "console_scripts": [
            "claude-setup=claude_setup:cli_main",
        ],
    },
)
