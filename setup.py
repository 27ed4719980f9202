from setuptools import setup, find_packages

def parse_requirements(requirements):
    with open(requirements) as f:
        return [l.strip('\n') for l in f if l.strip('\n') and not l.startswith('#')]

requirements = parse_requirements("requirements.txt")

setup(
    name='turnkey_client',
    version='0.1.0',
    description='Async client and types for the Turnkey key-custody API',
    python_requires='>=3.10',
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
            "respx>=0.21",
        ],
    },
    package_dir={"": "src"},
    packages=find_packages("src"),
    entry_points={
        "console_scripts": [
            "turnkey=turnkey_client.cli:cli",
        ],
    }
)
