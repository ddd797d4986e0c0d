from setuptools import setup, find_packages

setup(
    name="zestd",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "aiohttp>=3.9",
        "pydantic>=2.0",
        "python-dotenv>=1.0",
        "colorlog>=6.7",
        "langchain-core>=0.2",
        "langchain-openai>=0.1",
        "langchain-google-genai>=1.0",
        "streamlit>=1.30",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
            "pytest-cov>=4.1",
        ],
    },
    python_requires=">=3.9",
    description="Instant YouTube transcripts via a read-through proxy, with an AI synopsis",
    author="Venkatesh Murugadas",
)
