#!/usr/bin/env python3
"""
Setup script for the URL shortener service.
"""

from setuptools import setup, find_packages
import os

# Read requirements
def read_requirements():
    req_path = os.path.join(os.path.dirname(__file__), 'requirements.txt')
    if os.path.exists(req_path):
        with open(req_path, 'r', encoding='utf-8') as f:
            return [line.strip() for line in f if line.strip() and not line.startswith('#')]
    return []

setup(
    name="url_shortener",
    version="1.0.0",
    description="Deterministic, idempotent URL shortening service with an HTTP API and CLI",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["app", "config"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Framework :: FastAPI",
        "Topic :: Internet :: WWW/HTTP",
    ],
    python_requires=">=3.10",
    install_requires=read_requirements(),
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.24.0",
            "httpx>=0.27.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "url-shortener=shortener.cli:main",
            "url-shortener-server=app:main",
        ],
    },
    keywords="url shortener, short links, fastapi, asyncpg",
)
