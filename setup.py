from setuptools import setup, find_packages

CORE_DEPS = [
    "yt-dlp",
    "requests",
    "python-dotenv",
    "colorama>=0.4.6",
]

setup(
    name="tunegrab",
    version="0.1.0",
    description="Download a Spotify track's audio from YouTube as a tagged MP3",
    packages=find_packages(include=["tunegrab", "tunegrab.*"]),
    python_requires=">=3.8",
    install_requires=CORE_DEPS,
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "tunegrab=tunegrab.main:main",
        ],
    },
)
