from setuptools import setup
from flagpick.const import VERSION_STR, DESCRIPTION

setup(
    name="flagpick",
    version=VERSION_STR,
    python_requires='>=3.10',
    description=DESCRIPTION,
    author="Cute Engineering",
    author_email="contact@cute.engineering",
    url="https://cute.engineering/",
    packages=["flagpick"],
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    license="MIT",
    platforms="any",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
