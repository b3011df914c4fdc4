import os.path
import re
from setuptools import setup

here = os.path.abspath(os.path.dirname(__file__))

# Not `from npaes128 import __version__`: that needs numpy at build time
with open(os.path.join(here, "npaes128", "__init__.py")) as f:
    version = re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)

setup(
    name="npaes128",
    version=version,
    description="AES-128 single-block cipher, NumPy implementation",
    license="Apache 2.0",
    keywords=[
        "aes", "aes-128", "aes 128", "rijndael", "encryption",
        "decryption", "numpy", "symmetric", "cipher", "block cipher"
    ],
    packages=["npaes128"],
    long_description=open(os.path.join(here, "README.md")).read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Topic :: Security :: Cryptography",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
    ],
    python_requires=">=3.7",
    install_requires=["numpy>=1.17"],
    extras_require={"test": ["pytest"]},
)
