from setuptools import setup

# Get long description from the README.rst file.
with open("README.rst") as file:
    LONG_DESC = file.read()

# Get version number from the module's __init__.py file.
with open("./src/ldapkit/__init__.py") as src:
    VER = [
        line.split('"')[1] for line in src.readlines() if line.startswith("__version__")
    ][0]

setup(
    name="ldapkit",
    version=VER,
    description="Toolkit independent SSL and connection initialisation for LDAP C SDKs.",
    long_description=LONG_DESC,
    long_description_content_type="text/x-rst",
    license="MIT",
    package_dir={"": "src"},
    package_data={"ldapkit": ["py.typed"]},
    packages=["ldapkit", "ldapkit.toolkits"],
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest>=6.0"],
    },
    keywords=[
        "python3",
        "ldap",
        "ldaps",
        "ssl",
        "tls",
        "libldap",
        "winldap",
        "novell",
        "netscape",
        "ctypes",
    ],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: MIT License",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: Unix",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: System :: Systems Administration :: Authentication/Directory :: LDAP",
    ],
)
