from setuptools import setup


if __name__ == "__main__":

    with open("README.rst") as f:
        long_description = f.read()

    setup(
        classifiers=[
            "Intended Audience :: Developers",
            "License :: OSI Approved :: MIT License",
            "Operating System :: OS Independent",
            "Programming Language :: Python",
            "Programming Language :: Python :: 3.8",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
            "Programming Language :: Python :: Implementation :: CPython",
            "Programming Language :: Python :: Implementation :: PyPy",
            "Topic :: Security :: Cryptography",
            "Topic :: Software Development :: Libraries :: Python Modules",
        ],
        description="self-describing scrypt password hashes",
        long_description=long_description,
        long_description_content_type="text/x-rst",
        python_requires=">=3.8",
        setup_requires=["incremental"],
        use_incremental=True,
        install_requires=[
            "attrs>=22.2.0",
            # PyPy's hashlib has no scrypt.
            "cryptography ; platform_python_implementation=='PyPy'",
            "incremental",
            "Twisted>=22.8",  # Deferred.fromCoroutine
            "typing_extensions ; python_version<'3.10'",
            "zope.interface",
        ],
        extras_require={
            "test": [
                "hypothesis",
            ],
        },
        keywords="password hashing scrypt twisted",
        license="MIT",
        name="pwbounce",
        packages=["pwbounce", "pwbounce.test"],
        package_dir={"": "src"},
        package_data=dict(
            pwbounce=[],
        ),
        url="https://github.com/pwbounce/pwbounce",
        zip_safe=False,
    )
