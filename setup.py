from setuptools import setup

__version__ = "0.1.0"


install_requires = [
    "pydantic>=2.5",
    "PyYAML>=6.0",
]

testing_extras = [
    "black",
    "coverage",
    "isort",
    "mypy",
    "pylint",
    "pytest",
    "types-PyYAML",
    "wheel",
]

setup(
    name="rdtools",
    version=__version__,
    description="DNSSEC DNSKEY/DS RDATA decoding and key tag tools",
    classifiers=["Programming Language :: Python :: 3",],
    keywords="dnssec dnskey ds keytag",
    packages=[
        "rdtools",
        "rdtools.common",
        "rdtools.tools",
    ],
    package_dir={"": "src"},
    python_requires=">=3.10",
    include_package_data=True,
    zip_safe=False,
    install_requires=install_requires,
    extras_require={"testing": testing_extras,},
    entry_points={
        "console_scripts": [
            "rdtools-decode = rdtools.tools.rrdecode:main",
        ]
    },
)
