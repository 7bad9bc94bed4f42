import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="findroot",
    version="0.1.0",
    description="Iterative root finders and fixed point solvers for "
                "scalar equations and systems of equations.",
    install_requires=[
        'numpy', 'scipy'
    ],
    extras_require={
        'test': ['pytest']
    },
    keywords='root finding nonlinear equations fixed point numerical',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['findroot', 'findroot.*']),
    python_requires='>=3.9',
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Science/Research",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.9",
        "Topic :: Scientific/Engineering :: Mathematics"
    ]
)
