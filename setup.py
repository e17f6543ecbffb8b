from setuptools import setup, find_packages

setup(
    name="knapsacks",
    version="0.1.0",
    packages=find_packages(exclude=["test", "test.*"]),
    install_requires=[
        "pyyaml",
        "numpy",
        "pandas",
        "tqdm",
        "matplotlib",
        "seaborn",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'generate = Scripts.generate_data:main',
            'evaluate = Scripts.evaluate_solvers:main',
            'sweep = Scripts.sweep_accuracy:main',
        ],
    }
)
