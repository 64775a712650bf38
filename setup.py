from setuptools import setup

# install with: pip install -e .[test]

setup(
    name='mastermind',
    version='0.1.0',
    description='a four color code-breaking game for the terminal',
    packages=['mastermind'],
    python_requires='>=3.8',
    install_requires=[
        'click',
        'rich',
        'blinker',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'mastermind = mastermind.boardui:cli',
        ],
    },
)
