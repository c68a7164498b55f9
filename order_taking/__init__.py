"""Order-taking workflow: validate, price, acknowledge and publish orders."""

__version__ = "0.1.0"
