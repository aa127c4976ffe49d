"""scvmongo: generic MongoDB repository and bearer-token HTTP guard."""

__version__ = "0.1.0"
__author__ = "scvmongo maintainers"

__all__ = ["__version__", "__author__"]
