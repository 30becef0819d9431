"""CPU scheduling algorithms, a resource synchronization simulation and a Tk front end."""

__version__ = "0.1.0"