# This project was developed with assistance from AI tools.
__version__ = "1.0.0"
