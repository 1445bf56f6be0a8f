"""create-mern-app: scaffold a MERN stack project from a name and a few flags."""

__version__ = "0.1.0"
