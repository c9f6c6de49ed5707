"""Small numeric, string and file-processing exercises, most with command-line front ends."""

__version__ = "0.1.0"