"""
Global constants used throughout the project
"""

# Relative graph paths given to the loader resolve against this directory
DATA = "data"

LOG_FORMAT = "%(levelname)s | %(message)s"

DEBUG = False
