"""
Package demonstrating functional programming in Python: function values, functional shapes, lazy
pipelines and terminal operations. Imports the primary entrypoint at streams.seq and the Option
container returned by lookups.
"""

from lambdasheet.streams import seq
from lambdasheet.option import Option

__license__ = "MIT"
__version__ = "0.1.0"
__status__ = "Development"
