"""
Example payloads used by the demonstrations: colored shapes, people and action events.
"""
from collections import namedtuple
from enum import Enum

from lambdasheet.util import parse_millis


class Color(Enum):
    RED = "red"
    BLACK = "black"
    YELLOW = "yellow"
    BLUE = "blue"
    GREEN = "green"


class Shape(object):
    def __init__(self, color):
        self.color = color

    def get_color(self):
        return self.color

    def set_color(self, color):
        self.color = color

    def __repr__(self):
        return "Shape({0})".format(self.color.name)


Person = namedtuple("Person", ["name", "age"])


class ActionEvent(namedtuple("ActionEvent", ["when", "action_command"])):
    """
    Record of something happening at `when` (epoch milliseconds) triggered by `action_command`.
    """

    __slots__ = ()

    @classmethod
    def at(cls, dstring, action_command=""):
        """
        Builds an event from a date expression understood by dateparser, such as
        "2021-01-01 00:00:00" or "5 minutes ago". Naive dates are read as UTC.

        :param dstring: date expression
        :param action_command: command name carried by the event
        :return: ActionEvent
        """
        return cls(parse_millis(dstring), action_command)
