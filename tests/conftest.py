# tests/conftest.py
"""Shared fixtures for the lambdasheet tests."""

import random

import pytest

from lambdasheet.cheatsheet import words
from lambdasheet.models import ActionEvent, Color, Person, Shape
from lambdasheet.streams import seq


@pytest.fixture
def phrase_words():
    """The 14 words of the cheat sheet phrase."""
    return words()


@pytest.fixture
def words_seq(phrase_words):
    return seq(phrase_words)


@pytest.fixture
def shapes():
    return [Shape(Color.BLACK), Shape(Color.YELLOW), Shape(Color.BLUE)]


@pytest.fixture
def persons():
    return [Person("Joey", 18), Person("Phil", 27), Person("Ann", 9)]


@pytest.fixture
def events():
    return [ActionEvent(3000, "save"), ActionEvent(1000, "open"), ActionEvent(2000, "edit")]


@pytest.fixture
def rng():
    return random.Random(42)
