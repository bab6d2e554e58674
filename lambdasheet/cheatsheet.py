"""
The lambda cheat sheet is by no means thorough but covers the functional features used day to day:
the different ways of writing a function value, the common functional shapes, lazy pipelines and
the terminal operations that force them.

Every demonstration is independent. Call any of them on its own; they print to stdout.
"""
import random
from collections import OrderedDict, namedtuple
from operator import attrgetter

from lambdasheet.bulk import for_each, remove_if
from lambdasheet.functions import (
    ActionListener,
    BiFunction,
    Comparator,
    Consumer,
    Function,
    Predicate,
    Supplier,
    UnaryOperator,
    as_key,
)
from lambdasheet.logger import get_logger
from lambdasheet.models import ActionEvent, Color, Person, Shape
from lambdasheet.option import Option
from lambdasheet.streams import seq
from lambdasheet.util import compose, require_non_null

logger = get_logger()

PHRASE = "Every problem in computer science can be solved by adding another level of indirection"
NAMES = ("Tommy", "Ozzy", "Bill", "Geezer")

FunctionalShapes = namedtuple(
    "FunctionalShapes",
    ["over_18_test", "to_string", "age_next_year", "name_supplier", "age_in", "shout"],
)
TerminalResults = namedtuple(
    "TerminalResults",
    ["output", "map_out", "count", "any_match", "find_first", "find_first_with_else"],
)


def words(phrase=PHRASE):
    return tuple(phrase.split(" "))


def print_all(sequence):
    """
    Prints each element followed by a space, then ends the line
    """
    sequence.for_each(lambda s: print(s, end=" "))
    print()


# Different forms of functional interfaces


class PrintingActionListener(ActionListener):
    # the long way: a named class implementing the single method
    def action_performed(self, event):
        print("Event happened at %d" % event.when)


class WhenComparator(Comparator):
    def compare(self, o1, o2):
        require_non_null(o1)
        require_non_null(o2)
        return -1 if o1.when < o2.when else 0 if o1.when == o2.when else 1


def listener_forms():
    """
    Four interchangeable ways of writing the same event handler, from the most verbose to a
    multi-statement body.
    """
    al = PrintingActionListener()

    # lambdas take the form: lambda params: expression
    al_simple = lambda event: print("Event happened at %d" % event.when)

    # lambda parameters cannot be annotated, the name holding the lambda can
    al_with_types: Consumer[ActionEvent] = lambda event: print(
        "Event happened at %d" % event.when
    )

    # more than one statement needs a def
    def al_with_body(event: ActionEvent) -> None:
        print("Event happened at %d" % event.when)
        print("Event command %s" % event.action_command)

    return OrderedDict(
        [
            ("al", al),
            ("al_simple", al_simple),
            ("al_with_types", al_with_types),
            ("al_with_body", al_with_body),
        ]
    )


def comparator_forms():
    """
    Three interchangeable two-argument comparisons of events by timestamp, returning -1, 0 or 1.
    The named class and the def reject None, the one line lambda does not check.
    """
    comparator = WhenComparator()

    comparator_no_nulls = (
        lambda o1, o2: -1 if o1.when < o2.when else 0 if o1.when == o2.when else 1
    )

    def comparator_lambda(o1, o2):
        require_non_null(o1)
        require_non_null(o2)
        # the return is explicit here, a lambda's expression is returned implicitly
        return -1 if o1.when < o2.when else 0 if o1.when == o2.when else 1

    return OrderedDict(
        [
            ("comparator", comparator),
            ("comparator_no_nulls", comparator_no_nulls),
            ("comparator_lambda", comparator_lambda),
        ]
    )


def different_forms_of_functional_interfaces():
    logger.d("different forms of functional interfaces")
    last_clicked = Option.empty()
    print("Last clicked %s" % last_clicked.map(str).or_else("never"))

    event = ActionEvent.at("2013-09-23 10:00:00", "click")
    for handler in listener_forms().values():
        handler(event)

    events = [ActionEvent(3000, "save"), ActionEvent(1000, "open"), ActionEvent(2000, "edit")]
    for name, comparator in comparator_forms().items():
        ordered = sorted(events, key=as_key(comparator))
        print("%s: %s" % (name, " ".join(e.action_command for e in ordered)))


# Methods on collections


def methods_on_collections():
    logger.d("methods on collections")
    shapes = [Shape(Color.RED), Shape(Color.BLACK), Shape(Color.YELLOW)]
    for_each(shapes, lambda s: s.set_color(Color.RED))
    print(shapes)
    remove_if(shapes, lambda s: s.get_color() == Color.RED)
    print(shapes)
    return shapes


# Functional interfaces


def functional_shapes(rng=None):
    """
    The common single argument shapes, plus two argument and same type variants.

    :param rng: source of randomness for the name supplier, anything with a choice method
    :return: FunctionalShapes
    """
    rng = rng or random.Random()

    # predicates return a bool
    over_18_test: Predicate[Person] = lambda person: person.age >= 18

    # consumers return nothing
    def to_string(person: Person) -> None:
        str(person)

    # functions turn one form into another
    age_next_year: Function[Person, int] = lambda person: person.age + 1
    # suppliers take nothing
    name_supplier: Supplier[str] = lambda: rng.choice(NAMES)
    age_in: BiFunction[Person, int, int] = lambda person, years: person.age + years
    shout: UnaryOperator[str] = lambda name: name.upper()

    return FunctionalShapes(over_18_test, to_string, age_next_year, name_supplier, age_in, shout)


def functional_interfaces(rng=None):
    logger.d("functional interfaces")
    shapes = functional_shapes(rng)
    person = Person("Joey", 18)
    print(shapes.over_18_test(person))
    shapes.to_string(person)
    print(shapes.age_next_year(person))
    print(shapes.name_supplier())
    print(shapes.age_in(person, 10))
    print(compose(shapes.shout, attrgetter("name"))(person))
    return shapes


# Stream operations


def stream_pipelines(phrase=PHRASE):
    """
    Independent lazy pipelines over the words of phrase. Nothing is evaluated until a pipeline is
    iterated, and each one starts again from the original words.
    """
    words_seq = seq(words(phrase))
    return OrderedDict(
        [
            ("map", words_seq.map(lambda s: s.upper())),
            ("filter", words_seq.filter(lambda s: (len(s) & 1) == 0)),
            ("slice", words_seq.slice(3, 8)),
            ("limit", words_seq.limit(5)),
            ("sorted", words_seq.sorted()),
            ("distinct", words_seq.map(lambda s: s[:1]).distinct()),
        ]
    )


def stream_operations(phrase=PHRASE):
    logger.d("stream operations")
    for pipeline in stream_pipelines(phrase).values():
        print_all(pipeline)


# Terminal operations


def terminal_operations(phrase=PHRASE):
    logger.d("terminal operations")
    words_seq = seq(words(phrase))

    output = words_seq.map(lambda s: s.upper()).to_list()

    map_out = words_seq.map(lambda s: s.upper()).to_tuple()
    print(map_out)

    count = words_seq.filter(lambda s: len(s) <= 3).count()
    print(count)

    any_match = words_seq.any_match(lambda s: s.startswith("c"))
    print(any_match)

    find_first = words_seq.filter(lambda s: s.startswith("c")).find_first()
    print(find_first.get())

    find_first_with_else = words_seq.filter(lambda s: s.startswith("x")).find_first()
    print(find_first_with_else.or_else("not found"))

    return TerminalResults(
        output,
        map_out,
        count,
        any_match,
        find_first,
        find_first_with_else.or_else("not found"),
    )


# Primitives


def primitives(persons=None):
    """
    Sums ages pulled out with a field accessor rather than a lambda. Any record with an age
    attribute works.
    """
    logger.d("primitives")
    if persons is None:
        persons = [Person("Joey", 18), Person("Phil", 27)]
    age = attrgetter("age")
    total = seq(persons).sum(age)
    average = seq(persons).average(age)
    print(total)
    print(average.or_else(0))
    return total
