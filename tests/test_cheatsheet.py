# tests/test_cheatsheet.py

import itertools
import random
from types import SimpleNamespace

import pytest

from lambdasheet import cheatsheet
from lambdasheet.cheatsheet import NAMES, PHRASE
from lambdasheet.errors import NullArgumentError
from lambdasheet.functions import Comparator, as_key
from lambdasheet.models import ActionEvent, Person


class TestWords:
    def test_fourteen_words(self, phrase_words):
        assert len(phrase_words) == 14
        assert phrase_words[0] == "Every"
        assert phrase_words[-1] == "indirection"

    def test_immutable(self, phrase_words):
        assert isinstance(phrase_words, tuple)


class TestFunctionalForms:
    def test_every_listener_prints_the_timestamp(self, capsys):
        event = ActionEvent(1234, "go")
        for name, handler in cheatsheet.listener_forms().items():
            handler(event)
            out = capsys.readouterr().out
            assert out.startswith("Event happened at 1234\n"), name

    def test_listener_with_body_prints_command(self, capsys):
        cheatsheet.listener_forms()["al_with_body"](ActionEvent(1, "save"))
        assert capsys.readouterr().out == "Event happened at 1\nEvent command save\n"

    def test_verbose_forms_are_class_instances(self):
        forms = cheatsheet.comparator_forms()
        assert isinstance(forms["comparator"], Comparator)

    @pytest.mark.parametrize("first, second, expected", [(1, 2, -1), (2, 2, 0), (3, 2, 1)])
    def test_comparators_agree(self, first, second, expected):
        a, b = ActionEvent(first, "a"), ActionEvent(second, "b")
        for name, comparator in cheatsheet.comparator_forms().items():
            assert comparator(a, b) == expected, name

    def test_comparators_agree_on_all_pairs(self):
        events = [ActionEvent(when, "") for when in (-5, 0, 0, 7, 10 ** 12)]
        forms = list(cheatsheet.comparator_forms().values())
        for a, b in itertools.product(events, repeat=2):
            results = {form(a, b) for form in forms}
            assert len(results) == 1

    @pytest.mark.parametrize("name", ["comparator", "comparator_lambda"])
    def test_null_checking_comparators_reject_none(self, name):
        comparator = cheatsheet.comparator_forms()[name]
        event = ActionEvent(1, "a")
        with pytest.raises(NullArgumentError):
            comparator(None, event)
        with pytest.raises(NullArgumentError):
            comparator(event, None)

    def test_comparator_sort_key(self, events):
        comparator = cheatsheet.comparator_forms()["comparator"]
        assert [e.when for e in sorted(events, key=comparator.as_key())] == [1000, 2000, 3000]
        lam = cheatsheet.comparator_forms()["comparator_no_nulls"]
        assert [e.when for e in sorted(events, key=as_key(lam))] == [1000, 2000, 3000]

    def test_demonstration_output(self, capsys):
        cheatsheet.different_forms_of_functional_interfaces()
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Last clicked never"
        assert lines[1:5] == ["Event happened at 1379930400000"] * 4
        assert lines[5] == "Event command click"
        assert lines[6:] == [
            "comparator: open edit save",
            "comparator_no_nulls: open edit save",
            "comparator_lambda: open edit save",
        ]


class TestMethodsOnCollections:
    def test_demonstration_removes_everything(self, capsys):
        shapes = cheatsheet.methods_on_collections()
        assert shapes == []
        assert capsys.readouterr().out == "[Shape(RED), Shape(RED), Shape(RED)]\n[]\n"


class TestFunctionalShapes:
    def test_predicate(self):
        shapes = cheatsheet.functional_shapes()
        assert shapes.over_18_test(Person("Joey", 18)) is True
        assert shapes.over_18_test(Person("Kid", 17)) is False

    def test_consumer_returns_nothing(self):
        assert cheatsheet.functional_shapes().to_string(Person("Joey", 18)) is None

    def test_function(self):
        assert cheatsheet.functional_shapes().age_next_year(Person("Joey", 18)) == 19

    def test_supplier_stays_in_names(self, rng):
        supplier = cheatsheet.functional_shapes(rng).name_supplier
        assert {supplier() for _ in range(200)} <= set(NAMES)

    def test_supplier_is_pinned_by_seed(self):
        first = cheatsheet.functional_shapes(random.Random(7)).name_supplier
        second = cheatsheet.functional_shapes(random.Random(7)).name_supplier
        assert [first() for _ in range(10)] == [second() for _ in range(10)]

    def test_supplier_uses_injected_source(self):
        class Fixed:
            def choice(self, names):
                return names[2]

        assert cheatsheet.functional_shapes(Fixed()).name_supplier() == "Bill"

    def test_bi_function_and_unary_operator(self):
        shapes = cheatsheet.functional_shapes()
        assert shapes.age_in(Person("Joey", 18), 10) == 28
        assert shapes.shout("joey") == "JOEY"

    def test_demonstration_output(self, capsys):
        class Fixed:
            def choice(self, names):
                return names[0]

        cheatsheet.functional_interfaces(Fixed())
        assert capsys.readouterr().out.splitlines() == ["True", "19", "Tommy", "28", "JOEY"]


class TestStreamOperations:
    def test_map_uppercases(self, phrase_words):
        result = cheatsheet.stream_pipelines()["map"].to_list()
        assert result == [w.upper() for w in phrase_words]
        assert [len(w) for w in result] == [len(w) for w in phrase_words]

    def test_filter_keeps_even_lengths(self):
        result = cheatsheet.stream_pipelines()["filter"].to_list()
        assert result == ["in", "computer", "be", "solved", "by", "adding", "of"]
        assert all(len(w) % 2 == 0 for w in result)

    def test_slice(self):
        assert cheatsheet.stream_pipelines()["slice"].to_list() == [
            "computer",
            "science",
            "can",
            "be",
            "solved",
        ]

    def test_limit(self, phrase_words):
        assert cheatsheet.stream_pipelines()["limit"].to_list() == list(phrase_words[:5])
        short = cheatsheet.stream_pipelines("a b")["limit"].to_list()
        assert short == ["a", "b"]

    def test_sorted(self, phrase_words):
        result = cheatsheet.stream_pipelines()["sorted"].to_list()
        assert result == sorted(phrase_words)
        assert all(a <= b for a, b in zip(result, result[1:]))
        assert result[0] == "Every"

    def test_distinct_first_characters(self):
        result = cheatsheet.stream_pipelines()["distinct"].to_list()
        assert result == ["E", "p", "i", "c", "s", "b", "a", "l", "o"]

    def test_pipelines_are_rerunnable(self):
        for pipeline in cheatsheet.stream_pipelines().values():
            assert pipeline.to_list() == pipeline.to_list()

    def test_demonstration_output(self, capsys):
        cheatsheet.stream_operations()
        lines = capsys.readouterr().out.split("\n")
        assert lines[0] == "EVERY PROBLEM IN COMPUTER SCIENCE CAN BE SOLVED BY ADDING ANOTHER LEVEL OF INDIRECTION "
        assert lines[1] == "in computer be solved by adding of "
        assert lines[2] == "computer science can be solved "
        assert lines[3] == "Every problem in computer science "
        assert lines[4] == "Every adding another be by can computer in indirection level of problem science solved "
        assert lines[5] == "E p i c s b a l o "

    def test_demonstration_is_idempotent(self, capsys):
        cheatsheet.stream_operations()
        first = capsys.readouterr().out
        cheatsheet.stream_operations()
        assert capsys.readouterr().out == first


class TestTerminalOperations:
    def test_results(self, phrase_words, capsys):
        results = cheatsheet.terminal_operations()
        assert results.output == [w.upper() for w in phrase_words]
        assert isinstance(results.map_out, tuple)
        assert len(results.map_out) == len(phrase_words)
        assert results.count == 5
        assert results.any_match is True
        assert results.find_first.get() == "computer"
        assert results.find_first_with_else == "not found"

    def test_demonstration_output(self, capsys):
        cheatsheet.terminal_operations()
        lines = capsys.readouterr().out.splitlines()
        assert lines[1:] == ["5", "True", "computer", "not found"]

    def test_count_matches_literal_sentence(self):
        expected = len([w for w in PHRASE.split(" ") if len(w) <= 3])
        assert cheatsheet.terminal_operations().count == expected


class TestPrimitives:
    def test_sum_of_ages(self, persons, capsys):
        assert cheatsheet.primitives(persons) == 54
        assert capsys.readouterr().out == "54\n18.0\n"

    def test_default_persons(self, capsys):
        assert cheatsheet.primitives() == 45

    def test_ages_read_by_attribute(self, capsys):
        records = [SimpleNamespace(name="Joey", age=18), SimpleNamespace(name="Ann", age=2)]
        assert cheatsheet.primitives(records) == 20
        assert capsys.readouterr().out == "20\n10.0\n"

    def test_empty(self, capsys):
        assert cheatsheet.primitives([]) == 0
        assert capsys.readouterr().out == "0\n0\n"
