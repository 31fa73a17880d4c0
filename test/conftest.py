import logging

import pytest

from aqlfilter import Filter, FilterProcessor

logger = logging.getLogger(__name__)


@pytest.fixture(scope="session")
def fp():
    return FilterProcessor()


@pytest.fixture()
def basic_where_filter():
    # numbers are floats, as produced by the JSON decode step
    return Filter(
        where=[
            {
                "password": "qwertyuiop",
                "age": 22.0,
                "money": 3000.55,
                "awesome": True,
                "notAwesome": False,
                "graduated": [2010.0, 2015.0],
                "avg": [15.5, 13.24],
                "birthPlace": ["Chalon", "Macon"],
                "bools": [True, False],
                "strWithQuote": "O'Hare",
            }
        ]
    )


@pytest.fixture()
def or_where_filter():
    return Filter(
        where=[
            {
                "oR": [
                    {"lastName": {"eq": "O'Connor"}},
                    {"age": {"gt": 23.0}},
                    {"age": {"lt": 26.0}},
                ]
            }
        ]
    )


@pytest.fixture()
def and_where_filter():
    return Filter(
        where=[
            {
                "and": [
                    {"firstName": {"neq": "Toto"}},
                    {"money": 200.5},
                ]
            }
        ]
    )


@pytest.fixture()
def not_where_filter():
    return Filter(
        where=[
            {"not": {"firstName": "D'Arcy"}},
            {
                "nOt": {
                    "or": [
                        {"lastName": "Herfray"},
                        {"money": {"gte": 0.0}},
                        {"money": {"lte": 1000.5}},
                    ]
                }
            },
        ]
    )


@pytest.fixture()
def like_where_filter():
    return Filter(
        where=[
            {
                "like": {
                    "text": "firstName",
                    "search": "fab%",
                    "case_insensitive": True,
                }
            },
            {
                "like": {
                    "text": "lastName",
                    "search": "Her%",
                    "case_insensitive": False,
                }
            },
        ]
    )
