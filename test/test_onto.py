import pytest

from aqlfilter import Filter, FilterDecodeError, ProcessedFilter


def test_from_json_defaults():
    f = Filter.from_json("{}")
    assert f == Filter()
    assert f.sort == [] and f.where == [] and f.options == []


def test_from_json_numbers_become_floats():
    f = Filter.from_json(
        b'{"offset": 2, "limit": 5, "where": [{"age": {"gt": 23}, "ids": [1, 2]}]}'
    )
    assert f.offset == 2 and isinstance(f.offset, int)
    assert f.limit == 5
    condition = f.where[0]
    assert isinstance(condition["age"]["gt"], float)
    assert all(isinstance(v, float) for v in condition["ids"])


def test_from_json_keeps_options_opaque():
    f = Filter.from_json('{"options": ["fullCount", "anything goes; DROP"]}')
    assert f.options == ["fullCount", "anything goes; DROP"]


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "[1, 2]",
        '{"offset": "abc"}',
        '{"offset": 1.5}',
        '{"sort": "age"}',
        '{"where": {"age": 1}}',
        '{"unknown": true}',
    ],
)
def test_from_json_errors(raw):
    with pytest.raises(FilterDecodeError):
        Filter.from_json(raw)


def test_filter_is_frozen():
    f = Filter(limit=1)
    with pytest.raises(ValueError):
        f.limit = 2


def test_processed_filter_alias():
    p = ProcessedFilter(offsetLimit="3, 4", sort="var.a ASC")
    assert p.offset_limit == "3, 4"
    assert p.to_dict() == {"offsetLimit": "3, 4", "sort": "var.a ASC", "where": ""}
    assert not p.is_empty()


def test_from_json_keeps_exact_offset_limit():
    f = Filter.from_json('{"offset": 9007199254740993, "limit": 1}')
    assert f.offset == 9007199254740993
    assert f.limit == 1


def test_from_json_where_bools_stay_bools():
    f = Filter.from_json('{"where": [{"a": true, "b": [false, 2]}]}')
    assert f.where == [{"a": True, "b": [False, 2.0]}]
    assert f.where[0]["a"] is True


@pytest.mark.parametrize(
    "raw",
    [
        '{"where": [{"a": ' + "[" * 100000 + "]" * 100000 + "}]}",
        '{"where": [{"a": 1' + "0" * 400 + "}]}",
    ],
)
def test_from_json_unprocessable_where(raw):
    with pytest.raises(FilterDecodeError):
        Filter.from_json(raw)
