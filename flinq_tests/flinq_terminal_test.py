import numpy as np
import pandas as pd
import suite
from collections import namedtuple
from flinq import Q, empty

test = suite.test
assert_that = suite.assert_that

Person = namedtuple('Person', ['id', 'name', 'age'])

sample_people = [
    Person(1, 'alice', 25),
    Person(2, 'bob', 30),
    Person(3, 'charlie', 25),
]


@test("to_array returns a copy that does not alias the wrapper")
def test_to_array_copy():
    source = [1, 2, 3]
    q = Q(source)
    result = q.to_array()
    assert_that(result == source and result is not source, "should be an equal but distinct list")
    result.append(4)
    assert_that(q.count() == 3, "mutating the copy leaves the wrapper alone")


@test("to_list matches to_array")
def test_to_list():
    q = Q(sample_people)
    assert_that(q.to_list() == q.to_array(), "same contents")
    assert_that(q.to_list() is not q.get_collection(), "also a copy")


@test("to_dictionary keys elements, last write wins")
def test_to_dictionary():
    q = Q(sample_people + [Person(2, 'bobby', 31)])
    by_id = q.to_dictionary(lambda p: p.id)
    assert_that(list(by_id) == [1, 2, 3], "keys keep first insertion order")
    assert_that(by_id[2].name == 'bobby', "the later element overwrites the earlier one")


@test("to_dictionary with a value selector")
def test_to_dictionary_values():
    ages = Q(sample_people).to_dictionary(lambda p: p.name, lambda p: p.age)
    assert_that(ages == {'alice': 25, 'bob': 30, 'charlie': 25}, f"unexpected dict: {ages}")
    assert_that(empty().to_dictionary(lambda x: x) == {}, "empty gives an empty dict")


@test("to_set collects distinct elements")
def test_to_set():
    assert_that(Q([1, 2, 2, 3]).to_set() == {1, 2, 3}, "set of elements")


@test("to_numpy creates a numpy array")
def test_to_numpy():
    result = Q([1, 2, 3]).select(lambda x: x * 2).to_numpy()
    assert_that(isinstance(result, np.ndarray), f"should return ndarray: {type(result)}")
    assert_that(np.array_equal(result, np.array([2, 4, 6])), f"unexpected array: {result}")


@test("to_series and to_data_frame create pandas objects")
def test_to_pandas():
    series = Q(sample_people).select(lambda p: p.age).to_series()
    assert_that(isinstance(series, pd.Series), "should be a series")
    assert_that(series.sum() == 80, "series holds the ages")

    df = Q(sample_people).where(lambda p: p.age == 25).to_data_frame()
    assert_that(isinstance(df, pd.DataFrame), "should be a dataframe")
    assert_that(list(df.columns) == ['id', 'name', 'age'], f"namedtuple fields become columns: {list(df.columns)}")
    assert_that(df['name'].tolist() == ['alice', 'charlie'], "one row per element")


if __name__ == "__main__":
    suite.run(title="flinq conversion test suite")
