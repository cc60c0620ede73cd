import suite
from dgen import from_schema
from flinq import Q, JoinRow, empty

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

# --- test data schemas ---
users_schema = {
    'user_id': {'_qen_provider': 'sequence', 'name': 'users'},
    'name': 'name'
}

posts_schema = {
    'post_id': {'_qen_provider': 'sequence', 'name': 'posts'},
    # includes users that don't exist, so some posts never match
    'user_id': ('pyint', {'min_value': 1, 'max_value': 8}),
    'content': 'sentence'
}

people = [
    {'id': 1, 'name': 'John', 'age': 25},
    {'id': 2, 'name': 'Alice', 'age': 30},
    {'id': 3, 'name': 'Bob', 'age': 22},
    {'id': 4, 'name': 'Sophie', 'age': 22},
    {'id': 5, 'name': 'Sara', 'age': 29},
]


# --- group_by ---

@test("group_by keeps first-seen key order and source order within groups")
def test_group_by_order():
    groups = Q(people).group_by(lambda p: p['age'])
    assert_that(list(groups.keys()) == [25, 30, 22, 29], f"unexpected key order: {list(groups)}")
    names = {age: [p['name'] for p in members] for age, members in groups.items()}
    assert_that(names[22] == ['Bob', 'Sophie'], "members should keep source order")
    assert_that(names[25] == ['John'], "single member group")


@test("group_by shares elements with the source")
def test_group_by_shares_elements():
    groups = Q(people).group_by(lambda p: p['age'] > 24)
    assert_that(groups[True][0] is people[0], "elements are not copied")
    assert_that(sum(len(g) for g in groups.values()) == len(people), "every element lands in one group")


@test("group_by on an empty sequence gives an empty dict")
def test_group_by_empty():
    assert_that(empty().group_by(lambda x: x) == {}, "no groups expected")


@test("group_by treats keys with python equality")
def test_group_by_key_equality():
    groups = Q([1, 1.0, 2, (1, 2), (1, 2)]).group_by(lambda x: x)
    assert_that(len(groups[1]) == 2, "1 and 1.0 are the same key")
    assert_that(len(groups[(1, 2)]) == 2, "equal tuples share a key")


@test("group_by with unhashable keys raises TypeError")
def test_group_by_unhashable():
    assert_raises(TypeError, lambda: Q([1, 2]).group_by(lambda x: [x]))


# --- join ---

@test("join pairs outer and inner rows on equal keys")
def test_join_basic():
    orders = [{'person_id': 2, 'item': 'tea'}, {'person_id': 1, 'item': 'pen'}, {'person_id': 2, 'item': 'cup'}]
    rows = Q(people).join(orders, lambda p: p['id'], lambda o: o['person_id']).to_list()
    pairs = [(r.outer['name'], r.inner['item']) for r in rows]
    assert_that(pairs == [('John', 'pen'), ('Alice', 'tea'), ('Alice', 'cup')], f"unexpected pairs: {pairs}")
    assert_that(all(isinstance(r, JoinRow) for r in rows), "rows should be JoinRow instances")


@test("join drops unmatched outer elements")
def test_join_is_inner():
    rows = Q([1, 2, 3]).join([3, 3, 4], lambda x: x, lambda y: y)
    assert_that(rows.select(lambda r: (r.outer, r.inner)).to_list() == [(3, 3), (3, 3)], "only 3 matches, twice")
    assert_that(Q([1]).join([], lambda x: x, lambda y: y).count() == 0, "empty inner gives no rows")


@test("join rows unpack into outer and inner")
def test_join_row_unpack():
    row = Q(['a']).join(['A'], str.lower, str.lower).first_or_default()
    outer, inner = row
    assert_that((outer, inner) == ('a', 'A'), "unpacking should give (outer, inner)")
    assert_that(repr(row) == "JoinRow(outer='a', inner='A')", f"unexpected repr: {row!r}")


@test("join over generated users and posts matches by user id")
def test_join_generated():
    users = from_schema(users_schema, seed=3).take(5)
    posts = from_schema(posts_schema, seed=4).take(30).to_list()
    rows = users.join(posts, lambda u: u['user_id'], lambda p: p['user_id'])
    expected = sum(1 for p in posts if p['user_id'] <= 5)
    assert_that(rows.count() == expected, f"expected {expected} rows, got {rows.count()}")
    assert_that(rows.all(lambda r: r.outer['user_id'] == r.inner['user_id']), "keys must match on every row")
    outer_ids = rows.select(lambda r: r.outer['user_id']).to_list()
    assert_that(outer_ids == sorted(outer_ids), "rows follow outer order")


if __name__ == "__main__":
    suite.run(title="flinq grouping and join test suite")
