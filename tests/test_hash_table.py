import pytest

from aedstructs.hash_table import INITIAL_CAPACITY, HashTable


def test_new_table_is_empty():
    table = HashTable(seed=1)
    assert len(table) == 0
    assert table.capacity() == INITIAL_CAPACITY
    assert table.load_factor() == 0.0


def test_set_and_get_round_trip():
    table = HashTable(seed=2)
    table[10] = "ten"
    table[20] = "twenty"
    assert table[10] == "ten"
    assert table[20] == "twenty"
    assert len(table) == 2


def test_overwrite_keeps_count():
    table = HashTable(seed=3)
    table["k"] = 1
    table["k"] = 2
    assert table["k"] == 2
    assert len(table) == 1


def test_missing_key_without_factory_raises():
    table = HashTable(seed=4)
    with pytest.raises(KeyError):
        table[99]
    assert 99 not in table


def test_default_factory_inserts_missing_key():
    table = HashTable(int, seed=5)
    assert table["word"] == int()
    assert "word" in table
    assert len(table) == 1


def test_counting_with_default_factory():
    table = HashTable(int, seed=6)
    words = "a b a c b a".split()
    for word in words:
        table[word] += 1
    assert {key: table[key] for key in table} == {w: words.count(w) for w in set(words)}


def test_grows_past_load_limit_and_keeps_entries():
    table = HashTable(seed=7)
    keys = range(500)
    for key in keys:
        table[key] = key * 3
    assert table.capacity() > INITIAL_CAPACITY
    assert table.load_factor() <= 0.75 + 1 / table.capacity()
    assert all(table[key] == key * 3 for key in keys)
    assert set(table) == set(keys)


def test_capacity_doubles_on_first_rehash():
    table = HashTable(seed=8)
    for key in range(int(INITIAL_CAPACITY * 0.75) + 2):
        table[key] = key
    assert table.capacity() == 2 * INITIAL_CAPACITY


def test_string_and_negative_int_keys():
    table = HashTable(seed=9)
    table["hello"] = 1
    table[-5] = 2
    assert table["hello"] == 1
    assert table[-5] == 2
    assert "hell" not in table


def test_clear_empties_table():
    table = HashTable(seed=10)
    for key in range(20):
        table[key] = key
    table.clear()
    assert len(table) == 0
    assert list(table) == []
    assert 3 not in table


def test_same_seed_gives_same_iteration_order():
    first = HashTable(seed=42)
    second = HashTable(seed=42)
    for key in ["x", "y", "z", 1, 2, 3]:
        first[key] = key
        second[key] = key
    assert list(first) == list(second)