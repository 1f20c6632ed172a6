import pytest

from smartvend.datastore import DataStore, FloatDataStore, IntDataStore


@pytest.mark.parametrize("cls", [FloatDataStore, IntDataStore])
def test_defaults_are_zero(cls):
    ds = cls()
    assert (ds.cf, ds.price, ds.temp_p, ds.cups) == (0, 0, 0, 0)
    assert ds.get_additive(0) == 0
    assert ds.get_additive(1) == 0


def test_abstract_store_cannot_be_instantiated():
    with pytest.raises(TypeError):
        DataStore()


def test_float_store_keeps_fractions():
    ds = FloatDataStore()
    ds.cf = 2.5
    ds.price = 1.25
    ds.temp_p = 0.75
    assert ds.cf == 2.5
    assert ds.price == 1.25
    assert ds.temp_p == 0.75


def test_int_store_truncates_toward_zero():
    ds = IntDataStore()
    ds.cf = 3.7
    ds.price = -2.9
    assert ds.cf == 3
    assert ds.price == -2


def test_int_store_round_trips_whole_values():
    ds = IntDataStore()
    ds.temp_p = 5
    assert ds.temp_p == 5.0
    assert isinstance(ds.temp_p, float)


@pytest.mark.parametrize("cls", [FloatDataStore, IntDataStore])
def test_cups_round_trip(cls):
    ds = cls()
    ds.cups = 4
    ds.cups -= 1
    assert ds.cups == 3


@pytest.mark.parametrize("cls", [FloatDataStore, IntDataStore])
@pytest.mark.parametrize("index", [0, 1])
def test_additive_round_trip(cls, index):
    ds = cls()
    ds.set_additive(index, 1)
    assert ds.get_additive(index) == 1
    assert ds.get_additive(1 - index) == 0


@pytest.mark.parametrize("cls", [FloatDataStore, IntDataStore])
@pytest.mark.parametrize("index", [-1, 2, 10])
def test_additive_out_of_range_is_ignored(cls, index):
    ds = cls()
    ds.set_additive(index, 1)
    assert ds.get_additive(index) == 0
    assert [ds.get_additive(0), ds.get_additive(1)] == [0, 0]


def test_stores_are_independent():
    a = FloatDataStore()
    b = FloatDataStore()
    a.set_additive(0, 1)
    a.cf = 1.5
    assert b.get_additive(0) == 0
    assert b.cf == 0