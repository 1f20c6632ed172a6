import pytest

from smartvend.datastore import FloatDataStore, IntDataStore
from smartvend.factory import AbstractFactory, VM1Factory, VM2Factory


def test_abstract_factory_cannot_be_instantiated():
    with pytest.raises(TypeError):
        AbstractFactory()


@pytest.mark.parametrize(
    "factory_cls, store_cls", [(VM1Factory, FloatDataStore), (VM2Factory, IntDataStore)]
)
def test_factory_shares_one_store(factory_cls, store_cls):
    factory = factory_cls()
    ds = factory.create_data_store()
    assert isinstance(ds, store_cls)
    assert factory.create_data_store() is ds


@pytest.mark.parametrize(
    "factory_cls, stored, message",
    [
        (VM1Factory, 4.5, "[StorePrice1] Stored price: 4.5 units into DataStore."),
        (VM2Factory, 4.0, "[StorePrice2] Stored price: 4 units into DataStore."),
    ],
)
def test_store_price_uses_shared_store(capsys, factory_cls, stored, message):
    factory = factory_cls()
    factory.create_data_store().temp_p = 4.5
    factory.create_output_processor().store_price()
    assert factory.create_data_store().price == stored
    assert message in capsys.readouterr().out


@pytest.mark.parametrize(
    "factory_cls, price, stored, message",
    [
        (VM1Factory, 1.5, 1.5, "[SetPrice1] Price set to: 1.5 units."),
        (VM2Factory, 5, 0.0, "[SetPrice2] Price set to: 5 units (VM2)."),
    ],
)
def test_set_price(capsys, factory_cls, price, stored, message):
    factory = factory_cls()
    factory.create_output_processor().set_price(price)
    assert factory.create_data_store().price == stored
    assert message in capsys.readouterr().out


def test_vm2_return_coins_reads_shared_store():
    factory = VM2Factory()
    factory.create_data_store().cf = 2
    assert (
        factory.create_return_coins().return_coins()
        == "[ReturnCoins2] Returning 2 units as refund to user."
    )


def test_vm1_dispose_additives_sees_sugar():
    factory = VM1Factory()
    factory.create_data_store().set_additive(0, 1)
    assert (
        factory.create_dispose_additives().dispose_additives()
        == "[DisposeAdditives1] Dispensing sugar..."
    )


def test_vm1_create_message(capsys):
    VM1Factory().create_output_processor().create()
    assert "[CreateMsg1] Vending Machine Created Successfully!" in capsys.readouterr().out


def test_vm2_dispose_drink():
    assert VM2Factory().create_dispose_drink().dispose_drink() == "[DisposeDrink2] Dispensing drink..."


def test_coin_payment_adds_to_funds():
    factory = VM1Factory()
    ds = factory.create_data_store()
    assert factory.create_coin_payment().pay(ds, 1.5) is True
    assert ds.cf == 1.5


def test_card_payment_refuses_below_price():
    factory = VM1Factory()
    ds = factory.create_data_store()
    ds.price = 2
    assert factory.create_card_payment().pay(ds, 1) is False
    assert ds.cf == 0.0