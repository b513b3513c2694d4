from registry.models.schemas import User
from registry.services.user_store import UserStore


def test_add_if_absent_keeps_insertion_order() -> None:
    store = UserStore()
    assert store.add_if_absent(User(first_name="Ada", last_name="Lovelace"))
    assert store.add_if_absent(User(first_name="Alan", last_name="Turing"))
    assert not store.add_if_absent(User(first_name="Ada", last_name="Lovelace"))

    assert len(store) == 2
    assert [u.key for u in store.snapshot()] == [("Ada", "Lovelace"), ("Alan", "Turing")]


def test_pair_match_is_exact() -> None:
    store = UserStore()
    assert store.add_if_absent(User(first_name="Ada", last_name="Lovelace"))
    assert store.add_if_absent(User(first_name="ada", last_name="Lovelace"))
    assert store.add_if_absent(User(first_name="Ada", last_name="Lovelace "))
    assert len(store) == 3
