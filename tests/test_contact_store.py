"""Unit tests for ContactStore: ordering, replace, prefix search, (de)serialization."""

import json

import pytest

from abook.application import ContactStore, MalformedStoreData, load_store
from abook.domain import Contact
from abook.infrastructure import InMemoryStorage


def _contact(name: str, phone: str = "555-0000", email: str = "x@example.com") -> Contact:
    return Contact(name=name, phone=phone, email=email)


def _store(*names: str) -> ContactStore:
    return ContactStore([_contact(n) for n in names])


def test_set_new_returns_none() -> None:
    store = ContactStore()
    assert store.set(_contact("Alice")) is None
    assert len(store) == 1
    assert "Alice" in store


def test_set_existing_replaces_and_returns_old() -> None:
    store = ContactStore()
    old = Contact(name="Alice", phone="1", email="old@x.com")
    new = Contact(name="Alice", phone="2", email="new@x.com")
    store.set(old)

    assert store.set(new) == old
    assert store.all() == [new]
    assert store.get("Alice") == new


def test_get_missing_returns_none() -> None:
    assert _store("Alice").get("Bob") is None


def test_names_are_case_sensitive() -> None:
    store = _store("alice")
    assert store.get("Alice") is None


def test_remove_returns_prior_value() -> None:
    store = _store("Alice", "Bob")
    removed = store.remove("Alice")
    assert removed is not None
    assert removed.name == "Alice"
    assert [c.name for c in store.all()] == ["Bob"]
    assert store.remove("Alice") is None


def test_all_is_in_name_order() -> None:
    store = _store("Carol", "alan", "Bob", "Alice")
    assert [c.name for c in store.all()] == ["Alice", "Bob", "Carol", "alan"]


def test_search_prefix_returns_matches_in_order() -> None:
    store = _store("Alice", "Bob", "Alan")
    assert [c.name for c in store.search_prefix("Al")] == ["Alan", "Alice"]


def test_search_prefix_exact_name_and_longer_prefix() -> None:
    store = _store("Al", "Alan", "Alice", "Bob")
    assert [c.name for c in store.search_prefix("Al")] == ["Al", "Alan", "Alice"]
    assert [c.name for c in store.search_prefix("Ali")] == ["Alice"]
    assert store.search_prefix("Alicia") == []


def test_search_prefix_past_the_end_and_no_match() -> None:
    store = _store("Alice", "Bob")
    assert store.search_prefix("Zed") == []
    assert store.search_prefix("B") == [store.get("Bob")]
    assert store.search_prefix("Ab") == []


def test_search_prefix_matches_filter_of_all() -> None:
    names = ["Ann", "Anna", "Annabel", "Anton", "Bea", "An", "anna", "Ánna", "B", "Zoe"]
    store = _store(*names)
    for prefix in ["", "A", "An", "Ann", "Anna", "Ant", "B", "Be", "a", "Á", "Z", "Zz"]:
        expected = [c for c in store.all() if c.name.startswith(prefix)]
        assert store.search_prefix(prefix) == expected


def test_search_prefix_on_empty_store() -> None:
    assert ContactStore().search_prefix("A") == []


def test_save_to_writes_sorted_records() -> None:
    store = ContactStore()
    store.set(Contact(name="Bob", phone="2", email="b@x.com"))
    store.set(Contact(name="Alice", phone="1", email="a@x.com"))

    records = json.loads(store.save_to())
    assert records == [
        {"name": "Alice", "phone": "1", "email": "a@x.com"},
        {"name": "Bob", "phone": "2", "email": "b@x.com"},
    ]


def test_load_from_resorts_and_later_duplicates_win() -> None:
    data = json.dumps(
        [
            {"name": "Bob", "phone": "2", "email": "b@x.com"},
            {"name": "Alice", "phone": "1", "email": "a@x.com"},
            {"name": "Bob", "phone": "3", "email": "b2@x.com"},
        ]
    ).encode()
    store = ContactStore()
    store.load_from(data)

    assert [c.name for c in store.all()] == ["Alice", "Bob"]
    assert store.get("Bob") == Contact(name="Bob", phone="3", email="b2@x.com")


def test_round_trip_keeps_contacts_and_order() -> None:
    store = ContactStore(
        [
            Contact(name="Jane Doe", phone="555-1234", email="jane@x.com"),
            Contact(name="Ünal", phone="+90 212", email="u@x.com"),
            Contact(name="Al \"Quoted\"", phone="", email=""),
        ]
    )
    copy = ContactStore()
    copy.load_from(store.save_to())
    assert copy.all() == store.all()


def test_load_from_empty_array() -> None:
    store = ContactStore()
    store.load_from(b"[]")
    assert len(store) == 0


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"not json",
        b'{"name": "Alice", "phone": "1", "email": "a@x.com"}',
        b'[{"name": "Alice", "phone": "1"}]',
        b'[{"Name": "Alice", "Phone": "1", "Email": "a@x.com"}]',
        b'[{"name": "Alice", "phone": 5551234, "email": "a@x.com"}]',
        b'[{"name": null, "phone": "1", "email": "a@x.com"}]',
        b'["Alice"]',
        b'[{"name": "\xff\xfe", "phone": "1", "email": "a@x.com"}]',
        b"\x80\x81",
    ],
)
def test_load_from_malformed_raises(data: bytes) -> None:
    store = ContactStore()
    with pytest.raises(MalformedStoreData):
        store.load_from(data)


def test_load_from_malformed_leaves_store_unchanged() -> None:
    store = _store("Alice")
    with pytest.raises(MalformedStoreData):
        store.load_from(b'[{"name": "Bob", "phone": "1", "email": "b@x.com"}, 42]')
    assert [c.name for c in store.all()] == ["Alice"]


def test_load_store_empty_storage() -> None:
    store = load_store(InMemoryStorage())
    assert len(store) == 0


def test_load_store_from_storage() -> None:
    saved = _store("Bob", "Alice").save_to()
    store = load_store(InMemoryStorage(saved))
    assert [c.name for c in store.all()] == ["Alice", "Bob"]
