import pytest

from moneyvalue.domain.account import Account
from moneyvalue.domain.currency import Currency
from moneyvalue.domain.money import Money
from moneyvalue.repositories.in_memory_account_repository import InMemoryAccountRepository


def jpy(s: str) -> Money:
    return Money.of(s, Currency.JPY)


def test_add_and_get():
    repo = InMemoryAccountRepository()
    acc = Account(id="a", name="Cash", balance=jpy("1000"))
    repo.add(acc)
    assert repo.get_account(" a ") == acc


def test_add_duplicate_id_raises():
    repo = InMemoryAccountRepository()
    repo.add(Account(id="a", name="Cash", balance=jpy("1000")))
    with pytest.raises(ValueError):
        repo.add(Account(id="a", name="Other", balance=jpy("1")))


def test_get_unknown_raises_key_error():
    with pytest.raises(KeyError):
        InMemoryAccountRepository().get_account("a")


def test_list_sorted_by_id():
    repo = InMemoryAccountRepository()
    repo.add(Account(id="b", name="B", balance=jpy("1")))
    repo.add(Account(id="a", name="A", balance=jpy("2")))
    assert [a.id for a in repo.list_accounts()] == ["a", "b"]


def test_update_balance():
    repo = InMemoryAccountRepository()
    repo.add(Account(id="a", name="Cash", balance=jpy("10")))
    shares = repo.get_account("a").balance.divide_evenly_into_parts(3)

    updated = repo.update_balance(account_id="a", balance=shares[1])

    assert updated.balance == jpy("4")
    assert repo.get_account("a").balance == jpy("4")


def test_delete():
    repo = InMemoryAccountRepository()
    repo.add(Account(id="a", name="Cash", balance=jpy("10")))
    assert repo.delete(account_id="a") is True
    assert repo.delete(account_id="a") is False
