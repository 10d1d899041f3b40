import pytest
from sqlalchemy.exc import OperationalError

from storefront.domain.errors import InsufficientInventory
from storefront.utils.retry import db_retry


def locked():
    return OperationalError("UPDATE products", {}, Exception("database is locked"))


def test_retries_operational_errors():
    calls = []

    @db_retry(attempts=3)
    def flaky():
        calls.append(1)
        if len(calls) < 3:
            raise locked()
        return "ok"

    assert flaky() == "ok"
    assert len(calls) == 3


def test_gives_up_after_attempts():
    calls = []

    @db_retry(attempts=2)
    def always_locked():
        calls.append(1)
        raise locked()

    with pytest.raises(OperationalError):
        always_locked()
    assert len(calls) == 2


def test_domain_errors_are_not_retried():
    calls = []

    @db_retry(attempts=5)
    def oversell():
        calls.append(1)
        raise InsufficientInventory("pid1001", 3)

    with pytest.raises(InsufficientInventory):
        oversell()
    assert len(calls) == 1
