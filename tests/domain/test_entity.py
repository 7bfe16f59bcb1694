"""Unit tests for the Entity base class."""

from datetime import date

import pytest

from keyrepo.domain.model.healthcare import Patient
from keyrepo.domain.model.warehouse import ElectronicItem, GroceryItem


class TestEntityKey:

    def test_key_cannot_be_reassigned(self):
        item = ElectronicItem(id=1, name="Mouse", quantity=3, brand="Logitech", warranty_months=24)
        with pytest.raises(AttributeError, match="cannot be changed"):
            item.id = 2
        assert item.id == 1

    def test_other_fields_are_mutable(self):
        item = ElectronicItem(id=1, name="Mouse", quantity=3, brand="Logitech", warranty_months=24)
        item.quantity = 9
        assert item.quantity == 9


class TestEntityEquality:

    def test_equal_when_same_type_and_key(self):
        a = Patient(id=1, name="Alice", age=29, gender="Female")
        b = Patient(id=1, name="Someone else", age=50, gender="Male")
        assert a == b
        assert hash(a) == hash(b)

    def test_different_keys_not_equal(self):
        a = Patient(id=1, name="Alice", age=29, gender="Female")
        b = Patient(id=2, name="Alice", age=29, gender="Female")
        assert a != b

    def test_different_types_not_equal(self):
        electronic = ElectronicItem(id=5, name="Cable", quantity=1, brand="Anker", warranty_months=6)
        grocery = GroceryItem(id=5, name="Cable", quantity=1, expiry_date=date(2030, 1, 1))
        assert electronic != grocery
