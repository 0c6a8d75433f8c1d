import pytest
from pydantic import ValidationError

from customer_registry.models import Customer, seed_customers


def test_parses_capitalised_wire_keys():
    customer = Customer.model_validate(
        {"ID": 4, "Name": "A", "Role": "B", "Email": "a@b.com", "Phone": "1", "Contacted": True}
    )
    assert customer.customer_id == 4
    assert customer.name == "A"
    assert customer.contacted is True


def test_keys_match_case_insensitively():
    customer = Customer.model_validate({"id": 7, "NAME": "Lower", "email": "x@y.z"})
    assert customer.customer_id == 7
    assert customer.name == "Lower"
    assert customer.email == "x@y.z"


def test_missing_and_null_fields_take_zero_values():
    customer = Customer.model_validate({"Name": None, "Role": "Prospect"})
    assert customer.customer_id == 0
    assert customer.name == ""
    assert customer.contacted is False
    assert customer.missing_fields() == ["name", "email", "phone"]


def test_unknown_keys_are_ignored():
    customer = Customer.model_validate({"ID": 9, "Nickname": "ignored"})
    assert customer.customer_id == 9
    assert "Nickname" not in customer.model_dump(by_alias=True)


def test_attribute_names_are_not_wire_keys():
    customer = Customer.model_validate({"customer_id": 6, "Name": "x"})
    assert customer.customer_id == 0
    assert customer.name == "x"


def test_decodes_raw_json():
    customer = Customer.model_validate_json(b'{"id": 5, "name": "Raw", "Phone": null}')
    assert customer.customer_id == 5
    assert customer.name == "Raw"
    assert customer.phone == ""


@pytest.mark.parametrize("payload", [
    {"ID": 256},
    {"ID": -1},
    {"ID": "4"},
    {"ID": 4.5},
    {"ID": 1, "Name": 5},
    {"ID": 1, "Contacted": "yes"},
])
def test_rejects_bad_values(payload):
    with pytest.raises(ValidationError):
        Customer.model_validate(payload)


def test_dumps_with_wire_keys():
    dumped = seed_customers()[0].model_dump(by_alias=True)
    assert dumped == {
        "ID": 1,
        "Name": "John Doe",
        "Role": "Subscriber",
        "Email": "john.doe@gmail.com",
        "Phone": "123-456-7890",
        "Contacted": True,
    }


def test_seed_records_have_distinct_ids():
    assert [c.customer_id for c in seed_customers()] == [1, 2, 3]
