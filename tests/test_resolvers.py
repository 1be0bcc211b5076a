from dataclasses import dataclass, field, fields

import pytest
from helpers import Expression, Member, NotNullValidator

from validator_options import resolvers
from validator_options.resolvers import (
    DisplayNameCache,
    chain_from_expression,
    default_display_name_resolver,
    default_error_code_resolver,
    default_property_name_resolver,
)


def test_property_name_from_expression_chain():
    expr = Expression(("Address", "City"))
    assert default_property_name_resolver(None, Member("City"), expr) == "Address.City"


def test_property_name_from_string_chain():
    assert default_property_name_resolver(None, None, "Address.City") == "Address.City"


def test_property_name_falls_back_to_member():
    assert default_property_name_resolver(None, Member("Age"), None) == "Age"


def test_property_name_empty_chain_falls_back_to_member():
    assert default_property_name_resolver(None, Member("Age"), Expression(())) == "Age"


def test_property_name_none_when_nothing_given():
    assert default_property_name_resolver(None, None, None) is None


def test_chain_indexers_attach_without_separator():
    expr = Expression(("Orders", "[0]", "Lines", "[2]", "Sku"))
    assert chain_from_expression(expr) == "Orders[0].Lines[2].Sku"


def test_chain_custom_separator():
    assert chain_from_expression(Expression(("A", "B")), separator="/") == "A/B"


def test_chain_rejects_unsupported_expression():
    with pytest.raises(TypeError):
        chain_from_expression(42)


def test_error_code_is_type_name():
    assert default_error_code_resolver(NotNullValidator()) == "NotNullValidator"


def test_display_name_none_without_member():
    assert default_display_name_resolver(None, None, None) is None


def test_display_name_from_attribute():
    assert default_display_name_resolver(None, Member("zip", "Postal code"), None) == "Postal code"


def test_display_name_from_dataclass_field_metadata():
    @dataclass
    class Customer:
        surname: str = field(default="", metadata={"display_name": "Last name"})
        age: int = 0

    surname, age = fields(Customer)
    assert default_display_name_resolver(Customer, surname, None) == "Last name"
    assert default_display_name_resolver(Customer, age, None) is None


def test_display_name_cache_calls_lookup_once():
    calls = []

    def lookup(member):
        calls.append(member)
        return "Shown"

    cache = DisplayNameCache(lookup)
    member = Member("Name")
    assert cache.get(member) == "Shown"
    assert cache.get(member) == "Shown"
    assert calls == [member]
    assert len(cache) == 1


def test_display_name_cache_memoizes_misses():
    calls = []

    def lookup(member):
        calls.append(member)
        return None

    cache = DisplayNameCache(lookup)
    member = Member("Name")
    assert cache.get(member) is None
    assert cache.get(member) is None
    assert len(calls) == 1


def test_display_name_cache_clear_forces_lookup():
    calls = []
    cache = DisplayNameCache(lambda m: calls.append(m) or "x")
    member = Member("Name")
    cache.get(member)
    cache.clear()
    cache.get(member)
    assert len(calls) == 2


def test_default_display_name_resolver_uses_shared_cache(monkeypatch):
    calls = []

    def lookup(member):
        calls.append(member)
        return "Email address"

    monkeypatch.setattr(resolvers, "DISPLAY_NAME_CACHE", DisplayNameCache(lookup))
    member = Member("Email")
    first = default_display_name_resolver(None, member, None)
    second = default_display_name_resolver(None, member, None)
    assert first == second == "Email address"
    assert len(calls) == 1


def test_property_name_with_separator():
    expr = Expression(("Address", "City"))
    assert default_property_name_resolver(None, None, expr, "/") == "Address/City"


@dataclass
class MutableMember:
    name: str
    display_name: str = "Shown"


def test_display_name_for_unhashable_member():
    member = MutableMember("x")
    assert default_display_name_resolver(None, member, None) == "Shown"


def test_display_name_cache_unhashable_member_looked_up_once():
    calls = []

    def lookup(member):
        calls.append(member)
        return member.display_name

    cache = DisplayNameCache(lookup)
    member = MutableMember("Email", "Email address")
    assert cache.get(member) == "Email address"
    assert cache.get(member) == "Email address"
    assert len(calls) == 1
    assert len(cache) == 1


def test_display_name_cache_keeps_equal_unhashable_members_apart():
    cache = DisplayNameCache(lambda m: m.display_name)
    first = MutableMember("a", "First")
    second = MutableMember("a", "Second")
    assert cache.get(first) == "First"
    assert cache.get(second) == "Second"
    cache.clear()
    assert len(cache) == 0
