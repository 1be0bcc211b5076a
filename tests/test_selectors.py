import pytest

from validator_options.selectors import (
    DefaultValidatorSelector,
    MemberNameValidatorSelector,
    RulesetValidatorSelector,
    ValidatorSelectorOptions,
)


@pytest.fixture
def options():
    return ValidatorSelectorOptions()


def test_builtin_factories(options):
    assert options.default_validator_selector_factory() == DefaultValidatorSelector()
    assert options.member_name_validator_selector_factory(["Name"]) == MemberNameValidatorSelector(
        ("Name",)
    )
    assert options.ruleset_validator_selector_factory(["Admin"]) == RulesetValidatorSelector(
        ("Admin",)
    )


def test_member_name_factory_reset_matches_builtin(options):
    builtin = options.member_name_validator_selector_factory
    options.member_name_validator_selector_factory = lambda names: "custom"
    assert options.member_name_validator_selector_factory(["Name"]) == "custom"

    options.member_name_validator_selector_factory = None
    restored = options.member_name_validator_selector_factory(["Name", "Email"])
    assert restored == builtin(["Name", "Email"])
    assert restored.member_names == ("Name", "Email")


def test_default_factory_reset(options):
    options.default_validator_selector_factory = lambda: "custom"
    options.default_validator_selector_factory = None
    assert isinstance(options.default_validator_selector_factory(), DefaultValidatorSelector)


def test_ruleset_factory_reset(options):
    options.ruleset_validator_selector_factory = lambda names: "custom"
    options.ruleset_validator_selector_factory = None
    assert options.ruleset_validator_selector_factory(("a", "b")).rule_sets == ("a", "b")


def test_empty_sequence_passed_through(options):
    assert options.member_name_validator_selector_factory([]).member_names == ()
    assert options.ruleset_validator_selector_factory([]).rule_sets == ()


def test_custom_factory_receives_names(options):
    received = []

    def factory(names):
        received.append(list(names))
        return DefaultValidatorSelector()

    options.ruleset_validator_selector_factory = factory
    options.ruleset_validator_selector_factory(["Create", "Update"])
    assert received == [["Create", "Update"]]


def test_reset_restores_all(options):
    options.default_validator_selector_factory = lambda: 1
    options.member_name_validator_selector_factory = lambda n: 2
    options.ruleset_validator_selector_factory = lambda n: 3
    options.reset()
    assert options.default_validator_selector_factory() == DefaultValidatorSelector()
    assert options.member_name_validator_selector_factory(["x"]) == MemberNameValidatorSelector(
        ("x",)
    )
    assert options.ruleset_validator_selector_factory(["y"]) == RulesetValidatorSelector(("y",))


def test_selectors_are_immutable():
    selector = MemberNameValidatorSelector(("Name",))
    with pytest.raises(AttributeError):
        selector.member_names = ("Other",)  # type: ignore[misc]


def test_list_input_is_stored_as_tuple():
    assert MemberNameValidatorSelector(["a"]).member_names == ("a",)  # type: ignore[arg-type]
