import pytest

from selectmenu import ChoiceItem, NavigationAction
from selectmenu.errors import DuplicateChoiceValue, InvalidControlId, InvalidPage, InvalidPageSize
from selectmenu.helpers import (
    check_control_id,
    check_page,
    check_page_size,
    check_unique_values,
    classify_event,
    interaction_check,
    next_id,
    nothing_id,
    prev_id,
)
from tests.mocks import DEFAULT_USER_ID, MESSAGE_ID, OTHER_USER_ID, make_interaction, make_message


def test_navigation_ids():
    assert prev_id("cards") == "cards--prev"
    assert next_id("cards") == "cards--next"
    assert nothing_id("cards") == "cards--nothing"


class TestClassifyEvent:
    def test_selection(self):
        event = classify_event(make_interaction("cards", values=["item-27"]), "cards")
        assert event.action is NavigationAction.SELECTED
        assert event.value == "item-27"
        assert event.custom_id == "cards"

    @pytest.mark.parametrize(
        "custom_id, action",
        [
            ("cards--prev", NavigationAction.PREV),
            ("cards--next", NavigationAction.NEXT),
            ("cards--nothing", NavigationAction.NOOP),
        ],
    )
    def test_navigation(self, custom_id, action):
        event = classify_event(make_interaction(custom_id), "cards")
        assert event.action is action
        assert event.value is None

    @pytest.mark.parametrize("custom_id", ["other", "other--next", "cards--last", "cards-", "Cards", ""])
    def test_unrecognized(self, custom_id):
        event = classify_event(make_interaction(custom_id), "cards")
        assert event.action is NavigationAction.UNRECOGNIZED

    def test_selection_without_values(self):
        event = classify_event(make_interaction("cards", values=[]), "cards")
        assert event.action is NavigationAction.UNRECOGNIZED

    def test_missing_custom_id(self):
        interaction = make_interaction(None)
        assert classify_event(interaction, "cards").action is NavigationAction.UNRECOGNIZED

    def test_another_menus_navigation(self):
        # two menus on one surface must not pick up each other's buttons
        assert classify_event(make_interaction("deck--next"), "cards").action is NavigationAction.UNRECOGNIZED


class TestInteractionCheck:
    def test_same_message(self):
        check = interaction_check(MESSAGE_ID)
        assert check(make_interaction("cards--next"))

    def test_other_message(self):
        check = interaction_check(MESSAGE_ID)
        assert not check(make_interaction("cards--next", message=make_message(42)))

    def test_no_message(self):
        interaction = make_interaction("cards--next")
        interaction.message = None
        assert not interaction_check(MESSAGE_ID)(interaction)

    def test_any_user(self):
        check = interaction_check(MESSAGE_ID)
        assert check(make_interaction("cards--next", author_id=DEFAULT_USER_ID))
        assert check(make_interaction("cards--next", author_id=OTHER_USER_ID))


class TestPreconditions:
    @pytest.mark.parametrize("page_size", [1, 10, 25])
    def test_page_size_ok(self, page_size):
        check_page_size(page_size)

    @pytest.mark.parametrize("page_size", [0, -1, 26, 2.5, "25"])
    def test_page_size_bad(self, page_size):
        with pytest.raises(InvalidPageSize):
            check_page_size(page_size)

    def test_page(self):
        check_page(0, 1)
        check_page(1, 2)
        for page in (-1, 2, 5):
            with pytest.raises(InvalidPage):
                check_page(page, 2)

    def test_control_id(self):
        check_control_id("cards")
        check_control_id("x" * 91)  # 91 + len("--nothing") == 100
        for control_id in ("", None, 123, "x" * 92):
            with pytest.raises(InvalidControlId):
                check_control_id(control_id)

    def test_unique_values(self):
        check_unique_values([ChoiceItem("A", "a"), ChoiceItem("B", "b")])
        with pytest.raises(DuplicateChoiceValue) as e:
            check_unique_values([ChoiceItem("A", "a"), ChoiceItem("B", "b"), ChoiceItem("Also A", "a")])
        assert e.value.value == "a"
