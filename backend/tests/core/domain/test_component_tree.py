import pytest

from core.domain.component_tree import ComponentTree
from core.exceptions.component_not_found_error import ComponentNotFoundError
from core.exceptions.sub_component_not_found_error import SubComponentNotFoundError
from tests.support.fakes import build_component_tree


@pytest.fixture
def tree() -> ComponentTree:
    return build_component_tree()


def test_get_sub_component_matches_exact_name(tree: ComponentTree) -> None:
    prow = tree.get_component("Prow")

    deck = prow.get_sub_component("Deck")

    assert deck is not None
    assert deck.description == "Dashboard"


def test_get_sub_component_is_case_sensitive(tree: ComponentTree) -> None:
    assert tree.get_component("Prow").get_sub_component("tide") is None


def test_get_component_raises_for_unknown_name(tree: ComponentTree) -> None:
    with pytest.raises(ComponentNotFoundError):
        tree.get_component("Nope")


def test_resolve_sub_component_rejects_sub_component_of_another_component(tree: ComponentTree) -> None:
    with pytest.raises(SubComponentNotFoundError):
        tree.resolve_sub_component("Prow", "build01")


def test_resolve_sub_component_reports_unknown_component_first(tree: ComponentTree) -> None:
    with pytest.raises(ComponentNotFoundError):
        tree.resolve_sub_component("Nope", "Tide")


def test_sub_component_names_keep_config_order(tree: ComponentTree) -> None:
    assert tree.get_component("Prow").sub_component_names() == ["Tide", "Deck"]
    assert tree.get_component("Empty").sub_component_names() == []
    assert tree.all_sub_component_names() == ["Tide", "Deck", "build01"]
