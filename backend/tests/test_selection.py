from backend.core.selection import Selection


def _visible(*ids: str) -> Selection:
    return Selection().with_visible(ids)


def test_state_is_derived_from_membership() -> None:
    selection = _visible("a", "b", "c")
    assert selection.state == "none"

    selection = selection.toggle("a")
    assert selection.state == "partial"

    selection = selection.select_all()
    assert selection.state == "all"
    assert selection.selected == {"a", "b", "c"}

    assert selection.select_none().state == "none"


def test_toggle_flips_or_forces_membership() -> None:
    selection = _visible("a", "b")

    selection = selection.toggle("a")
    assert selection.is_selected("a")
    selection = selection.toggle("a")
    assert not selection.is_selected("a")
    selection = selection.toggle("b", checked=True).toggle("b", checked=True)
    assert selection.selected == {"b"}
    assert selection.toggle("b", checked=False).selected == frozenset()


def test_transitions_do_not_mutate_the_original() -> None:
    original = _visible("a")
    original.toggle("a")
    assert original.selected == frozenset()


def test_changing_the_view_keeps_hidden_selections() -> None:
    selection = _visible("a", "b", "c").select_all()

    narrowed = selection.with_visible(["b"])

    assert narrowed.selected == {"a", "b", "c"}
    assert narrowed.state == "all"
    assert narrowed.prune().selected == {"b"}


def test_select_all_with_empty_view_selects_nothing() -> None:
    selection = _visible().select_all()
    assert selection.state == "none"


def test_discard_drops_only_the_given_id() -> None:
    selection = _visible("a", "b", "c").select_all().discard("b")

    assert selection.selected == {"a", "c"}
    assert selection.visible_ids == ("a", "c")
    assert selection.state == "all"


def test_ordered_follows_given_order() -> None:
    selection = _visible("a", "b", "c").toggle("c").toggle("a")
    assert selection.ordered(["a", "b", "c"]) == ["a", "c"]
