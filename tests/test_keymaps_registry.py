import pytest

from draftkit.keymaps import (
    ActionRef,
    Binding,
    KeymapConflictError,
    KeymapRegistry,
    KeyStroke,
    WhenClause,
    load_default_keymaps,
)


def make_action(action_id: str = "edit.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
    key: str = "tab",
    action_id: str = "edit.test",
    when: tuple[WhenClause, ...] = (),
) -> Binding:
    return Binding(id=binding_id, key=key, action_id=action_id, when=when)


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="tab.test")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings("tab")) == [binding]


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="tab.one"))

    with pytest.raises(KeymapConflictError):
        registry.register_binding(make_binding(binding_id="tab.two"))


def test_opposite_conditions_do_not_conflict() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(
        make_binding(binding_id="enter.plain", key="enter", when=(WhenClause.parse("!shift"),))
    )

    registry.register_binding(
        make_binding(binding_id="enter.shift", key="enter", when=(WhenClause.parse("shift"),))
    )

    assert registry.stats().binding_count == 2


def test_replace_drops_conflicting_binding() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="tab.one"))

    registry.register_binding(make_binding(binding_id="tab.two"), replace=True)

    assert [b.id for b in registry.iter_bindings("tab")] == ["tab.two"]


def test_binding_requires_known_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="tab.orphan"))


def test_unregister_binding_bumps_revision() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="tab.one"))
    before = registry.revision()

    removed = registry.unregister_binding("tab.one")

    assert removed is not None
    assert registry.revision() == before + 1
    assert registry.stats().keys == ()
    assert registry.unregister_binding("tab.one") is None


def test_default_keymaps_cover_tab_and_enter() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    assert registry.stats().keys == ("enter", "tab")
    assert registry.get_action("edit.indent").description
    assert dict(registry.get_binding("enter.line_break").when_map) == {"shift": False}


def test_duplicate_action_rejected() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    with pytest.raises(ValueError):
        registry.register_action(make_action())


def test_keystroke_parse_normalizes_host_tokens() -> None:
    stroke = KeyStroke.parse("Shift+Ctrl+Enter")

    assert stroke.key == "enter"
    assert stroke.modifiers == ("ctrl", "shift")
    assert stroke.token == "ctrl+shift+enter"
