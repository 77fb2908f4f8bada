from __future__ import annotations

from tty_editor.keymaps import (
    ActionRef,
    Binding,
    KeymapRegistry,
    KeymapResolver,
    WhenClause,
)
from tty_editor.keymaps.defaults import load_default_keymaps


def make_action(action_id: str) -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    binding_id: str,
    *,
    mode: str = "edit",
    key: str = "CTRL+Q",
    action_id: str = "editor.test",
    when: tuple[WhenClause, ...] = (),
    priority: int = 0,
) -> Binding:
    return Binding(
        id=binding_id,
        mode=mode,
        key=key,
        action_id=action_id,
        when=when,
        priority=priority,
    )


def build_registry(bindings: list[Binding]) -> KeymapRegistry:
    registry = KeymapRegistry()
    action_ids = {binding.action_id for binding in bindings}
    for action_id in action_ids:
        registry.register_action(make_action(action_id))
    for binding in bindings:
        registry.register_binding(binding)
    return registry


def test_resolver_matches_key() -> None:
    binding = make_binding("edit.quit")
    registry = build_registry([binding])
    resolver = KeymapResolver(registry)

    result = resolver.resolve("edit", "CTRL+Q")

    assert result.status == "match"
    assert result.match is not None
    assert result.match.binding.id == binding.id
    assert result.match.action.id == "editor.test"


def test_resolver_misses_other_mode_and_key() -> None:
    registry = build_registry([make_binding("edit.quit")])
    resolver = KeymapResolver(registry)

    assert resolver.resolve("prompt", "CTRL+Q").status == "miss"
    assert resolver.resolve("edit", "CTRL+S").status == "miss"


def test_resolver_honors_when_clauses() -> None:
    clean = make_binding(
        "edit.quit", when=(WhenClause.parse("!dirty"),), action_id="editor.quit"
    )
    dirty = make_binding(
        "edit.quit_dirty", when=(WhenClause("dirty"),), action_id="editor.guarded"
    )
    registry = build_registry([clean, dirty])
    resolver = KeymapResolver(registry)

    result = resolver.resolve("edit", "CTRL+Q", context={})
    assert result.match is not None
    assert result.match.binding.id == "edit.quit"

    result = resolver.resolve("edit", "CTRL+Q", context={"dirty": True})
    assert result.match is not None
    assert result.match.binding.id == "edit.quit_dirty"


def test_resolver_sees_bindings_registered_later() -> None:
    registry = build_registry([])
    resolver = KeymapResolver(registry)

    miss = resolver.resolve("edit", "x")
    assert miss.status == "miss"

    new_binding = make_binding("edit.x", key="x", action_id="edit.x")
    registry.register_action(make_action("edit.x"))
    registry.register_binding(new_binding)

    match = resolver.resolve("edit", "x")
    assert match.status == "match"
    assert match.match is not None
    assert match.match.binding.id == new_binding.id


def test_default_save_binding_depends_on_filename() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    resolver = KeymapResolver(registry)

    named = resolver.resolve("edit", "CTRL+S", context={"has_filename": True})
    unnamed = resolver.resolve("edit", "CTRL+S", context={"has_filename": False})

    assert named.match is not None and named.match.action.id == "file.save"
    assert unnamed.match is not None and unnamed.match.action.id == "file.save_as"
