"""Resolve key strokes to editing actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from draftkit.runtime.telemetry import span

from .models import ActionRef, Binding, KeyStroke, modifier_flags
from .registry import KeymapRegistry


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    status: Literal["match", "miss"]
    match: Optional[ResolutionMatch] = None


class KeymapResolver:
    """Picks the highest-priority binding whose conditions hold."""

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name

    def resolve(self, stroke: KeyStroke) -> ResolutionResult:
        flags = modifier_flags(stroke.modifiers)
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"token": stroke.token},
        ) as handle:
            candidates = [
                binding
                for binding in self._registry.iter_bindings(stroke.key)
                if binding.allows(flags)
            ]
            if not candidates:
                handle.add_metadata("status", "miss")
                return ResolutionResult(status="miss")

            candidates.sort(key=lambda b: (-b.priority, b.id))
            binding = candidates[0]
            handle.add_metadata("status", "match")
            handle.add_metadata("binding_id", binding.id)
            action = self._registry.get_action(binding.action_id)
            return ResolutionResult(
                status="match", match=ResolutionMatch(binding=binding, action=action)
            )


__all__ = ["KeymapResolver", "ResolutionMatch", "ResolutionResult"]
