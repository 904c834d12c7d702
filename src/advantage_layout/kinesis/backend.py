from __future__ import annotations

from typing import List

from advantage_layout.model.configure import Layout

DEAD_KEY_TOKEN = "null"


class KinesisBackend:
    """Render a `Layout` into the keyboard importer's line-oriented text format."""

    def render(self, layout: Layout) -> str:
        lines: List[str] = []

        for source in sorted(layout.remappings, key=lambda k: k.sort_key()):
            target = layout.remappings[source]
            target_token = DEAD_KEY_TOKEN if target is None else target.token()
            lines.append(f"[{source.token()}]>[{target_token}]")

        for trigger in sorted(layout.macros, key=lambda s: s.sort_key()):
            lines.append(f"{trigger.token()}>{layout.macros[trigger].render()}")

        return "\n".join(lines).lower()


def serialize(layout: Layout) -> str:
    return KinesisBackend().render(layout)
