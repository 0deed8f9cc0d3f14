"""Executable Textual app that hosts the block engine in a ``TextArea``."""

from __future__ import annotations

import argparse
import json
import os
from pathlib import Path
from typing import Any, Optional, Sequence

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Static, TextArea

from blockier_engine.actions import EngineContext
from blockier_engine.config import BlockierSettings

from .controller import TextualBlockierAdapter, TextualUIHooks
from .host import TextAreaHost

SAMPLE_TEXT = """# Blockier

1. item one
2. item two
- [ ] task

```python
print("hello")
```
"""


class BlockierTextArea(TextArea):
    """``TextArea`` that lets the engine see keys before they are inserted."""

    adapter: Optional[TextualBlockierAdapter] = None

    async def _on_key(self, event: events.Key) -> None:
        if self.adapter is not None and event.key == "space":
            self.adapter.handle_key(event.key, character=event.character)
        await super()._on_key(event)
        if self.adapter is not None:
            self.adapter.after_edit()


class BlockierApp(App[None]):
    """Minimal editor demonstrating block selection and prefix overrides."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor {
		height: 1fr;
	}

	#suggestions {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        Binding("ctrl+a", "select_block", "Select block", priority=True),
        Binding("ctrl+y", "accept_suggestion", "Accept suggestion", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self, *, text: str = SAMPLE_TEXT, settings: Optional[BlockierSettings] = None
    ) -> None:
        super().__init__()
        self._text = text
        self._settings = settings or BlockierSettings()
        self._candidates: list[str] = []
        self.adapter: TextualBlockierAdapter | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield BlockierTextArea(self._text, id="editor")
        yield Static("", id="suggestions")
        yield Static("", id="status-line")
        yield Footer()

    def on_mount(self) -> None:
        area = self.query_one("#editor", BlockierTextArea)
        context = EngineContext(host=TextAreaHost(area), settings=self._settings)
        hooks = TextualUIHooks(
            update_status=self._update_status,
            show_suggestions=self._show_suggestions,
            handle_event=self._handle_event,
            log=self._log_line,
        )
        self.adapter = TextualBlockierAdapter(context, hooks)
        area.adapter = self.adapter
        area.focus()

    def action_select_block(self) -> None:
        if self.adapter:
            self.adapter.handle_key("ctrl+a")

    def action_accept_suggestion(self) -> None:
        if self.adapter and self._candidates:
            self.adapter.accept(self._candidates[0])

    def _update_status(self, status: str) -> None:
        self.query_one("#status-line", Static).update(status)

    def _show_suggestions(self, candidates: list[str]) -> None:
        self._candidates = list(candidates)
        self.query_one("#suggestions", Static).update(" ".join(self._candidates))

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "select.block" and isinstance(payload, dict):
            self._update_status(f"{name}:{payload.get('status')}")

    def _log_line(self, line: str) -> None:
        self.log(line)


def _load_settings(path: Optional[str]) -> BlockierSettings:
    if not path:
        return BlockierSettings()
    with open(path, encoding="utf-8") as handle:
        return BlockierSettings.from_mapping(json.load(handle))


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the block engine Textual demo.")
    parser.add_argument("path", nargs="?", help="Markdown file to open")
    parser.add_argument(
        "--settings",
        default=os.environ.get("BLOCKIER_SETTINGS"),
        help="JSON file with engine settings (camelCase or snake_case keys)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    text = Path(args.path).read_text(encoding="utf-8") if args.path else SAMPLE_TEXT
    app = BlockierApp(text=text, settings=_load_settings(args.settings))
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
