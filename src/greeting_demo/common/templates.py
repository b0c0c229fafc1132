"""Prompt templating helpers."""
from __future__ import annotations
from pathlib import Path

DEFAULT_PROMPT = """Write five variations of "Hello, World!"

Start each variation on a new line. Do not include additional information.

Here is an example:

Hello, World!
Bonjour, Earth!
Hey, Universe!
Hola, Galaxy!
G'day, World!"""

def load_template(path: str | None = None) -> str:
    """
    Load the greeting prompt.

    Args:
        path: Optional prompt file. The built-in prompt is used when omitted.
    """
    if not path:
        return DEFAULT_PROMPT
    return Path(path).read_text(encoding="utf-8").strip()

def build_messages(prompt: str) -> list[dict[str, str]]:
    """Wrap the prompt as the single user message of a chat request."""
    return [{"role": "user", "content": prompt}]
