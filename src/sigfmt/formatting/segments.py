"""Incremental builder for space-separated signature segments."""

from __future__ import annotations

from typing import List, Optional

__all__ = ["SignatureBuilder"]


class SignatureBuilder:
    """Accumulate signature text, inserting single spaces between segments."""

    def __init__(self) -> None:
        self._parts: List[str] = []
        self._length = 0

    def __bool__(self) -> bool:
        return self._length > 0

    def __len__(self) -> int:
        return self._length

    def segment(self, text: Optional[str]) -> "SignatureBuilder":
        """Append ``text`` as a new segment; empty or missing text is skipped."""
        if text:
            if self._length:
                self.attach(" ")
            self.attach(text)
        return self

    def attach(self, text: str) -> "SignatureBuilder":
        """Append ``text`` directly to the previous segment."""
        if text:
            self._parts.append(text)
            self._length += len(text)
        return self

    def build(self) -> str:
        return "".join(self._parts)
