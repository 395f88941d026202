"""A panel that lists missing GStreamer elements and offers to install them."""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from typing import Iterable

from ndisplays.sink import Signal

_log = logging.getLogger(__name__)

APPLICATION_ID = "org.gnome.NetworkDisplays"

DEFAULT_TITLE = (
    "Please install one of the following GStreamer plugins by clicking below"
)

_DESCRIPTIONS = {
    "openh264enc": "GStreamer OpenH264 video encoder ({})",
    "x264enc": "GStreamer x264 video encoder ({})",
    "vaapih264enc": "GStreamer VA-API H264 video encoder ({})",
    "fdkaacenc": "GStreamer FDK AAC audio encoder ({})",
    "avenc_aac": "GStreamer libav AAC audio encoder ({})",
    "faac": "GStreamer Free AAC audio encoder ({})",
}

_POINTER_BITS = struct.calcsize("P") * 8


def describe_codec(codec: str) -> str:
    """Return a human readable description of the GStreamer element ``codec``."""
    template = _DESCRIPTIONS.get(codec, "GStreamer Element “{}”")
    return template.format(codec)


@dataclass(frozen=True)
class CodecEntry:
    """One missing element together with its description."""

    codec: str
    description: str

    @classmethod
    def for_codec(cls, codec: str) -> CodecEntry:
        """Build the entry for ``codec`` with its standard description."""
        return cls(codec, describe_codec(codec))

    @property
    def resource(self) -> str:
        """Resource string understood by software installers for this element."""
        return (
            f"{self.description}|gstreamer1(element-{self.codec})()"
            f"({_POINTER_BITS}bit)"
        )


class CodecInstall:
    """Holds the list of missing codecs and whether it should be shown.

    Activating an entry emits :attr:`install_requested` with
    ``(codec_install, entry, application_id)``; whoever connects to it
    performs the actual installation.
    """

    def __init__(
        self, codecs: Iterable[str] | None = None, title: str = DEFAULT_TITLE
    ) -> None:
        self.title = title
        self.install_requested = Signal()
        self._codecs: list[str] | None = None
        self._entries: list[CodecEntry] = []
        self.revealed = False
        self.codecs = codecs

    @property
    def codecs(self) -> list[str] | None:
        """The required codecs, or None when none are known."""
        return None if self._codecs is None else list(self._codecs)

    @codecs.setter
    def codecs(self, codecs: Iterable[str] | None) -> None:
        self._codecs = None if codecs is None else list(codecs)
        self._update()

    @property
    def entries(self) -> list[CodecEntry]:
        """The listed entries, in the order of :attr:`codecs`."""
        return list(self._entries)

    def _update(self) -> None:
        if self._codecs is None:
            self._entries = []
            self.revealed = False
            return
        self._entries = [CodecEntry.for_codec(codec) for codec in self._codecs]
        self.revealed = bool(self._entries)

    def activate(self, entry: CodecEntry | str) -> CodecEntry:
        """Request installation of ``entry`` (an entry or a codec name)."""
        codec = entry.codec if isinstance(entry, CodecEntry) else entry
        for candidate in self._entries:
            if candidate.codec == codec:
                _log.debug("CodecInstall: requesting install of %s", codec)
                self.install_requested.emit(self, candidate, APPLICATION_ID)
                return candidate
        raise KeyError(codec)