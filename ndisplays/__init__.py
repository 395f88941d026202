"""Network display sinks, providers, de-duplication, sink lists and codec hints."""

__version__ = "0.1.0"
__all__ = [
    "codec_install",
    "meta_provider",
    "meta_sink",
    "provider",
    "sink",
    "sink_list",
    "sink_row",
]