"""Capability flags shared by models, tools and requests."""

from enum import Flag


class Capability(Flag):
    """
    What a provider/model combination can do, or what a tool or request needs.

    Flags combine with ``|``. A model satisfies a requirement when every
    required flag is present:

        (model_caps & required) == required
    """

    NONE = 0

    # Input capabilities
    TEXT_INPUT = 1 << 0
    IMAGE_INPUT = 1 << 1
    AUDIO_INPUT = 1 << 2
    JSON_INPUT = 1 << 3

    # Output capabilities
    TEXT_OUTPUT = 1 << 4
    IMAGE_OUTPUT = 1 << 5
    AUDIO_OUTPUT = 1 << 6
    JSON_OUTPUT = 1 << 7

    # Advanced capabilities
    FUNCTION_CALLING = 1 << 8
    REASONING = 1 << 9

    # Composites
    TEXT2TEXT = TEXT_INPUT | TEXT_OUTPUT
    TOOL_CHAT = TEXT_INPUT | TEXT_OUTPUT | FUNCTION_CALLING
    REASONING_CHAT = TEXT_INPUT | TEXT_OUTPUT | REASONING
    TOOL_REASONING_CHAT = TEXT_INPUT | TEXT_OUTPUT | REASONING | FUNCTION_CALLING
    TEXT2JSON = TEXT_INPUT | JSON_OUTPUT
    TEXT2IMAGE = TEXT_INPUT | IMAGE_OUTPUT
    TEXT2SPEECH = TEXT_INPUT | AUDIO_OUTPUT
    SPEECH2TEXT = AUDIO_INPUT | TEXT_OUTPUT
    IMAGE2TEXT = IMAGE_INPUT | TEXT_OUTPUT


_SINGLE_FLAGS = (
    Capability.TEXT_INPUT,
    Capability.TEXT_OUTPUT,
    Capability.IMAGE_INPUT,
    Capability.IMAGE_OUTPUT,
    Capability.AUDIO_INPUT,
    Capability.AUDIO_OUTPUT,
    Capability.JSON_INPUT,
    Capability.JSON_OUTPUT,
    Capability.FUNCTION_CALLING,
    Capability.REASONING,
)


def has_capabilities(available: Capability, required: Capability) -> bool:
    """Check that every flag in ``required`` is present in ``available``."""
    return (available & required) == required


def describe_capability(capability: Capability) -> str:
    """
    Render capability flags as a readable list of individual flags.

    Example:
        describe_capability(Capability.TOOL_CHAT)
        # -> "TEXT_INPUT, TEXT_OUTPUT, FUNCTION_CALLING"
    """
    if not capability:
        return "NONE"
    names = [flag.name for flag in _SINGLE_FLAGS if flag in capability]
    return ", ".join(names)
