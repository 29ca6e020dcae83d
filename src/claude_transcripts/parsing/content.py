"""Content items carried inside a transcript message.

A message's ``content`` field comes in two shapes:

- a plain string (older transcripts and most user prompts), which is
  shorthand for a single text item;
- an array of typed items, discriminated by their ``type`` field:
  ``text``, ``thinking``, ``tool_use``, ``tool_result`` and ``image``.

The variant set is closed. An array element that fits none of the
variants fails the whole array rather than being dropped.
"""

from typing import Annotated, Any, ClassVar, Literal, Optional

import pydantic
from pydantic import TypeAdapter


class ContentModel(pydantic.BaseModel):
    """Base for content models: strict, immutable, unknown keys ignored.

    Input keys must use the wire names (``type`` for an image source kind).
    """

    model_config = pydantic.ConfigDict(
        extra="ignore",
        strict=True,
        frozen=True,
    )

    # Optional fields left out of the serialized form when absent.
    omit_if_absent: ClassVar[tuple[str, ...]] = ()

    @pydantic.model_serializer(mode="wrap")
    def _serialize(self, handler: pydantic.SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        for name in self.omit_if_absent:
            if data.get(name) is None:
                data.pop(name, None)
        return data


class TextContent(ContentModel):
    type: Literal["text"] = "text"
    text: str


class ThinkingContent(ContentModel):
    """Extended-thinking block from an assistant turn."""

    omit_if_absent: ClassVar[tuple[str, ...]] = ("signature",)

    type: Literal["thinking"] = "thinking"
    thinking: str
    signature: Optional[str] = None


class ToolUseContent(ContentModel):
    """A tool invocation. ``input`` is kept as an opaque JSON value."""

    type: Literal["tool_use"] = "tool_use"
    id: str
    name: str
    input: Any


class ToolResultContent(ContentModel):
    """Output of a tool invocation, usually inside a ``user`` record."""

    omit_if_absent: ClassVar[tuple[str, ...]] = ("is_error",)

    type: Literal["tool_result"] = "tool_result"
    tool_use_id: str
    content: Any
    is_error: Optional[bool] = None


class ImageSource(ContentModel):
    kind: str = pydantic.Field(alias="type")  # "base64"
    media_type: str  # "image/png", "image/jpeg", ...
    data: str


class ImageContent(ContentModel):
    type: Literal["image"] = "image"
    source: ImageSource


ContentItem = Annotated[
    TextContent | ThinkingContent | ToolUseContent | ToolResultContent | ImageContent,
    pydantic.Field(discriminator="type"),
]

_content_adapter: TypeAdapter[list[ContentItem]] = TypeAdapter(list[ContentItem])


def expand_shorthand(value: Any) -> list[Any]:
    """Normalize a raw ``content`` value to a list of item dicts.

    A string becomes a single text item. Arrays pass through untouched
    for per-item validation. Any other JSON shape is rejected.
    """
    if isinstance(value, str):
        return [{"type": "text", "text": value}]
    if isinstance(value, list):
        return value
    raise ValueError(f"content must be a string or an array, got {type(value).__name__}")


def decode_content(value: Any) -> list[ContentItem]:
    """Decode a raw ``content`` JSON value into content items.

    Raises ``pydantic.ValidationError`` (or ``ValueError`` for a wrong
    top-level shape) when the value does not fit.
    """
    return _content_adapter.validate_python(expand_shorthand(value), strict=True)


def dump_content(items: list[ContentItem]) -> str:
    """Serialize content items back to a compact JSON array."""
    return _content_adapter.dump_json(items, by_alias=True).decode("utf-8")


def has_thinking(items: list[ContentItem]) -> bool:
    return any(isinstance(item, ThinkingContent) for item in items)


def has_tool_use(items: list[ContentItem]) -> bool:
    return any(isinstance(item, ToolUseContent) for item in items)


def has_images(items: list[ContentItem]) -> bool:
    return any(isinstance(item, ImageContent) for item in items)
