from rich.style import Style
from rich.text import Text
from textual.widgets import Static

NO_SPRITE = "(sin imagen)"


class SpriteLink(Static):
    """Sprite reference rendered as a clickable terminal hyperlink."""

    DEFAULT_CSS = """
    SpriteLink {
        width: 100%;
        content-align: center middle;
        color: #888888;
    }
    """

    def __init__(self, image_url: str | None, label: str = "sprite", **kwargs) -> None:
        self.image_url = image_url
        if image_url:
            content = Text(f"[{label}]", style=Style(link=image_url))
        else:
            content = Text(NO_SPRITE)
        super().__init__(content, **kwargs)
