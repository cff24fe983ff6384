"""Page shell - Wrap rendered containers in a complete HTML document."""

from html import escape

from .target import RenderTarget

PAGE_TITLE = "Puppy Bowl"

_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
</head>
<body>
  <h1>{title}</h1>
  <form id="new-player-form">
{form}
  </form>
  <main>
{main}
  </main>
</body>
</html>
"""


def _indent(html: str, spaces: int = 4) -> str:
    pad = " " * spaces
    return "\n".join(pad + line if line else line for line in html.splitlines())


def build_page(main: RenderTarget, form: RenderTarget, title: str = PAGE_TITLE) -> str:
    """Build the full document from the main and form containers."""
    return _TEMPLATE.format(
        title=escape(title),
        form=_indent(form.html),
        main=_indent(main.html),
    )
