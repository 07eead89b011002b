"""Builders for small pieces of builder markup used across tests."""


def section(*columns: str) -> str:
    """Wrap column bodies into one section."""
    body = "".join(f'[et_pb_column type="4_4"]{column}[/et_pb_column]' for column in columns)
    return f'[et_pb_section fb_built="1"]{body}[/et_pb_section]'


def text(inner: str) -> str:
    return f'[et_pb_text _builder_version="3.0"]{inner}[/et_pb_text]'


def image(src: str) -> str:
    return f'[et_pb_image src="{src}" align="center"][/et_pb_image]'


def button(url: str, label: str) -> str:
    return f'[et_pb_button button_url="{url}" button_text="{label}"][/et_pb_button]'


def row(*items: str) -> str:
    return f"[et_pb_row]{''.join(items)}[/et_pb_row]"
