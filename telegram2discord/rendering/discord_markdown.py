"""Discord Markdown primitives used by the converter.

The composed header ``**name**`` is parsed back by the reply annotator, so
``discord_bold`` and ``parse_header_name`` must stay in sync.
"""

BOLD = "**"

# Telegram entity type -> symmetric Discord delimiter
WRAP_DELIMITERS = {
    "bold": "**",
    "italic": "*",
    "underline": "__",
    "strikethrough": "~~",
    "spoiler": "||",
    "code": "`",
}


def discord_bold(text: str) -> str:
    """Wrap text in bold delimiters. No escaping; the header is round-tripped."""
    return f"{BOLD}{text}{BOLD}"


def discord_mention(member_id: str | int) -> str:
    return f"<@{member_id}>"


def discord_wrap(text: str, delimiter: str) -> str:
    if not text:
        return text
    return f"{delimiter}{text}{delimiter}"


def discord_code_block(text: str, language: str | None = None) -> str:
    return f"```{language or ''}\n{text}```"


def discord_quote(text: str, prefix: str = "> ") -> str:
    """Prefix every line of text with a quote marker."""
    return prefix + text.replace("\n", "\n" + prefix)


def discord_link(label: str, url: str) -> str:
    return f"[{label}]({url})"


def parse_header_name(line: str) -> str:
    """
    Recover the display name from a composed header line.

    Strips only the surrounding bold delimiters ``compose`` adds, e.g.
    ``**Alice**`` -> ``Alice``. Any other character is part of the name.
    """
    name = line.strip()
    if len(name) > 2 * len(BOLD) and name.startswith(BOLD) and name.endswith(BOLD):
        return name[len(BOLD) : -len(BOLD)]
    return name


def compose(display_name: str, body: str) -> str:
    """Build the wire text: bold name header, newline, body."""
    return f"{discord_bold(display_name)}\n{body}"
