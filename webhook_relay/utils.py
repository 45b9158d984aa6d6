import re

# Caracteres especiais do Markdown legado do Telegram
_MARKDOWN_SPECIAL = re.compile(r"([_*`\[])")


def escape_markdown(text) -> str:
    """Escapa texto fora de entidades (valores)."""
    if not text:
        return ""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", str(text))


def bold(text) -> str:
    """Negrito no Markdown legado.

    Dentro de uma entidade o Telegram não aceita escape: '_', '`' e '[' ficam
    literais e cada '*' fecha o negrito, vira '\\*' e o negrito é reaberto
    ('a*b:' -> '*a*\\**b:*').
    """
    return "\\*".join(f"*{part}*" if part else "" for part in str(text).split("*"))


def format_duration(milliseconds) -> str:
    return f"{float(milliseconds):.2f} ms"


def format_field(key, value_text) -> str:
    return f"{bold(f'{key}:')} {escape_markdown(value_text)}"
