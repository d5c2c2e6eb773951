"""
Terminal highlighting of hex dump text using Pygments.
"""

from typing import Any, Dict, Final, List, Tuple

from pygments import highlight
from pygments.formatters import Terminal256Formatter, TerminalFormatter
from pygments.lexers.hexdump import HexdumpLexer
from pygments.token import Token
from pygments.util import ClassNotFound

DUMP_COLORS: Final[Dict[str, str]] = {
    'offset': 'offset',
    'byte': 'byte',
    'ascii': 'ascii',
    'punctuation': 'punctuation',
    'default': 'default',
}

TOKEN_CATEGORY_MAP: Final[Dict[Any, str]] = {
    Token.Name.Label: DUMP_COLORS['offset'],
    Token.Number.Hex: DUMP_COLORS['byte'],
    Token.String: DUMP_COLORS['ascii'],
    Token.Punctuation: DUMP_COLORS['punctuation'],
    Token.Text: DUMP_COLORS['default'],
    Token.Text.Whitespace: DUMP_COLORS['default'],
}


class DumpHighlighter:
    """Colours the offset / hex / ASCII columns of a hex dump."""

    def __init__(self, style: str = 'default', use_256_colors: bool = False) -> None:
        self.lexer = HexdumpLexer()
        try:
            if use_256_colors:
                self.formatter = Terminal256Formatter(style=style)
            else:
                self.formatter = TerminalFormatter()
        except ClassNotFound:
            self.formatter = TerminalFormatter()

    def highlight(self, text: str) -> str:
        """Return text wrapped in ANSI colour escapes."""

        if not text:
            return text

        return highlight(text, self.lexer, self.formatter)

    def tokens(self, line: str) -> List[Tuple[str, str]]:
        """
        Split one dump row into (text, category) pairs.

        Args:
            line: A single hex dump row

        Returns:
            A list of (text, category) tuples where category is one of the
            DUMP_COLORS keys
        """

        return [
            (text, self._get_token_category(token_type))
            for token_type, text in self.lexer.get_tokens(line)
        ]

    def _get_token_category(self, token_type: Any) -> str:
        if token_type in TOKEN_CATEGORY_MAP:
            return TOKEN_CATEGORY_MAP[token_type]

        while token_type.parent:
            token_type = token_type.parent
            if token_type in TOKEN_CATEGORY_MAP:
                return TOKEN_CATEGORY_MAP[token_type]

        return DUMP_COLORS['default']
