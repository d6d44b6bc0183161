"""
Code generation utilities

Line-oriented C++ writer with indentation support.
"""


class CodeWriter:
    """Accumulates generated lines, indenting by a fixed number of spaces per level"""

    def __init__(self, indent_size: int = 4):
        self._lines: list[str] = []
        self._indent: int = 0
        self._indent_str: str = ' ' * indent_size

    def line(self, text: str = ''):
        """Add a line with current indentation"""
        if text:
            self._lines.append(self._indent_str * self._indent + text)
        else:
            self._lines.append('')

    def lines(self, *texts: str):
        """Add multiple lines"""
        for text in texts:
            self.line(text)

    def indent(self):
        """Increase indentation"""
        self._indent += 1

    def dedent(self):
        """Decrease indentation"""
        if self._indent > 0:
            self._indent -= 1

    def block(self, header: str, footer: str = '}'):
        """Context manager for a function body: header, '{', indented body, footer"""
        return _BlockContext(self, header, footer)

    def output(self) -> str:
        """Get generated code as string, newline terminated"""
        return '\n'.join(self._lines) + '\n'


class _BlockContext:
    """Context manager for indented code blocks"""

    def __init__(self, writer: CodeWriter, header: str, footer: str):
        self._writer = writer
        self._header = header
        self._footer = footer

    def __enter__(self):
        self._writer.line(self._header)
        self._writer.line('{')
        self._writer.indent()
        return self

    def __exit__(self, *args):
        self._writer.dedent()
        self._writer.line(self._footer)
        self._writer.line()
