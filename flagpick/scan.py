from typing import Optional, Sequence


class Scan:
    """
    A cursor over a list of command-line tokens.

    The token list is never modified, scanning only moves the offset.
    """

    _src: Sequence[str]
    _off: int

    def __init__(self, src: Sequence[str], off: int = 0):
        """
        Initializes a new `Scan` object.

        Args:
            src: The tokens to scan.
            off: The starting offset within the tokens.
        """
        self._src = src
        self._off = off

    def curr(self) -> Optional[str]:
        """
        Returns the current token, or None if at the end of the tokens.
        """
        if self.eof():
            return None
        return self._src[self._off]

    def next(self) -> Optional[str]:
        """
        Advances the scanner to the next token and returns it.
        """
        if self.eof():
            return None

        self._off += 1
        return self.curr()

    def peek(self, off: int = 1) -> Optional[str]:
        """
        Peeks at the token `off` positions ahead of the current one.
        """
        if self._off + off >= len(self._src):
            return None

        return self._src[self._off + off]

    def eof(self) -> bool:
        return self._off >= len(self._src)

    def isKey(self, name: str) -> bool:
        """
        Checks if the current token is `name`, either bare or in the `name=value` form.
        """
        tok = self.curr()
        if tok is None:
            return False
        return tok == name or tok.startswith(name + "=")

    def seekKey(self, name: str) -> bool:
        """
        Advances the scanner to the next token matching `name`, starting from the
        current one.

        Returns:
            True if a matching token was found, False if the end was reached.
        """
        while not self.eof():
            if self.isKey(name):
                return True
            self.next()
        return False
