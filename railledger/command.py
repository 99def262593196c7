"""Tokenising a command line split on one delimiter character."""


class Command:
    """A line of text read token by token; parsing stops at a carriage return."""

    def __init__(self, text="", delimiter=" "):
        self.buffer = text
        self.delimiter = delimiter
        self.cur = 0
        self.cnt = 0
        self.timestamp = 0
        self.cur = self._skip_delimiters(0)
        self.count()

    def _skip_delimiters(self, i):
        while i < len(self.buffer) and self.buffer[i] == self.delimiter:
            i += 1
        return i

    def _token_end(self, i):
        while i < len(self.buffer) and self.buffer[i] not in (self.delimiter, "\r"):
            i += 1
        return i

    def next_token(self):
        """Return the next token, or an empty string when none is left."""
        length = len(self.buffer)
        if self.cur >= length:
            return ""
        end = self._token_end(self.cur)
        token = self.buffer[self.cur:end]
        while end < length and self.buffer[end] == self.delimiter and self.buffer[end] != "\r":
            end += 1
        self.cur = end
        return token

    def count(self):
        """Count the tokens in the whole line and store the result in ``cnt``."""
        length = len(self.buffer)
        total = 0
        i = self._skip_delimiters(0)
        while i < length and self.buffer[i] != "\r":
            end = self._token_end(i)
            if end != i:
                total += 1
            i = self._skip_delimiters(end)
        self.cnt = total
        return total

    def clear(self):
        self.buffer = ""
        self.cur = 0
        self.cnt = 0
        self.delimiter = " "

    def set_delimiter(self, delimiter):
        self.delimiter = delimiter

    def __iter__(self):
        while True:
            token = self.next_token()
            if not token:
                return
            yield token

    def __str__(self):
        return f"buffer: {self.buffer} cur: {self.cur} delimiter: {self.delimiter}"