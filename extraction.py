LETTER_COUNT = 26


class ByteSource:
    """Reads the raw bytes of a vocabulary file, one at a time.

    file - a binary file-like object; only its read() method is used.
    position - number of bytes consumed so far.

    Errors raised by the file itself (OSError) are not caught here.
    """

    def __init__(self, file):
        self.file = file
        self.position = 0

    def read_byte(self):
        """Reads the next byte as an integer 0-255, or returns None at the end of data."""
        data = self.file.read(1)
        if len(data) == 0:
            return None

        self.position += 1
        return data[0]

    def read_hilo(self):
        """Reads an unsigned 16-bit value stored hi byte first.

        Raises EOFError if fewer than two bytes remain.
        """
        data = self.file.read(2)
        self.position += len(data)
        if len(data) < 2:
            raise EOFError(f"16-bit value expected at offset {self.position - len(data)}")
        return hilo(data, 0)

    def skip(self, count):
        """Discards up to 'count' bytes. Running out of data is not an error
        here; the next read will report it."""
        while count > 0:
            data = self.file.read(count)
            if len(data) == 0:
                break
            self.position += len(data)
            count -= len(data)


# Utility Functions


def hilo(data, offset):
    """Decodes the big-endian 16-bit value at 'offset' in 'data'."""
    return (data[offset] << 8) | data[offset + 1]


def read_letter_index(source):
    """Reads the letter index at the start of a vocabulary file.

    This returns a list of 26 offsets, one for each letter A-Z. Each is
    the absolute file offset of the first word starting with that letter,
    or 0 if there are no such words.
    """
    return [source.read_hilo() for i in range(0, LETTER_COUNT)]


def letter_offsets(index):
    """Pairs up the letter index with its letters, as (letter, offset) tuples,
    leaving out the letters with no words."""
    return [
        (chr(ord("A") + i), offset) for i, offset in enumerate(index) if offset != 0
    ]
