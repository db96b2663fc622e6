import logging
from collections import namedtuple

from extraction import ByteSource

logger = logging.getLogger(__name__)

HEADER_SIZE = 52  # 26 letter offsets, 2 bytes each
NOT_FOUND = -1
CHAR_MASK = 0x7F


class Entry(namedtuple("Entry", ["text", "number"])):
    """A word in the vocabulary.

    text - the word itself, exactly as stored (usually lowercase).
    number - the word number; words sharing a number are synonyms.
    """

    __slots__ = ()

    def __str__(self):
        return self.text


class WordsFormatError(ValueError):
    """Raised when the word data cannot be decoded; offset is the position
    in the file of the byte at fault."""

    def __init__(self, offset, message):
        ValueError.__init__(self, f"{message} (at offset {offset})")
        self.offset = offset


class WordTable:
    """The vocabulary of a game: maps word text to Entry objects.

    Words are only added while the table is loaded; after that nothing
    here changes it, so it can be read from several threads without locks.

    words - dict from text to Entry
    """

    def __init__(self):
        self.words = {}

    def __len__(self):
        return len(self.words)

    def __contains__(self, text):
        return text in self.words

    def add_word(self, number, text):
        """Adds a word, unless a word with the same text is already present;
        the first one added wins."""
        if text in self.words:
            logger.debug("Ignoring duplicate word '%s' (%d)", text, number)
            return

        self.words[text] = Entry(text, number)

    def find_word(self, text):
        """Returns the word number for 'text', or NOT_FOUND. The match is
        exact and case sensitive."""
        entry = self.words.get(text)
        if entry is None:
            return NOT_FOUND
        return entry.number

    def elements(self):
        """Iterates over every Entry, in no particular order."""
        return iter(self.words.values())

    def get_word_list(self):
        """Returns a new list of every Entry, sorted by text."""
        return sorted(self.words.values(), key=lambda e: e.text)

    def get_groups(self):
        """Groups synonyms together. This returns a list of tuples
        (number, texts) ordered by number, where texts is the sorted list
        of the words that have that number."""
        grouped = {}
        for entry in self.get_word_list():
            grouped.setdefault(entry.number, []).append(entry.text)
        return sorted(grouped.items())


def load_words_file(path):
    """Reads a WORDS.TOK file by name and returns its WordTable."""
    with open(path, "rb") as f:
        return load_words(f)


def load_words(file):
    """Reads the vocabulary from a binary file and returns a WordTable."""
    table = WordTable()
    load_word_table(table, ByteSource(file))
    return table


def load_word_table(table, source):
    """Decodes the words from 'source' into 'table'.

    Each word is stored as a count of characters to take from the start
    of the previous word, then the remaining characters, each XORed with
    0x7F, and the last of them with its top bit set too. The word number
    follows, hi byte first.

    The letter index at the start is skipped; the words are read straight
    through. A word that is cut off by the end of the data ends the load
    quietly and is dropped.

    This returns the number of words read, including duplicates that the
    table ignored. Raises WordsFormatError if a word takes a longer prefix
    than the previous word has.
    """
    source.skip(HEADER_SIZE)
    logger.debug("Skipped %d byte letter index", source.position)

    previous = None
    word_count = 0

    while True:
        prefix_length = source.read_byte()
        if prefix_length is None:
            break

        text = take_prefix(previous, prefix_length, source.position - 1)

        ch = None
        while True:
            ch = source.read_byte()
            if ch is None or ch == 0:
                break

            text += chr((ch & CHAR_MASK) ^ CHAR_MASK)
            if ch >= CHAR_MASK:
                break

        if ch is None or ch == 0:
            logger.debug("Word truncated at offset %d", source.position)
            break

        try:
            number = source.read_hilo()
        except EOFError:
            logger.debug("Word number for '%s' truncated", text)
            break

        table.add_word(number, text)
        word_count += 1
        previous = text

    logger.debug("Read %d words, %d distinct", word_count, len(table))
    return word_count


def take_prefix(previous, prefix_length, offset):
    """Returns the start of the previous word that the next word shares."""
    if prefix_length == 0:
        return ""

    if previous is None:
        raise WordsFormatError(offset, "First word cannot share a prefix")

    if prefix_length > len(previous):
        raise WordsFormatError(
            offset,
            f"Prefix of {prefix_length} is longer than previous word '{previous}'",
        )

    return previous[:prefix_length]
