from extraction import LETTER_COUNT
from words import CHAR_MASK, HEADER_SIZE

MAX_PREFIX = 0xFF
MAX_NUMBER = 0xFFFF
LAST_CHAR_FLAG = 0x80


def pack_word_table(table):
    """Encodes a WordTable as a WORDS.TOK image, in alphabetical order."""
    return pack_words(table.get_word_list())


def write_words(file, entries):
    """Writes the encoded entries to a binary file."""
    file.write(pack_words(entries))


def pack_words(entries):
    """Encodes a sequence of (text, number) pairs as a WORDS.TOK image.

    The words are written in the order given, each sharing as much of
    the previous word as it can. The letter index at the front records
    where the first word for each letter starts.

    Raises ValueError if a word cannot be represented.
    """
    index = [0] * LETTER_COUNT
    records = bytearray()
    previous = ""

    for text, number in entries:
        if len(text) == 0:
            raise ValueError("Words cannot be empty.")

        offset = HEADER_SIZE + len(records)
        letter = letter_slot(text)
        if letter is not None and index[letter] == 0:
            if offset > MAX_NUMBER:
                raise ValueError(f"'{text}' starts beyond the reach of the letter index.")
            index[letter] = offset

        prefix_length = common_prefix_length(previous, text)
        if prefix_length == len(text):
            # at least one character must be stored
            prefix_length -= 1

        records.append(prefix_length)
        records += pack_chars(text[prefix_length:])
        records += pack_number(number)
        previous = text

    header = bytearray()
    for offset in index:
        header += pack_number(offset)

    return bytes(header + records)


def pack_chars(chars):
    """Encodes the characters of a word after its prefix."""
    packed = bytearray()
    for i, c in enumerate(chars):
        code = ord(c)
        if code > CHAR_MASK:
            raise ValueError(f"'{c}' is not a 7-bit character.")

        b = code ^ CHAR_MASK
        if i == len(chars) - 1:
            b |= LAST_CHAR_FLAG
        elif b == 0 or b == CHAR_MASK:
            # these would read back as the end of the word
            raise ValueError(f"{code:#04x} can only be the last character of a word.")
        packed.append(b)
    return packed


def pack_number(number):
    """Encodes a 16-bit value, hi byte first."""
    if number < 0 or number > MAX_NUMBER:
        raise ValueError(f"{number} does not fit in 16 bits.")
    return bytes([number >> 8, number & 0xFF])


# Utility Functions


def common_prefix_length(previous, text):
    """Counts the leading characters two words share, up to what a prefix byte can hold."""
    length = 0
    limit = min(len(previous), len(text), MAX_PREFIX)
    while length < limit and previous[length] == text[length]:
        length += 1
    return length


def letter_slot(text):
    """Returns the letter index slot (0-25) for a word, or None if the word
    does not start with a letter A-Z."""
    if len(text) == 0:
        return None

    first = text[0].upper()
    if "A" <= first <= "Z":
        return ord(first) - ord("A")
    return None
