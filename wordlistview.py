#!/usr/bin/python3

from gi.repository import Pango
from gi.repository import Gtk


class WordListView(Gtk.TextView):
    """Shows the synonym groups of a WordTable, one group per line,
    and can pick out the group for a word number."""

    def __init__(self, **kwargs):
        self.buffer = Gtk.TextBuffer()
        Gtk.TextView.__init__(
            self, buffer=self.buffer, editable=False, cursor_visible=False, **kwargs
        )
        self.set_wrap_mode(Gtk.WrapMode.WORD)
        self.marks_by_number = {}

        self.number_tag = self.buffer.create_tag("number", weight=Pango.Weight.BOLD)
        self.found_tag = self.buffer.create_tag(
            "found", underline=Pango.Underline.SINGLE, background="yellow"
        )

    def show_table(self, table):
        """Replaces the text with the groups from 'table'."""
        self.clear()
        iter = self.buffer.get_end_iter()
        for number, texts in table.get_groups():
            if self.buffer.get_char_count() > 0:
                self.buffer.insert(iter, "\n")
            self.marks_by_number[number] = self.buffer.create_mark(None, iter, True)
            self.buffer.insert_with_tags(iter, f"{number}:", self.number_tag)
            self.buffer.insert(iter, " " + " ".join(texts))

    def clear(self):
        """Clears the text from this view."""
        start = self.buffer.get_start_iter()
        end = self.buffer.get_end_iter()
        self.buffer.delete(start, end)

        for mark in self.marks_by_number.values():
            self.buffer.delete_mark(mark)
        self.marks_by_number = {}

    def highlight(self, number):
        """Marks the line for a word number and scrolls to it. Passing None,
        or a number that is not shown, just removes the old highlight."""
        start = self.buffer.get_start_iter()
        end = self.buffer.get_end_iter()
        self.buffer.remove_tag(self.found_tag, start, end)

        mark = self.marks_by_number.get(number)
        if mark is None:
            return

        line_start = self.buffer.get_iter_at_mark(mark)
        line_end = line_start.copy()
        if not line_end.ends_line():
            line_end.forward_to_line_end()
        self.buffer.apply_tag(self.found_tag, line_start, line_end)
        self.scroll_to_mark(mark, 0.0, True, 0.0, 0.2)
