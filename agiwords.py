#!/usr/bin/python3
import gi
import os

gi.require_version("Gtk", "4.0")

from gi.repository import GLib, Gtk
from words import NOT_FOUND, WordsFormatError, load_words_file
from wordlistview import WordListView
from contextlib import contextmanager
from gui.filedialog import choose_words_file

from sys import argv


@contextmanager
def error_alert(window, text):
    dlg = Gtk.MessageDialog(
        transient_for=window,
        message_type=Gtk.MessageType.ERROR,
        buttons=Gtk.ButtonsType.CANCEL,
        text=text,
    )
    try:
        yield dlg
    finally:
        dlg.connect("response", lambda *x: dlg.destroy())
        dlg.set_visible(True)


class WordsWindow(Gtk.Window):
    """
    This window lists the vocabulary of a game, with synonyms grouped by
    their word number. A search entry looks up a single word, and a header
    bar lets you open another vocabulary file.
    """

    def __init__(self):
        Gtk.Window.__init__(self)
        self.table = None

        self.title_label = Gtk.Label(label="AGI Words")
        self.title_label.add_css_class("title")

        self.header_bar = Gtk.HeaderBar()
        self.header_bar.set_title_widget(self.title_label)

        self.open_button = Gtk.Button(label="_Open", use_underline=True)
        self.open_button.connect("clicked", self.on_open)
        self.header_bar.pack_start(self.open_button)

        self.set_titlebar(self.header_bar)

        self.list_view = WordListView()

        self.scroller = Gtk.ScrolledWindow(hexpand=True, vexpand=True)
        self.scroller.set_policy(Gtk.PolicyType.NEVER, Gtk.PolicyType.AUTOMATIC)
        self.scroller.set_child(self.list_view)

        self.search_box = Gtk.Box(
            orientation=Gtk.Orientation.HORIZONTAL,
            spacing=5,
            margin_top=5,
            margin_bottom=5,
        )

        self.search_entry = Gtk.SearchEntry(hexpand=True)
        self.search_entry.set_margin_start(5)
        self.search_entry.connect("search-changed", self.on_search_changed)

        self.status_label = Gtk.Label(label="", halign=Gtk.Align.END)
        self.status_label.set_margin_end(5)
        self.search_box.append(self.search_entry)
        self.search_box.append(self.status_label)

        vBox = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, vexpand=True)
        vBox.append(self.scroller)
        vBox.append(Gtk.Separator())
        vBox.append(self.search_box)
        self.set_child(vBox)

        self.set_default_size(600, 500)

    def load(self, path):
        """Loads a vocabulary file and shows it. If this fails, the error is
        displayed and the words shown before are kept."""
        try:
            table = load_words_file(path)
        except (OSError, WordsFormatError) as e:
            with error_alert(self, "Could not read the vocabulary.") as dlg:
                dlg.format_secondary_text(str(e))
            return False

        self.table = table
        self.title_label.set_label(os.path.basename(path))
        self.list_view.show_table(table)
        self.search_entry.set_text("")
        self.status_label.set_label(f"{len(table)} words")
        self.search_entry.grab_focus()
        return True

    def on_open(self, data):
        """Handles the open button."""

        def on_chosen(path):
            if path:
                self.load(path)

        choose_words_file(self, on_chosen)

    def on_search_changed(self, entry):
        """Looks up the word as typed; the match must be exact."""
        if self.table is None:
            return

        text = entry.get_text().strip()
        if text == "":
            self.list_view.highlight(None)
            self.status_label.set_label(f"{len(self.table)} words")
            return

        number = self.table.find_word(text)
        if number == NOT_FOUND:
            self.list_view.highlight(None)
            self.status_label.set_label(f"'{text}' not found")
        else:
            self.list_view.highlight(number)
            self.status_label.set_label(f"'{text}' is word {number}")


def start(loop, words_path):
    if words_path:
        win = WordsWindow()
        win.connect("close-request", lambda *x: loop.quit())
        win.set_visible(True)
        win.load(words_path)
    else:
        loop.quit()


def main():
    loop = GLib.MainLoop()

    if len(argv) >= 2:
        start(loop, argv[1])
    else:
        choose_words_file(None, lambda path: start(loop, path))

    loop.run()


if __name__ == "__main__":
    main()
